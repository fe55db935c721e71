"""Tests for EnvContainer and the Comonad base class."""

from dataclasses import FrozenInstanceError

import pytest
from frozendict import frozendict

from coeff import NOTHING, Comonad, EnvContainer, Some


class TestPrimitives:
    def test_extract_returns_value(self) -> None:
        assert EnvContainer(14.0, 15.0).extract() == 14.0

    def test_map_keeps_env(self) -> None:
        mapped = EnvContainer(14.0, 15.0).map(lambda x: x + 1.0)

        assert mapped == EnvContainer(15.0, 15.0)

    def test_map_can_change_value_type(self) -> None:
        mapped = EnvContainer(3, "ctx").map(str)

        assert mapped.value == "3"
        assert mapped.env == "ctx"

    def test_duplicate_nests_the_whole_container(self) -> None:
        container = EnvContainer(1, "ctx")
        nested = container.duplicate()

        assert nested.value == container
        assert nested.env == "ctx"
        assert nested.value.env == nested.env

    def test_extend_passes_full_container(self) -> None:
        seen = []

        def f(d: EnvContainer[int, int]) -> int:
            seen.append(d)
            return d.value * d.env

        container = EnvContainer(3, 4)
        result = container.extend(f)

        assert seen == [container]
        assert result == EnvContainer(12, 4)

    def test_of_constructor(self) -> None:
        assert EnvContainer.of(1, 2) == EnvContainer(value=1, env=2)


class TestImmutability:
    def test_fields_cannot_be_assigned(self) -> None:
        container = EnvContainer(1, 2)

        with pytest.raises(FrozenInstanceError):
            container.value = 5  # type: ignore[misc]

    def test_operations_leave_input_unchanged(self) -> None:
        env = frozendict(height=15.0)
        container = EnvContainer(14.0, env)

        container.map(lambda x: x * 2)
        container.extend(lambda d: d.value + d.env["height"])
        container.local(lambda e: e.set("height", 1.0))

        assert container == EnvContainer(14.0, frozendict(height=15.0))
        assert container.env is env

    def test_equality_is_structural(self) -> None:
        assert EnvContainer(1, 2) == EnvContainer(1, 2)
        assert EnvContainer(1, 2) != EnvContainer(1, 3)
        assert EnvContainer(1, 2) != EnvContainer(2, 2)


class TestReaderHelpers:
    def test_ask_present_and_missing(self) -> None:
        container = EnvContainer(1, frozendict(height=15.0))

        assert container.ask("height") == Some(15.0)
        assert container.ask("width") is NOTHING

    def test_ask_requires_mapping_env(self) -> None:
        with pytest.raises(TypeError, match="mapping environment"):
            EnvContainer(1, 15.0).ask("height")

    def test_asks_projects_env(self) -> None:
        assert EnvContainer(1, (2, 3)).asks(sum) == 5

    def test_local_replaces_env_only(self) -> None:
        container = EnvContainer("v", 10)

        assert container.local(lambda e: e * 2) == EnvContainer("v", 20)


def test_comonad_is_abstract() -> None:
    with pytest.raises(TypeError):
        Comonad()  # type: ignore[abstract]


def test_extend_is_derived_for_any_comonad() -> None:
    class Identity(Comonad[int, None]):
        def __init__(self, value: int) -> None:
            self.value = value

        def extract(self) -> int:
            return self.value

        def map(self, func):
            return Identity(func(self.value))

        def duplicate(self):
            return Identity(self)  # type: ignore[arg-type]

    assert Identity(2).extend(lambda d: d.extract() * 10).extract() == 20
