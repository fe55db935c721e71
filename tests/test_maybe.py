"""Tests for the Maybe carrier used by the arithmetic pipeline."""

import pytest

from coeff import NOTHING, Maybe, Nothing, Some


class TestPresence:
    def test_some_is_present_even_when_falsy(self) -> None:
        assert Some(0).is_some()
        assert not Some(0).is_none()
        assert Some(0)

    def test_nothing_is_absent(self) -> None:
        assert NOTHING.is_none()
        assert not NOTHING.is_some()
        assert not NOTHING

    def test_nothing_is_a_singleton(self) -> None:
        assert Nothing() is NOTHING
        assert isinstance(NOTHING, Maybe)
        assert repr(NOTHING) == "Nothing()"

    def test_some_compares_by_value(self) -> None:
        assert Some(591) == Some(591)
        assert Some(591) != Some(590)
        assert Some(1) != NOTHING


class TestChaining:
    def test_map_transforms_present_value(self) -> None:
        assert Some(5).map(lambda x: x + 586) == Some(591)

    def test_map_skips_nothing(self) -> None:
        calls = []

        assert NOTHING.map(calls.append) is NOTHING
        assert calls == []

    def test_flat_map_can_turn_present_into_absent(self) -> None:
        def halve(x: int) -> Maybe[int]:
            return Some(x // 2) if x % 2 == 0 else NOTHING

        assert Some(8).flat_map(halve).flat_map(halve) == Some(2)
        assert Some(6).flat_map(halve).flat_map(halve) is NOTHING

    def test_flat_map_never_calls_step_after_absence(self) -> None:
        calls = []

        def step(x: int) -> Maybe[int]:
            calls.append(x)
            return Some(x)

        assert NOTHING.flat_map(step).flat_map(step) is NOTHING
        assert calls == []

    def test_flat_map_rejects_plain_values(self) -> None:
        with pytest.raises(TypeError, match="expected Maybe"):
            Some(3).flat_map(lambda x: x + 1)  # type: ignore[arg-type, return-value]


def test_to_optional():
    assert Some(10).to_optional() == 10
    assert NOTHING.to_optional() is None
