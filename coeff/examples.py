"""Example drivers for the two effect carriers.

``monad_example`` threads a randomly chosen u16 through an overflow-checked
addition. ``comonad_example`` shows that ``map`` and ``extend`` agree for a
context-free step. ``volume_example`` computes a cylinder volume whose
height comes from the container's environment rather than a global.
"""

from __future__ import annotations

import logging
import math
import random
from dataclasses import dataclass
from typing import Any

from coeff.arith import U16_MAX, lookup, safe_add
from coeff.config import ExampleConfig
from coeff.env import EnvContainer
from coeff.maybe import Maybe
from coeff.ops import extend, extract

logger = logging.getLogger(__name__)


def add_one(x: float) -> float:
    return x + 1.0


def add_one_pure(container: EnvContainer[float, Any]) -> float:
    """Context-aware ``add_one``: re-extracts the value and ignores ``env``."""
    return container.extract() + 1.0


def random_u16s(rng: random.Random, count: int) -> tuple[int, ...]:
    """Draw ``count`` values uniformly from ``[0, U16_MAX]``."""
    return tuple(rng.randint(0, U16_MAX) for _ in range(count))


@dataclass(frozen=True)
class MonadOutcome:
    sample: tuple[int, ...]
    selected: Maybe[int]
    result: Maybe[int]

    def to_dict(self) -> dict[str, Any]:
        return {
            "sample": list(self.sample),
            "selected": self.selected.to_optional(),
            "result": self.result.to_optional(),
        }


@dataclass(frozen=True)
class ComonadOutcome:
    """Results of the comonad example.

    Attributes:
        mapped: ``map(add_one)`` applied to the container.
        extended: ``extract(extend(container, add_one_pure))``.
        followup_method: ``add_one_pure`` over ``container.extend(add_one_pure)``.
        followup_function: Same as above through the free-function ``extend``.
    """

    mapped: EnvContainer[float, float]
    extended: float
    followup_method: float
    followup_function: float

    @property
    def agree(self) -> bool:
        return self.mapped.value == self.extended

    def to_dict(self) -> dict[str, Any]:
        return {
            "mapped": self.mapped.value,
            "extended": self.extended,
            "env": self.mapped.env,
            "followup_method": self.followup_method,
            "followup_function": self.followup_function,
            "agree": self.agree,
        }


@dataclass(frozen=True)
class VolumeOutcome:
    radius: float
    height: float
    volume: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "radius": self.radius,
            "height": self.height,
            "volume": self.volume,
        }


def monad_example(
    rng: random.Random | None = None,
    *,
    config: ExampleConfig | None = None,
    quiet: bool = False,
) -> MonadOutcome:
    """Pick one random u16 and add ``config.delta`` to it without overflowing.

    With the default config the sample has 10 values and index 4 is always in
    range, so a ``NOTHING`` result can only come from overflow.
    """
    cfg = config if config is not None else ExampleConfig()
    generator = rng if rng is not None else random.Random(cfg.seed)

    sample = random_u16s(generator, cfg.sample_size)
    logger.debug("generated sample %s", sample)

    selected = lookup(sample, cfg.index)
    result = safe_add(selected, cfg.delta)
    if result.is_none():
        logger.debug("no result for index %d (selected=%r)", cfg.index, selected)

    if not quiet:
        print(repr(result))
    return MonadOutcome(sample=sample, selected=selected, result=result)


def comonad_example(
    *, config: ExampleConfig | None = None, quiet: bool = False
) -> ComonadOutcome:
    """Compare ``map(add_one)`` with ``extend(add_one_pure)`` on ``(14.0, height)``."""
    cfg = config if config is not None else ExampleConfig()
    container: EnvContainer[float, float] = EnvContainer(value=14.0, env=cfg.height)

    mapped = container.map(add_one)
    extended = extract(extend(container, add_one_pure))

    followup_method = add_one_pure(container.extend(add_one_pure))
    followup_function = add_one_pure(extend(container, add_one_pure))  # type: ignore[arg-type]

    if not quiet:
        print(f"{mapped.value} == {extended}")
    return ComonadOutcome(
        mapped=mapped,
        extended=extended,
        followup_method=followup_method,
        followup_function=followup_function,
    )


def cylinder_volume(container: EnvContainer[float, float]) -> float:
    """``pi * radius * height`` with the radius as value and the height as env."""
    return math.pi * container.value * container.env


def volume_example(
    radius: float = 14.0, *, config: ExampleConfig | None = None, quiet: bool = False
) -> VolumeOutcome:
    cfg = config if config is not None else ExampleConfig()

    container = EnvContainer(value=radius, env=cfg.height)
    volume = container.extend(cylinder_volume).extract()

    if not quiet:
        print(volume)
    return VolumeOutcome(
        radius=radius,
        height=cfg.height,
        volume=volume,
    )


__all__ = [
    "ComonadOutcome",
    "MonadOutcome",
    "VolumeOutcome",
    "add_one",
    "add_one_pure",
    "comonad_example",
    "cylinder_volume",
    "monad_example",
    "random_u16s",
    "volume_example",
]
