"""Settings for the example drivers, read from environment variables.

    COEFF_SEED         seed for the random u16 sample (unset: OS entropy)
    COEFF_HEIGHT       environment value for the comonad/volume examples
    COEFF_DELTA        amount added by the overflow example
    COEFF_INDEX        position picked from the random sample
    COEFF_SAMPLE_SIZE  length of the random sample
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass, replace
from typing import Any, TypeVar

from coeff.arith import U16_MAX
from coeff.errors import InvalidConfigError

T = TypeVar("T")

DEFAULT_HEIGHT = 15.0
DEFAULT_DELTA = 586
DEFAULT_INDEX = 4
DEFAULT_SAMPLE_SIZE = 10


def _read(
    environ: Mapping[str, str],
    name: str,
    parse: Callable[[str], T],
    expected: str,
    default: T,
) -> T:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        return parse(raw.strip())
    except ValueError as exc:
        raise InvalidConfigError(name, raw, expected) from exc


@dataclass(frozen=True)
class ExampleConfig:
    """Inputs for :mod:`coeff.examples`.

    Attributes:
        seed: Random seed, or ``None`` for a fresh sample each run.
        height: Environment carried by the comonad examples.
        delta: Amount added to the selected sample value.
        index: Position of the selected sample value.
        sample_size: Number of random u16 values generated.
    """

    seed: int | None = None
    height: float = DEFAULT_HEIGHT
    delta: int = DEFAULT_DELTA
    index: int = DEFAULT_INDEX
    sample_size: int = DEFAULT_SAMPLE_SIZE

    def __post_init__(self) -> None:
        if self.sample_size <= 0:
            raise InvalidConfigError("COEFF_SAMPLE_SIZE", str(self.sample_size), "positive int")
        if not 0 <= self.delta <= U16_MAX:
            raise InvalidConfigError("COEFF_DELTA", str(self.delta), f"u16 int (0..{U16_MAX})")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ExampleConfig:
        env = os.environ if environ is None else environ
        return cls(
            seed=_read(env, "COEFF_SEED", int, "int", None),
            height=_read(env, "COEFF_HEIGHT", float, "float", DEFAULT_HEIGHT),
            delta=_read(env, "COEFF_DELTA", int, "int", DEFAULT_DELTA),
            index=_read(env, "COEFF_INDEX", int, "int", DEFAULT_INDEX),
            sample_size=_read(env, "COEFF_SAMPLE_SIZE", int, "int", DEFAULT_SAMPLE_SIZE),
        )

    def override(self, **changes: Any) -> ExampleConfig:
        """Return a copy with the non-``None`` ``changes`` applied."""
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


__all__ = ["ExampleConfig"]
