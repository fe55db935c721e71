"""Optional value carrier: ``Some(value)`` or the ``NOTHING`` singleton.

``Maybe`` is the short-circuiting effect behind :func:`coeff.arith.safe_add`.
Once a step produces ``NOTHING`` every later ``map``/``flat_map`` is skipped,
so an out-of-range lookup and an overflowing add end the same way.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Final, Generic, NoReturn, TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
U = TypeVar("U")


class Maybe(Generic[T_co]):
    """Base of ``Some`` and ``Nothing``; never instantiated directly."""

    __slots__ = ()

    def is_some(self) -> bool:
        return isinstance(self, Some)

    def is_none(self) -> bool:
        return self is NOTHING

    def map(self, func: Callable[[T_co], U]) -> Maybe[U]:
        """``Some(func(value))`` when present; ``NOTHING`` passes through."""

        if isinstance(self, Some):
            return Some(func(self.value))
        return NOTHING

    def flat_map(self, func: Callable[[T_co], Maybe[U]]) -> Maybe[U]:
        """Run a step that may itself come back empty.

        ``func`` is not called at all when this value is ``NOTHING``. It must
        return a ``Maybe``; anything else raises ``TypeError``.
        """

        if not isinstance(self, Some):
            return NOTHING
        produced = func(self.value)
        if not isinstance(produced, Maybe):
            raise TypeError(
                f"flat_map callback returned {type(produced).__name__}, expected Maybe"
            )
        return produced

    def to_optional(self) -> T_co | None:
        """Plain Python view: the value, or ``None`` when absent."""

        return self.value if isinstance(self, Some) else None

    def __bool__(self) -> bool:
        return self.is_some()


@dataclass(frozen=True)
class Some(Maybe[T], Generic[T]):
    value: T


class Nothing(Maybe[NoReturn]):
    """The single absent value; ``Nothing()`` always returns ``NOTHING``."""

    __slots__ = ()
    _instance: Nothing | None = None

    def __new__(cls) -> Nothing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Nothing()"


NOTHING: Final[Maybe[NoReturn]] = Nothing()


__all__ = ["NOTHING", "Maybe", "Nothing", "Some"]
