"""Executable functor and comonad laws.

Each predicate returns ``True`` when the law holds for the given container and
functions. Equality is the container's own ``==`` (structural on value and
env for :class:`~coeff.env.EnvContainer`).
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from frozendict import frozendict

from coeff.env import Comonad
from coeff.errors import LawViolationError

T = TypeVar("T")
V = TypeVar("V")
A = TypeVar("A")
B = TypeVar("B")


def functor_identity(container: Comonad[T, V]) -> bool:
    # map(c, id) == c
    return container.map(lambda x: x) == container


def functor_composition(
    container: Comonad[T, V],
    f: Callable[[T], A],
    g: Callable[[A], B],
) -> bool:
    # map(map(c, f), g) == map(c, g . f)
    return container.map(f).map(g) == container.map(lambda x: g(f(x)))


def right_identity(container: Comonad[T, V]) -> bool:
    # extend(c, extract) == c
    return container.extend(lambda d: d.extract()) == container


def left_identity(container: Comonad[T, V], f: Callable[[Comonad[T, V]], A]) -> bool:
    # extract(extend(c, f)) == f(c)
    return container.extend(f).extract() == f(container)


def associativity(
    container: Comonad[T, V],
    f: Callable[[Comonad[T, V]], A],
    g: Callable[[Comonad[A, V]], B],
) -> bool:
    # extend(extend(c, f), g) == extend(c, lambda d: g(extend(d, f)))
    lhs = container.extend(f).extend(g)
    rhs = container.extend(lambda d: g(d.extend(f)))
    return lhs == rhs


@dataclass(frozen=True)
class LawReport:
    """Outcome of every law for one container.

    Attributes:
        results: Law name mapped to whether it held.
    """

    results: Mapping[str, bool] = field(default_factory=frozendict)

    @property
    def ok(self) -> bool:
        return all(self.results.values())

    @property
    def failed(self) -> tuple[str, ...]:
        return tuple(name for name, held in self.results.items() if not held)

    def to_dict(self) -> dict[str, Any]:
        return {"ok": self.ok, "laws": dict(self.results)}


def check_all(
    container: Comonad[T, V],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    *,
    value_f: Callable[[T], Any],
    value_g: Callable[[Any], Any],
) -> LawReport:
    """Evaluate every law against ``container``.

    ``f`` and ``g`` are context-aware (they take a container) and drive the
    comonad laws. ``value_f`` and ``value_g`` take plain values and drive the
    functor composition law.
    """
    return LawReport(
        results=frozendict(
            {
                "functor_identity": functor_identity(container),
                "functor_composition": functor_composition(container, value_f, value_g),
                "right_identity": right_identity(container),
                "left_identity": left_identity(container, f),
                "associativity": associativity(container, f, g),
            }
        )
    )


def assert_laws(
    container: Comonad[T, V],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    *,
    value_f: Callable[[T], Any],
    value_g: Callable[[Any], Any],
) -> LawReport:
    """Like :func:`check_all` but raise :class:`LawViolationError` on failure."""
    report = check_all(container, f, g, value_f=value_f, value_g=value_g)
    if not report.ok:
        raise LawViolationError(report.failed)
    return report


__all__ = [
    "LawReport",
    "assert_laws",
    "associativity",
    "check_all",
    "functor_composition",
    "functor_identity",
    "left_identity",
    "right_identity",
]
