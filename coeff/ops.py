"""Free-function forms of the environment comonad operations.

These only delegate to the methods on :class:`~coeff.env.Comonad` so the two
call styles can never drift apart. ``lift`` and ``extending`` return the
curried ``container -> container`` form, handy when passing an operation
around as a value.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from coeff.env import Comonad, EnvContainer
from coeff.maybe import Maybe

T = TypeVar("T")
V = TypeVar("V")
W = TypeVar("W")
O = TypeVar("O")  # noqa: E741
R = TypeVar("R")


def extract(container: Comonad[T, V]) -> T:
    return container.extract()


def fmap(container: Comonad[T, V], func: Callable[[T], O]) -> Comonad[O, V]:
    return container.map(func)


def duplicate(container: Comonad[T, V]) -> Comonad[Comonad[T, V], V]:
    return container.duplicate()


def extend(container: Comonad[T, V], func: Callable[[Comonad[T, V]], O]) -> Comonad[O, V]:
    return container.extend(func)


def lift(func: Callable[[T], O]) -> Callable[[Comonad[T, V]], Comonad[O, V]]:
    """Turn ``T -> O`` into ``Comonad[T, V] -> Comonad[O, V]``."""

    def _lifted(container: Comonad[T, V]) -> Comonad[O, V]:
        return container.map(func)

    return _lifted


def extending(
    func: Callable[[Comonad[T, V]], O],
) -> Callable[[Comonad[T, V]], Comonad[O, V]]:
    """Turn ``Comonad[T, V] -> O`` into ``Comonad[T, V] -> Comonad[O, V]``."""

    def _extended(container: Comonad[T, V]) -> Comonad[O, V]:
        return container.extend(func)

    return _extended


def ask(container: EnvContainer[T, Any], key: Any) -> Maybe[Any]:
    return container.ask(key)


def asks(container: EnvContainer[T, V], func: Callable[[V], R]) -> R:
    return container.asks(func)


def local(container: EnvContainer[T, V], func: Callable[[V], W]) -> EnvContainer[T, W]:
    return container.local(func)


__all__ = [
    "ask",
    "asks",
    "duplicate",
    "extend",
    "extending",
    "extract",
    "fmap",
    "lift",
    "local",
]
