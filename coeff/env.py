"""Environment comonad - a value paired with the context it was computed in.

``EnvContainer(value, env)`` carries an ambient parameter alongside the value
instead of leaving it in module-level state. Computations that need the
context receive the whole container through :meth:`Comonad.extend`; those
that don't use :meth:`Comonad.map`.

Laws (checked in :mod:`coeff.laws`)::

    c.extend(extract) == c
    c.extend(f).extract() == f(c)
    c.extend(f).extend(g) == c.extend(lambda d: g(d.extend(f)))
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from coeff.maybe import NOTHING, Maybe, Some

T = TypeVar("T")
V = TypeVar("V")
W = TypeVar("W")
O = TypeVar("O")  # noqa: E741
R = TypeVar("R")


class Comonad(ABC, Generic[T, V]):
    """Context-carrying container parametric over value ``T`` and context ``V``.

    Implementations supply ``extract``, ``map`` and ``duplicate``; ``extend``
    is derived from them here and nowhere else.
    """

    __slots__ = ()

    @abstractmethod
    def extract(self) -> T:
        """Return the focused value, discarding the context."""

    @abstractmethod
    def map(self, func: Callable[[T], O]) -> Comonad[O, V]:
        """Apply ``func`` to the value, keeping the context."""

    @abstractmethod
    def duplicate(self) -> Comonad[Comonad[T, V], V]:
        """Wrap the whole container as its own value."""

    def extend(self, func: Callable[[Comonad[T, V]], O]) -> Comonad[O, V]:
        """Run a context-aware ``func`` over the full container.

        ``func`` sees value and context together and returns a plain result,
        which becomes the new value; the context is carried over unchanged.
        """
        return self.duplicate().map(func)


@dataclass(frozen=True)
class EnvContainer(Comonad[T, V], Generic[T, V]):
    """Immutable ``(value, env)`` pair.

    Every operation returns a new container; ``env`` is never rebound except
    through :meth:`local`.

    Attributes:
        value: The focused value.
        env: The ambient context the value is computed against.
    """

    value: T
    env: V

    @classmethod
    def of(cls, value: T, env: V) -> EnvContainer[T, V]:
        return cls(value=value, env=env)

    def extract(self) -> T:
        return self.value

    def map(self, func: Callable[[T], O]) -> EnvContainer[O, V]:
        return EnvContainer(value=func(self.value), env=self.env)

    def duplicate(self) -> EnvContainer[EnvContainer[T, V], V]:
        return EnvContainer(value=self, env=self.env)

    # Narrows the return type; the behaviour is Comonad.extend.
    def extend(self, func: Callable[[EnvContainer[T, V]], O]) -> EnvContainer[O, V]:
        return super().extend(func)  # type: ignore[arg-type,return-value]

    def ask(self, key: Any) -> Maybe[Any]:
        """Look ``key`` up in a mapping environment.

        Returns ``Some(env[key])`` when the key is present and ``NOTHING``
        otherwise. Raises ``TypeError`` if ``env`` is not a mapping.
        """
        if not isinstance(self.env, Mapping):
            raise TypeError(
                f"ask() requires a mapping environment, got {type(self.env).__name__}"
            )
        if key in self.env:
            return Some(self.env[key])
        return NOTHING

    def asks(self, func: Callable[[V], R]) -> R:
        """Project a result out of the environment."""
        return func(self.env)

    def local(self, func: Callable[[V], W]) -> EnvContainer[T, W]:
        """Return a copy whose environment is ``func(env)``."""
        return EnvContainer(value=self.value, env=func(self.env))


__all__ = ["Comonad", "EnvContainer"]
