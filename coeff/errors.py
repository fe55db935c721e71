from __future__ import annotations

from collections.abc import Iterable


class CoeffError(Exception):
    """Base class for errors raised by coeff."""


class LawViolationError(CoeffError, AssertionError):
    """Raised when a container fails one or more algebraic laws."""

    def __init__(self, failed: Iterable[str]) -> None:
        self.failed = tuple(failed)
        super().__init__(
            f"Laws violated: {', '.join(self.failed)}\n"
            "Hint: check that the mapped functions are pure and the container is not mutated"
        )


class InvalidConfigError(CoeffError, ValueError):
    """Raised when an environment variable holds a value that cannot be parsed."""

    def __init__(self, name: str, raw: str, expected: str) -> None:
        self.name = name
        self.raw = raw
        super().__init__(f"{name}={raw!r} is not a valid {expected}")


__all__ = ["CoeffError", "InvalidConfigError", "LawViolationError"]
