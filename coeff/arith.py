"""Overflow-checked unsigned arithmetic over ``Maybe``.

Python integers never overflow, so the unsigned width is explicit: every
helper takes ``bits`` (16 by default) and reports a result outside
``[0, 2**bits - 1]`` as ``NOTHING`` rather than wrapping or raising.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Final, TypeVar

from coeff.maybe import NOTHING, Maybe, Some

logger = logging.getLogger(__name__)

T = TypeVar("T")

U16_BITS: Final[int] = 16
U16_MAX: Final[int] = (1 << U16_BITS) - 1


def max_unsigned(bits: int = U16_BITS) -> int:
    """Largest value representable by an unsigned integer of ``bits`` width."""
    if bits <= 0:
        raise ValueError(f"bits must be positive, got {bits}")
    return (1 << bits) - 1


def _ensure_unsigned(value: int, *, bits: int, name: str) -> None:
    limit = max_unsigned(bits)
    if not 0 <= value <= limit:
        raise ValueError(f"{name}={value} does not fit in u{bits} (0..{limit})")


def checked_add(a: int, b: int, *, bits: int = U16_BITS) -> Maybe[int]:
    """Add two unsigned integers, returning ``NOTHING`` on overflow.

    Operands must already fit in ``bits``; passing one that does not is a
    caller bug and raises ``ValueError``.
    """
    _ensure_unsigned(a, bits=bits, name="a")
    _ensure_unsigned(b, bits=bits, name="b")
    total = a + b
    if total > max_unsigned(bits):
        logger.debug("u%d overflow: %d + %d = %d", bits, a, b, total)
        return NOTHING
    return Some(total)


def safe_add(maybe_value: Maybe[int], delta: int, *, bits: int = U16_BITS) -> Maybe[int]:
    """Add ``delta`` to an optional unsigned value.

    Absence of the input and overflow of the sum both yield ``NOTHING``; only
    when both steps succeed is ``Some(sum)`` returned.

    Example::

        safe_add(Some(5), 586)        # Some(591)
        safe_add(Some(U16_MAX), 1)    # NOTHING
        safe_add(NOTHING, 1)          # NOTHING
    """
    return maybe_value.flat_map(lambda value: checked_add(value, delta, bits=bits))


def lookup(items: Sequence[T], index: int) -> Maybe[T]:
    """Return ``Some(items[index])`` when ``index`` is in range, else ``NOTHING``.

    Negative indices are treated as out of range.
    """
    if 0 <= index < len(items):
        return Some(items[index])
    return NOTHING


__all__ = [
    "U16_BITS",
    "U16_MAX",
    "checked_add",
    "lookup",
    "max_unsigned",
    "safe_add",
]
