"""
coeff - optional-value and environment-carrying effect containers.

Two small effect carriers and the laws they obey:

- ``Maybe`` (``Some`` / ``NOTHING``) short-circuits a pipeline as soon as a
  step has no result, e.g. an out-of-range lookup or an unsigned overflow.
- ``EnvContainer`` pairs a value with the environment it is computed in, so
  context-aware steps receive their ambient parameters explicitly.

Example:
    >>> from coeff import EnvContainer, Some, safe_add
    >>> safe_add(Some(5), 586)
    Some(value=591)
    >>> c = EnvContainer(14.0, 15.0)
    >>> c.extend(lambda d: d.extract() + 1.0).extract()
    15.0
"""

from coeff.arith import U16_MAX, checked_add, lookup, max_unsigned, safe_add
from coeff.config import ExampleConfig
from coeff.env import Comonad, EnvContainer
from coeff.errors import CoeffError, InvalidConfigError, LawViolationError
from coeff.laws import LawReport, assert_laws, check_all
from coeff.maybe import NOTHING, Maybe, Nothing, Some
from coeff.ops import ask, asks, duplicate, extend, extending, extract, fmap, lift, local

__version__ = "0.1.0"

__all__ = [  # noqa: RUF022
    # Optional effect
    "Maybe",
    "Some",
    "Nothing",
    "NOTHING",
    # Environment comonad
    "Comonad",
    "EnvContainer",
    "extract",
    "fmap",
    "duplicate",
    "extend",
    "lift",
    "extending",
    "ask",
    "asks",
    "local",
    # Arithmetic
    "U16_MAX",
    "checked_add",
    "lookup",
    "max_unsigned",
    "safe_add",
    # Laws
    "LawReport",
    "check_all",
    "assert_laws",
    # Config & errors
    "ExampleConfig",
    "CoeffError",
    "InvalidConfigError",
    "LawViolationError",
]
