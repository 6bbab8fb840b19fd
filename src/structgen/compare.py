"""Kind-based comparison helpers exposed to code templates.

Values are classified into a small closed set of kinds before comparing.
Comparing values of different kinds is an error rather than a false result.
"""

from typing import Any

from structgen.exceptions import (
    IncompatibleComparisonTypesError,
    InvalidComparisonTypeError,
    MissingComparisonArgumentError,
)
from structgen.types import Kind, Unsigned

__all__ = [
    "classify",
    "eq",
    "lt",
    "le",
    "gt",
]

# bool and Unsigned subclass int, so they must be checked before it.
_KIND_BY_TYPE = (
    (bool, Kind.BOOL),
    (Unsigned, Kind.UINT),
    (int, Kind.INT),
    (float, Kind.FLOAT),
    (complex, Kind.COMPLEX),
    (str, Kind.STRING),
    ((list, tuple, bytes, bytearray), Kind.SEQUENCE),
)

_ORDERABLE = {Kind.INT, Kind.UINT, Kind.FLOAT, Kind.STRING}


def classify(value: Any) -> Kind:
    """Return the comparison kind of value.

    Raises:
        InvalidComparisonTypeError: If value is not one of the known kinds
            (None, mappings, arbitrary objects).
    """
    for types, kind in _KIND_BY_TYPE:
        if isinstance(value, types):
            return kind
    raise InvalidComparisonTypeError()


def eq(value: Any, *candidates: Any) -> bool:
    """Evaluate ``value == c1 or value == c2 or ...``.

    Every candidate is classified in turn; the first kind mismatch aborts the
    whole comparison even if an earlier candidate could have matched later on.
    """
    kind = classify(value)
    if not candidates:
        raise MissingComparisonArgumentError()
    for candidate in candidates:
        if classify(candidate) != kind:
            raise IncompatibleComparisonTypesError()
        if kind is Kind.SEQUENCE:
            raise InvalidComparisonTypeError()
        if value == candidate:
            return True
    return False


def lt(left: Any, right: Any) -> bool:
    """Evaluate ``left < right``.

    Booleans, complex numbers and sequences have no ordering.
    """
    kind = classify(left)
    if classify(right) != kind:
        raise IncompatibleComparisonTypesError()
    if kind not in _ORDERABLE:
        raise InvalidComparisonTypeError()
    return left < right


def le(left: Any, right: Any) -> bool:
    """Evaluate ``left <= right`` as ``lt or eq``."""
    if lt(left, right):
        return True
    return eq(left, right)


def gt(left: Any, right: Any) -> bool:
    """Evaluate ``left > right`` as the inverse of ``le``."""
    return not le(left, right)
