"""Core type definitions for structgen."""

from enum import Enum

__all__ = [
    "Kind",
    "Unsigned",
]


class Kind(Enum):
    """Closed set of value kinds the comparison helpers understand."""

    BOOL = "bool"
    INT = "int"
    UINT = "uint"
    FLOAT = "float"
    COMPLEX = "complex"
    STRING = "string"
    SEQUENCE = "sequence"


class Unsigned(int):
    """Integer tagged as unsigned when it enters the template environment.

    Plain ``int`` values are classified as signed.
    """

    def __new__(cls, value: int = 0) -> "Unsigned":
        if value < 0:
            raise ValueError(f"Unsigned value cannot be negative: {value}")
        return super().__new__(cls, value)
