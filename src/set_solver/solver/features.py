"""
Card features.

Each of the four attributes has exactly three values. Members are coded with
the single bits 1, 2 and 4 so the third value of a set can be derived from
any two with a bitwise OR and XOR.
"""

from enum import IntEnum
from typing import Dict, Tuple, Type, TypeVar

from .errors import InvalidLiteral

F = TypeVar("F", bound="Feature")

ALL_BITS = 0b111


class Feature(IntEnum):
    """Base class for the card attributes."""

    @classmethod
    def from_code(cls: Type[F], code: str) -> F:
        """Parse the single-character code of a member."""
        try:
            return _CODES[cls][code]
        except (KeyError, TypeError):
            raise InvalidLiteral(code, f"invalid {cls.__name__.lower()} code") from None

    @property
    def code(self) -> str:
        return _SYMBOLS[type(self), self.value]

    @property
    def ordinal(self) -> int:
        """Position of the member within its attribute (0, 1 or 2)."""
        return self.value.bit_length() - 1

    @classmethod
    def from_ordinal(cls: Type[F], ordinal: int) -> F:
        return cls(1 << ordinal)

    def third(self: F, other: F) -> F:
        """
        The value completing a set with ``self`` and ``other``.

        Equal values complete with themselves (all the same); two different
        values complete with the remaining one (all different).
        """
        mixed = self | other
        if mixed == self:
            return self
        return type(self)(mixed ^ ALL_BITS)

    def __str__(self):
        return self.name.title()


class Quantity(Feature):
    ONE = 1
    TWO = 2
    THREE = 4


class Fill(Feature):
    SOLID = 1
    TRANSLUCENT = 2
    OUTLINED = 4


class Color(Feature):
    GREEN = 1
    PURPLE = 2
    RED = 4


class Shape(Feature):
    OVAL = 1
    SQUIGGLE = 2
    DIAMOND = 4


# Card code order
DIMENSIONS = (Quantity, Fill, Color, Shape)

_CODES: Dict[type, Dict[str, Feature]] = {
    Quantity: {"1": Quantity.ONE, "2": Quantity.TWO, "3": Quantity.THREE},
    Fill: {"S": Fill.SOLID, "T": Fill.TRANSLUCENT, "O": Fill.OUTLINED},
    Color: {"G": Color.GREEN, "P": Color.PURPLE, "R": Color.RED},
    Shape: {"O": Shape.OVAL, "S": Shape.SQUIGGLE, "D": Shape.DIAMOND},
}
# Members of different attributes compare equal as ints, so key by type too
_SYMBOLS: Dict[Tuple[type, int], str] = {
    (type(member), member.value): symbol
    for codes in _CODES.values()
    for symbol, member in codes.items()
}


def third_value(a: F, b: F) -> F:
    """Module-level form of :meth:`Feature.third`."""
    return a.third(b)
