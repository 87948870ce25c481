"""
Set-finding algorithm.

A valid Set consists of 3 cards where, for each attribute,
the values are either ALL THE SAME or ALL DIFFERENT.

Any two distinct cards have exactly one card that completes them into a Set,
so instead of testing every triple we compute that card for each pair and
look it up on the board.
"""

import logging
from dataclasses import dataclass
from itertools import chain, product
from typing import FrozenSet, Iterable, List, Optional, Sequence, Set, Tuple

from .errors import InvalidLiteral
from .features import DIMENSIONS, Color, Fill, Quantity, Shape

logger = logging.getLogger(__name__)

CODE_LENGTH = len(DIMENSIONS)


@dataclass(frozen=True)
class Card:
    """A Set card with 4 attributes."""
    quantity: Quantity
    fill: Fill
    color: Color
    shape: Shape

    @classmethod
    def from_code(cls, code: str) -> "Card":
        """Parse a 4-character code such as ``"3TPS"`` (quantity, fill, color, shape)."""
        if not isinstance(code, str) or len(code) != CODE_LENGTH:
            raise InvalidLiteral(code, f"card code must be {CODE_LENGTH} characters")
        try:
            attrs = [dim.from_code(char) for dim, char in zip(DIMENSIONS, code)]
        except InvalidLiteral as exc:
            raise InvalidLiteral(code, f"invalid card code ({exc})") from exc
        return cls(*attrs)

    @property
    def code(self) -> str:
        return "".join(attr.code for attr in self.to_tuple())

    def to_tuple(self) -> Tuple[Quantity, Fill, Color, Shape]:
        return (self.quantity, self.fill, self.color, self.shape)

    def __str__(self):
        return ":".join(str(attr) for attr in self.to_tuple())


def missing_card(lhs: Card, rhs: Card) -> Card:
    """
    The unique card that completes a Set with ``lhs`` and ``rhs``.

    Meaningless when ``lhs == rhs`` (the result is the same card again),
    callers are expected to skip that case.
    """
    return Card(
        quantity=lhs.quantity.third(rhs.quantity),
        fill=lhs.fill.third(rhs.fill),
        color=lhs.color.third(rhs.color),
        shape=lhs.shape.third(rhs.shape),
    )


def is_valid_set(card1: Card, card2: Card, card3: Card) -> bool:
    """Check if three distinct cards form a valid Set."""
    if card1 == card2 or card1 == card3 or card2 == card3:
        return False
    return missing_card(card1, card2) == card3


class CardSet:
    """
    Three cards forming a Set, compared without regard to order.

    Identity is the sorted tuple of card codes, so the same triple found from
    different starting pairs hashes and compares equal.
    """

    __slots__ = ("cards", "card_set", "key")

    def __init__(self, card1: Card, card2: Card, card3: Card):
        self.cards = (card1, card2, card3)
        self.card_set: FrozenSet[Card] = frozenset(self.cards)
        self.key: Tuple[str, ...] = tuple(sorted(card.code for card in self.cards))

    def isdisjoint(self, cards: Iterable[Card]) -> bool:
        return self.card_set.isdisjoint(cards)

    def codes(self) -> List[str]:
        return list(self.key)

    def __iter__(self):
        return iter(self.cards)

    def __eq__(self, other):
        if not isinstance(other, CardSet):
            return NotImplemented
        return self.key == other.key

    def __hash__(self):
        return hash(self.key)

    def __str__(self):
        return "(" + ", ".join(str(card) for card in self.cards) + ")"

    def __repr__(self):
        return f"CardSet({', '.join(self.key)})"


@dataclass(frozen=True)
class Board:
    """The cards under analysis, flattened row by row."""
    cards: Tuple[Card, ...]

    @classmethod
    def from_layout(cls, rows: Iterable[Iterable[str]]) -> "Board":
        """Build a board from a (possibly jagged) 2D layout of card codes."""
        return cls(tuple(Card.from_code(code) for code in chain.from_iterable(rows)))

    @classmethod
    def from_codes(cls, codes: Iterable[str]) -> "Board":
        return cls(tuple(Card.from_code(code) for code in codes))

    def __len__(self):
        return len(self.cards)

    def __iter__(self):
        return iter(self.cards)


def find_all_sets(board: Board) -> Set[CardSet]:
    """
    Find all valid Sets on the board.

    Checks each ordered pair of distinct cards against a hash index of the
    board, O(n^2) in the number of cards.
    """
    cards: Sequence[Card] = board.cards
    index = frozenset(cards)
    sets: Set[CardSet] = set()
    for card1 in cards:
        for card2 in cards:
            if card1 == card2:
                continue
            card3 = missing_card(card1, card2)
            if card3 in index and card3 != card1 and card3 != card2:
                sets.add(CardSet(card1, card2, card3))
    logger.info(f"Found {len(sets)} valid sets among {len(cards)} cards")
    return sets


def cards_in_sets(sets: Iterable[CardSet]) -> FrozenSet[Card]:
    """All cards taking part in at least one of the given Sets."""
    return frozenset(chain.from_iterable(card_set.cards for card_set in sets))


def find_first_set(board: Board) -> Optional[CardSet]:
    """Find the first valid Set in board order, or None if no Set exists."""
    cards = board.cards
    index = frozenset(cards)
    for i, card1 in enumerate(cards):
        for card2 in cards[i + 1:]:
            if card1 == card2:
                continue
            card3 = missing_card(card1, card2)
            if card3 in index and card3 != card1 and card3 != card2:
                return CardSet(card1, card2, card3)
    return None


# --- Utilities ---

def generate_all_cards() -> List[Card]:
    """Generate all 81 unique Set cards."""
    return [Card(*attrs) for attrs in product(*DIMENSIONS)]


def card_to_index(card: Card) -> int:
    """Convert card to unique index (0-80)."""
    return (card.quantity.ordinal * 27 + card.fill.ordinal * 9
            + card.color.ordinal * 3 + card.shape.ordinal)


def index_to_card(idx: int) -> Card:
    """Convert index (0-80) to card."""
    if not 0 <= idx < 81:
        raise ValueError(f"card index out of range: {idx}")
    shape = idx % 3
    idx //= 3
    color = idx % 3
    idx //= 3
    fill = idx % 3
    idx //= 3
    quantity = idx
    return Card(
        Quantity.from_ordinal(quantity),
        Fill.from_ordinal(fill),
        Color.from_ordinal(color),
        Shape.from_ordinal(shape),
    )
