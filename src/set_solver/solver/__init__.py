from .errors import InvalidLiteral, OverlappingSetError, SearchLimitExceeded, SolverError
from .features import Color, Feature, Fill, Quantity, Shape, third_value
from .grouping import SetGroup, largest_set_group, possible_set_groups
from .set_finder import (
    Board, Card, CardSet,
    missing_card, is_valid_set, find_all_sets, find_first_set, cards_in_sets,
    generate_all_cards, card_to_index, index_to_card
)

__all__ = [
    'Card', 'Quantity', 'Fill', 'Color', 'Shape', 'Feature', 'third_value',
    'Board', 'CardSet', 'SetGroup',
    'missing_card', 'is_valid_set', 'find_all_sets', 'find_first_set', 'cards_in_sets',
    'possible_set_groups', 'largest_set_group',
    'generate_all_cards', 'card_to_index', 'index_to_card',
    'SolverError', 'InvalidLiteral', 'OverlappingSetError', 'SearchLimitExceeded',
]
