"""Tests for SetGroup and the disjoint grouping search."""

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from set_solver.solver import (
    Board, Card, CardSet, OverlappingSetError, SearchLimitExceeded, SetGroup,
    find_all_sets, generate_all_cards, largest_set_group, possible_set_groups,
)


def card_set(*codes):
    return CardSet(*(Card.from_code(code) for code in codes))


A = card_set("3TPS", "2TGS", "1TRS")
B = card_set("2OGD", "3TRS", "1SPO")
OVERLAPS_A = card_set("1TRS", "2SRO", "3TRD")


def best_packing(sets):
    """Exhaustive maximum number of disjoint Sets."""
    sets = list(sets)
    if not sets:
        return 0
    first, rest = sets[0], sets[1:]
    without = best_packing(rest)
    with_first = 1 + best_packing([s for s in rest if s.isdisjoint(first.card_set)])
    return max(without, with_first)


# --- SetGroup ---

def test_add_grows_cards_by_three():
    group = SetGroup()
    group.add(A)
    assert len(group.cards) == 3
    group.add(B)
    assert len(group.cards) == 6
    assert len(group) == 2
    assert A in group and B in group


def test_add_rejects_overlap():
    group = SetGroup([A])
    with pytest.raises(OverlappingSetError):
        group.add(OVERLAPS_A)
    assert len(group) == 1
    assert len(group.cards) == 3


def test_constructor_rejects_overlap():
    with pytest.raises(OverlappingSetError):
        SetGroup([A, OVERLAPS_A])


def test_extended_leaves_original():
    group = SetGroup([A])
    bigger = group.extended(B)
    assert len(group) == 1
    assert len(bigger) == 2
    assert bigger.cards == A.card_set | B.card_set


def test_group_equality_ignores_order():
    assert SetGroup([A, B]) == SetGroup([B, A])
    assert hash(SetGroup([A, B])) == hash(SetGroup([B, A]))
    assert SetGroup([A]) != SetGroup([B])
    assert len({SetGroup([A, B]), SetGroup([B]).extended(A)}) == 1


def test_sorted_sets():
    assert SetGroup([A, B]).sorted_sets() == [B, A]


# --- Search ---

def test_no_sets_gives_empty_group():
    assert possible_set_groups([]) == set()
    assert len(largest_set_group([])) == 0


def test_single_set():
    assert possible_set_groups([A]) == {SetGroup([A])}
    assert largest_set_group([A]) == SetGroup([A])


def test_canonical_board_partitions(canonical_board, canonical_sets):
    sets = find_all_sets(canonical_board)
    best = largest_set_group(sets)
    assert len(best) == 4
    assert {card_set.key for card_set in best} == canonical_sets
    assert best.cards == frozenset(canonical_board.cards)
    # the partition is the only maximal group
    assert possible_set_groups(sets) == {best}


def test_plane_groups_are_parallel_classes(plane_board):
    sets = find_all_sets(plane_board)
    groups = possible_set_groups(sets)
    assert len(groups) == 4
    assert all(len(group) == 3 for group in groups)
    assert all(len(group.cards) == 9 for group in groups)


def test_overlapping_sets_keep_maximal_groups():
    # A and OVERLAPS_A share a card; B fits with either
    groups = possible_set_groups([A, B, OVERLAPS_A])
    assert groups == {SetGroup([A, B]), SetGroup([OVERLAPS_A, B])}


def test_search_is_size_stable(plane_board):
    sets = find_all_sets(plane_board)
    sizes = {len(largest_set_group(sets)) for _ in range(5)}
    assert sizes == {3}


def test_max_frontier(plane_board):
    sets = find_all_sets(plane_board)
    with pytest.raises(SearchLimitExceeded) as excinfo:
        possible_set_groups(sets, max_frontier=5)
    assert excinfo.value.limit == 5
    assert excinfo.value.frontier_size == 12
    assert len(largest_set_group(sets, max_frontier=12)) == 3


@settings(max_examples=40, deadline=None)
@given(st.lists(st.sampled_from(generate_all_cards()), max_size=9, unique=True).map(lambda picked: Board(tuple(picked))))
def test_largest_group_is_maximum_packing(board):
    sets = find_all_sets(board)
    best = largest_set_group(sets)
    assert len(best) == best_packing(sets)
    assert len(best.cards) == 3 * len(best)
    assert best.sets <= sets
    for group in possible_set_groups(sets):
        # every final group is maximal
        assert not any(group.is_disjoint(s) for s in sets)
