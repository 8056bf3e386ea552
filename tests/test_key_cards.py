import pytest

from handrank.evaluator import best_hand_value, evaluate_best_hand, key_card_indices
from handrank.models import HandRank

from .helpers import cards


@pytest.mark.parametrize(
    "labels, expected_rank, expected_keys",
    [
        (["Kh", "Kd", "Kc", "Ks", "2h", "7d", "9c"], HandRank.FOUR_OF_A_KIND, (0, 1, 2, 3)),
        (["Kh", "Kd", "Kc", "2s", "2h", "7d", "9c"], HandRank.FULL_HOUSE, (0, 1, 2, 3, 4)),
        (["7h", "7d", "7c", "As", "Qh", "3d", "2c"], HandRank.THREE_OF_A_KIND, (0, 1, 2)),
        (["Qh", "Qd", "Jc", "Js", "Ah", "3d", "2c"], HandRank.TWO_PAIR, (0, 1, 2, 3)),
        (["2h", "Jd", "Jc", "9s", "5h", "3d", "8c"], HandRank.ONE_PAIR, (1, 2)),
        (["2h", "Jd", "Kc", "9s", "5h", "3d", "8c"], HandRank.HIGH_CARD, (2,)),
        (["2d", "Ah", "Jh", "9h", "6h", "3h", "Kc"], HandRank.FLUSH, (1, 2, 3, 4, 5)),
        (["Kc", "9h", "8d", "7c", "6s", "5h", "2d"], HandRank.STRAIGHT, (1, 2, 3, 4, 5)),
    ],
)
def test_key_cards_exclude_kickers(labels, expected_rank, expected_keys):
    hand_cards = cards(*labels)
    hand = evaluate_best_hand(hand_cards)
    assert hand.rank == expected_rank
    assert hand.contributing_card_indices == expected_keys
    assert hand.contributing_cards == tuple(hand_cards[idx] for idx in expected_keys)


def test_two_pair_ignores_third_pair():
    hand_cards = cards("Qh", "Qd", "Jc", "Js", "4h", "4d", "Ac")
    value = best_hand_value(hand_cards)
    assert value.tiebreakers == (10, 9, 12)
    assert value.contributing_cards == (0, 1, 2, 3, 6)
    assert key_card_indices(value, hand_cards) == [0, 1, 2, 3]


def test_royal_flush_highlights_all_five():
    hand_cards = cards("2c", "Th", "Jh", "3d", "Qh", "Kh", "Ah")
    hand = evaluate_best_hand(hand_cards)
    assert hand.rank == HandRank.ROYAL_FLUSH
    assert hand.contributing_card_indices == (1, 2, 4, 5, 6)


def test_key_card_filter_leaves_value_untouched():
    hand_cards = cards("7h", "7d", "7c", "As", "Qh", "3d", "2c")
    value = best_hand_value(hand_cards)
    before = (value.rank, value.tiebreakers, value.contributing_cards)
    key_card_indices(value, hand_cards)
    assert (value.rank, value.tiebreakers, value.contributing_cards) == before
    assert evaluate_best_hand(hand_cards).value == value
