import pytest

from handrank.evaluator import InvalidCardCount, detect_hand, evaluate_best_hand
from handrank.models import HandRank

from .helpers import cards, random_cards


@pytest.mark.parametrize(
    "hole, board",
    [
        (["Ah", "Kd"], []),
        (["Ah", "Kd"], ["2c", "3d"]),
        (["Ah"], ["2c", "3d", "9s", "Th"]),
        (["Ah", "Kd", "Qc"], ["2c", "3d", "9s"]),
    ],
)
def test_detect_hand_returns_none_without_enough_cards(hole, board):
    assert detect_hand(cards(*hole), cards(*board)) is None


def test_detect_hand_rejects_oversized_board():
    with pytest.raises(InvalidCardCount):
        detect_hand(cards("Ah", "Kd"), cards("2c", "3d", "9s", "Th", "4h", "5s"))


@pytest.mark.parametrize(
    "hole, board, expected_rank, expected",
    [
        (["Kh", "Kd"], ["2c", "7h", "9s"], HandRank.ONE_PAIR, "Pocket Kings"),
        (["Kh", "3d"], ["Kc", "7h", "9s"], HandRank.ONE_PAIR, "Pair of Kings"),
        (["7h", "7d"], ["7c", "Ks", "2d"], HandRank.THREE_OF_A_KIND, "Three Sevens"),
        (["Ah", "Kd"], ["7c", "7h", "7s"], HandRank.THREE_OF_A_KIND, "Three of a Kind"),
        (["Kh", "Kd"], ["9c", "9s", "2h"], HandRank.TWO_PAIR, "Two Pair, Pocket Kings"),
        (["Kh", "9d"], ["Kc", "9s", "2h"], HandRank.TWO_PAIR, "Two Pair, Kings and Nines"),
        (["Ah", "2d"], ["Ad", "Ac", "As"], HandRank.FOUR_OF_A_KIND, "Four Aces"),
        (["3h", "2d"], ["Ks", "Kh", "Kd", "Kc"], HandRank.FOUR_OF_A_KIND, "Four of a Kind"),
        (["Kh", "2d"], ["Kc", "Ks", "2h"], HandRank.FULL_HOUSE, "Full House, Kings full"),
        (["Ah", "3d"], ["Qc", "Qs", "Qh", "9d", "9h"], HandRank.FULL_HOUSE, "Full House"),
        (["Ah", "Kh"], ["Qh", "Jh", "Th"], HandRank.ROYAL_FLUSH, "Royal Flush!"),
        (["9s", "8s"], ["7s", "6s", "5s"], HandRank.STRAIGHT_FLUSH, "Straight Flush, Nine high"),
        (["Ah", "2h"], ["9h", "6h", "Jh"], HandRank.FLUSH, "Flush"),
        (["Ah", "2d"], ["3c", "4s", "5h"], HandRank.STRAIGHT, "Straight, Five high"),
        (["Ah", "2d"], ["9c", "6s", "Jh"], HandRank.HIGH_CARD, "Ace high"),
    ],
)
def test_detect_hand_wording(hole, board, expected_rank, expected):
    quick = detect_hand(cards(*hole), cards(*board))
    assert quick is not None
    assert quick.rank == expected_rank
    assert quick.description == expected


def test_detect_hand_carries_display_name_and_emoji():
    quick = detect_hand(cards("Ah", "Kh"), cards("Qh", "Jh", "Th"))
    assert quick is not None
    assert quick.name == "Royal Flush"
    assert quick.emoji == "👑"
    assert quick.to_payload() == {
        "rank": 9,
        "name": "Royal Flush",
        "emoji": "👑",
        "description": "Royal Flush!",
    }


@pytest.mark.parametrize("board_size", [3, 4, 5])
def test_quick_and_full_evaluators_agree(board_size):
    for seed in range(200):
        drawn = random_cards(2 + board_size, seed=seed)
        hole, board = drawn[:2], drawn[2:]
        quick = detect_hand(hole, board)
        full = evaluate_best_hand(hole + board)
        assert quick is not None
        assert quick.rank == full.rank, f"seed={seed}"
