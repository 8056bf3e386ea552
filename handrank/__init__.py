"""Poker hand ranking primitives shared by the display host and scripts."""

from .cards import Card, card_label, card_name, decode, encode, parse_cards, parse_label
from .describe import describe_hand, rank_display, rank_name
from .evaluator import (
    InvalidCardCount,
    best_hand_value,
    compare_hands,
    detect_hand,
    evaluate_best_hand,
    key_card_indices,
    rank_five,
    showdown,
)
from .models import EvaluatedHand, HandRank, HandValue, QuickHand, ShowdownEntry

__all__ = [
    "Card",
    "card_label",
    "card_name",
    "decode",
    "encode",
    "parse_cards",
    "parse_label",
    "describe_hand",
    "rank_display",
    "rank_name",
    "InvalidCardCount",
    "best_hand_value",
    "compare_hands",
    "detect_hand",
    "evaluate_best_hand",
    "key_card_indices",
    "rank_five",
    "showdown",
    "EvaluatedHand",
    "HandRank",
    "HandValue",
    "QuickHand",
    "ShowdownEntry",
]
