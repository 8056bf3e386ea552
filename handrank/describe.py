"""Human-readable labels for ranked hands."""

from __future__ import annotations

from types import MappingProxyType
from typing import Optional, Sequence, Tuple

from .models import HandRank, HandValue

RANK_WORDS = (
    "Two",
    "Three",
    "Four",
    "Five",
    "Six",
    "Seven",
    "Eight",
    "Nine",
    "Ten",
    "Jack",
    "Queen",
    "King",
    "Ace",
)
RANK_PLURALS = tuple("Sixes" if word == "Six" else f"{word}s" for word in RANK_WORDS)

HAND_RANK_NAMES = MappingProxyType(
    {
        HandRank.HIGH_CARD: "High Card",
        HandRank.ONE_PAIR: "One Pair",
        HandRank.TWO_PAIR: "Two Pair",
        HandRank.THREE_OF_A_KIND: "Three of a Kind",
        HandRank.STRAIGHT: "Straight",
        HandRank.FLUSH: "Flush",
        HandRank.FULL_HOUSE: "Full House",
        HandRank.FOUR_OF_A_KIND: "Four of a Kind",
        HandRank.STRAIGHT_FLUSH: "Straight Flush",
        HandRank.ROYAL_FLUSH: "Royal Flush",
    }
)

HAND_RANK_EMOJIS = MappingProxyType(
    {
        HandRank.HIGH_CARD: "🎴",
        HandRank.ONE_PAIR: "🎴",
        HandRank.TWO_PAIR: "🎴🎴",
        HandRank.THREE_OF_A_KIND: "🎴🎴🎴",
        HandRank.STRAIGHT: "➡️",
        HandRank.FLUSH: "💎",
        HandRank.FULL_HOUSE: "🏠",
        HandRank.FOUR_OF_A_KIND: "🎴🎴🎴🎴",
        HandRank.STRAIGHT_FLUSH: "🌟",
        HandRank.ROYAL_FLUSH: "👑",
    }
)


def rank_name(rank: HandRank) -> str:
    return HAND_RANK_NAMES[HandRank(rank)]


def rank_display(rank: HandRank) -> Tuple[str, str]:
    """Return ``(emoji, name)`` for a hand category."""
    rank = HandRank(rank)
    return HAND_RANK_EMOJIS[rank], HAND_RANK_NAMES[rank]


def describe_hand(value: HandValue) -> str:
    """Describe a ranked hand, e.g. ``"Full House, Kings full of Twos"``.

    Everything is read from the tiebreaker vector, so the wording only
    depends on the hand's strength and never on which suits made it. A
    wheel has a tiebreaker of 3 and therefore reads ``"Five high"``.
    """
    top = value.tiebreakers
    rank = value.rank
    if rank == HandRank.ROYAL_FLUSH:
        return "Royal Flush"
    if rank == HandRank.STRAIGHT_FLUSH:
        return f"Straight Flush, {RANK_WORDS[top[0]]} high"
    if rank == HandRank.FOUR_OF_A_KIND:
        return f"Four of a Kind, {RANK_PLURALS[top[0]]}"
    if rank == HandRank.FULL_HOUSE:
        return f"Full House, {RANK_PLURALS[top[0]]} full of {RANK_PLURALS[top[1]]}"
    if rank == HandRank.FLUSH:
        return f"Flush, {RANK_WORDS[top[0]]} high"
    if rank == HandRank.STRAIGHT:
        return f"Straight, {RANK_WORDS[top[0]]} high"
    if rank == HandRank.THREE_OF_A_KIND:
        return f"Three of a Kind, {RANK_PLURALS[top[0]]}"
    if rank == HandRank.TWO_PAIR:
        return f"Two Pair, {RANK_PLURALS[top[0]]} and {RANK_PLURALS[top[1]]}"
    if rank == HandRank.ONE_PAIR:
        return f"Pair of {RANK_PLURALS[top[0]]}"
    return f"{RANK_WORDS[top[0]]} high"


def describe_quick(value: HandValue, hole_ranks: Sequence[int]) -> str:
    """Shorter live-play wording that calls out what the hole cards add.

    Board-only made hands fall back to the bare category name so the player
    is not told they hold something everybody at the table shares.
    """
    top = value.tiebreakers
    rank = value.rank
    if rank == HandRank.ROYAL_FLUSH:
        return "Royal Flush!"
    if rank == HandRank.STRAIGHT_FLUSH:
        return f"Straight Flush, {RANK_WORDS[top[0]]} high"
    if rank == HandRank.FOUR_OF_A_KIND:
        if top[0] in hole_ranks:
            return f"Four {RANK_PLURALS[top[0]]}"
        return "Four of a Kind"
    if rank == HandRank.FULL_HOUSE:
        if top[0] in hole_ranks:
            return f"Full House, {RANK_PLURALS[top[0]]} full"
        return "Full House"
    if rank == HandRank.FLUSH:
        return "Flush"
    if rank == HandRank.STRAIGHT:
        return f"Straight, {RANK_WORDS[top[0]]} high"
    if rank == HandRank.THREE_OF_A_KIND:
        if top[0] in hole_ranks:
            return f"Three {RANK_PLURALS[top[0]]}"
        return "Three of a Kind"
    pocket = _pocket_rank(hole_ranks)
    if rank == HandRank.TWO_PAIR:
        if pocket is not None and pocket in top[:2]:
            return f"Two Pair, Pocket {RANK_PLURALS[pocket]}"
        return f"Two Pair, {RANK_PLURALS[top[0]]} and {RANK_PLURALS[top[1]]}"
    if rank == HandRank.ONE_PAIR:
        if pocket is not None and pocket == top[0]:
            return f"Pocket {RANK_PLURALS[pocket]}"
        return f"Pair of {RANK_PLURALS[top[0]]}"
    return f"{RANK_WORDS[top[0]]} high"


def _pocket_rank(hole_ranks: Sequence[int]) -> Optional[int]:
    if len(hole_ranks) == 2 and hole_ranks[0] == hole_ranks[1]:
        return hole_ranks[0]
    return None
