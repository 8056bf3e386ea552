from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Tuple


class HandRank(IntEnum):
    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OF_A_KIND = 3
    STRAIGHT = 4
    FLUSH = 5
    FULL_HOUSE = 6
    FOUR_OF_A_KIND = 7
    STRAIGHT_FLUSH = 8
    ROYAL_FLUSH = 9


@dataclass(frozen=True)
class HandValue:
    # contributing_cards are positions into the caller's card list, not codes.
    rank: HandRank
    tiebreakers: Tuple[int, ...]
    contributing_cards: Tuple[int, ...]


@dataclass(frozen=True)
class EvaluatedHand:
    rank: HandRank
    rank_name: str
    description: str
    contributing_card_indices: Tuple[int, ...]
    contributing_cards: Tuple[int, ...]
    value: HandValue

    def to_payload(self) -> Dict[str, object]:
        return {
            "rank": int(self.rank),
            "rank_name": self.rank_name,
            "description": self.description,
            "contributing_card_indices": list(self.contributing_card_indices),
            "contributing_cards": list(self.contributing_cards),
        }


@dataclass(frozen=True)
class QuickHand:
    rank: HandRank
    name: str
    emoji: str
    description: str

    def to_payload(self) -> Dict[str, object]:
        return {
            "rank": int(self.rank),
            "name": self.name,
            "emoji": self.emoji,
            "description": self.description,
        }


@dataclass(frozen=True)
class ShowdownEntry:
    player: str
    hole: Tuple[int, ...]
    hand: EvaluatedHand
    is_best: bool = False
    is_winner: bool = False

    def to_payload(self) -> Dict[str, object]:
        payload: Dict[str, object] = {
            "player": self.player,
            "hole": list(self.hole),
            "is_best": self.is_best,
            "is_winner": self.is_winner,
        }
        payload.update(self.hand.to_payload())
        return payload


def showdown_payload(entries: List[ShowdownEntry], winner: Optional[str] = None) -> Dict[str, object]:
    return {
        "winner": winner,
        "entries": [entry.to_payload() for entry in entries],
    }
