from __future__ import annotations

from typing import Iterable, List, NamedTuple, Sequence

# Cards travel as integers 0-51: rank = code // 4 (0 = "2" .. 12 = Ace),
# suit = code % 4 (0 = hearts, 1 = diamonds, 2 = clubs, 3 = spades).

RANK_SYMBOLS = ("2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A")
SUIT_GLYPHS = ("♥", "♦", "♣", "♠")

RANKS = "23456789TJQKA"
SUITS = "hdcs"

ACE = 12
FIVE = 3


class Card(NamedTuple):
    rank: int
    suit: int

    @property
    def code(self) -> int:
        return encode(self.rank, self.suit)

    @property
    def label(self) -> str:
        return f"{RANKS[self.rank]}{SUITS[self.suit]}"

    @property
    def name(self) -> str:
        return f"{RANK_SYMBOLS[self.rank]}{SUIT_GLYPHS[self.suit]}"


def decode(card: int) -> Card:
    rank, suit = divmod(card, 4)
    return Card(rank, suit)


def encode(rank: int, suit: int) -> int:
    return rank * 4 + suit


def rank_of(card: int) -> int:
    return card // 4


def rank_symbol(rank: int) -> str:
    return RANK_SYMBOLS[rank]


def card_name(card: int) -> str:
    """Display name such as ``"10♦"`` or ``"A♠"``."""
    return decode(card).name


def card_label(card: int) -> str:
    return decode(card).label


def cards_to_labels(cards: Iterable[int]) -> List[str]:
    return [card_label(card) for card in cards]


def parse_label(label: str) -> int:
    text = label.strip()
    if len(text) == 3 and text[:2] == "10":
        text = "T" + text[2]
    if len(text) != 2:
        raise ValueError(f"Invalid card label: {label}")
    rank = RANKS.find(text[0].upper())
    suit = SUITS.find(text[1].lower())
    if rank < 0 or suit < 0:
        raise ValueError(f"Invalid card label: {label}")
    return Card(rank, suit).code


def parse_cards(labels: Sequence[str]) -> List[int]:
    return [parse_label(label) for label in labels]
