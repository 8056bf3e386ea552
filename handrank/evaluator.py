from __future__ import annotations

import functools
import itertools
import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from .cards import ACE, FIVE, decode, rank_of
from .describe import describe_hand, describe_quick, rank_display, rank_name
from .models import EvaluatedHand, HandRank, HandValue, QuickHand, ShowdownEntry

LOGGER = logging.getLogger(__name__)

MIN_CARDS = 5
MAX_CARDS = 7
WHEEL = (ACE, FIVE, FIVE - 1, FIVE - 2, FIVE - 3)


class InvalidCardCount(ValueError):
    def __init__(self, count: int) -> None:
        super().__init__(f"Must provide {MIN_CARDS}-{MAX_CARDS} cards, got {count}")
        self.count = count


def rank_five(cards: Sequence[int], indices: Optional[Sequence[int]] = None) -> HandValue:
    """Classify exactly five cards. ``indices`` are carried through untouched."""
    if indices is None:
        indices = range(len(cards))
    decoded = [decode(card) for card in cards]
    ranks = sorted((card.rank for card in decoded), reverse=True)
    is_flush = len({card.suit for card in decoded}) == 1
    straight_high = _straight_high(ranks)

    counts = [0] * 13
    for rank in ranks:
        counts[rank] += 1

    def ranks_with(count: int) -> List[int]:
        # Highest first, so ties inside a role resolve by rank value.
        return [rank for rank in range(12, -1, -1) if counts[rank] == count]

    quads, trips, pairs, singles = ranks_with(4), ranks_with(3), ranks_with(2), ranks_with(1)

    if is_flush and straight_high is not None and ranks[0] == ACE and ranks[4] == ACE - 4:
        category, tiebreakers = HandRank.ROYAL_FLUSH, ranks
    elif is_flush and straight_high is not None:
        category, tiebreakers = HandRank.STRAIGHT_FLUSH, [straight_high]
    elif quads:
        category, tiebreakers = HandRank.FOUR_OF_A_KIND, [quads[0]] + singles[:1]
    elif trips and pairs:
        category, tiebreakers = HandRank.FULL_HOUSE, [trips[0], pairs[0]]
    elif is_flush:
        category, tiebreakers = HandRank.FLUSH, ranks
    elif straight_high is not None:
        category, tiebreakers = HandRank.STRAIGHT, [straight_high]
    elif trips:
        category, tiebreakers = HandRank.THREE_OF_A_KIND, [trips[0]] + singles
    elif len(pairs) == 2:
        category, tiebreakers = HandRank.TWO_PAIR, pairs + singles[:1]
    elif len(pairs) == 1:
        category, tiebreakers = HandRank.ONE_PAIR, pairs + singles
    else:
        category, tiebreakers = HandRank.HIGH_CARD, ranks

    return HandValue(rank=category, tiebreakers=tuple(tiebreakers), contributing_cards=tuple(indices))


def _straight_high(ranks: Sequence[int]) -> Optional[int]:
    # ranks must be sorted descending.
    if all(ranks[idx] == ranks[idx + 1] + 1 for idx in range(len(ranks) - 1)):
        return ranks[0]
    if tuple(ranks) == WHEEL:
        return FIVE
    return None


def compare_hands(first: HandValue, second: HandValue) -> int:
    """Return 1 if ``first`` is stronger, -1 if weaker, 0 on a tie."""
    if first.rank != second.rank:
        return 1 if first.rank > second.rank else -1
    for left, right in itertools.zip_longest(first.tiebreakers, second.tiebreakers, fillvalue=0):
        if left != right:
            return 1 if left > right else -1
    return 0


hand_sort_key = functools.cmp_to_key(compare_hands)


def best_hand_value(cards: Sequence[int]) -> HandValue:
    """Best five-card hand out of 5-7 cards.

    Subsets are visited in lexicographic index order and the running best is
    only replaced on a strict improvement, so among equally strong subsets
    the first one enumerated is reported.
    """
    if not MIN_CARDS <= len(cards) <= MAX_CARDS:
        raise InvalidCardCount(len(cards))
    if len(cards) == MIN_CARDS:
        return rank_five(cards)

    best: Optional[HandValue] = None
    for indices in itertools.combinations(range(len(cards)), MIN_CARDS):
        candidate = rank_five([cards[idx] for idx in indices], indices)
        if best is None or compare_hands(candidate, best) > 0:
            best = candidate
    assert best is not None
    LOGGER.debug("Best hand %s %s from indices %s", best.rank.name, best.tiebreakers, best.contributing_cards)
    return best


def key_card_indices(value: HandValue, cards: Sequence[int]) -> List[int]:
    """Positions of the cards that make the hand, kickers excluded."""
    positions = list(value.contributing_cards)
    ranks = [rank_of(cards[idx]) for idx in positions]

    if value.rank in (HandRank.FOUR_OF_A_KIND, HandRank.THREE_OF_A_KIND, HandRank.ONE_PAIR):
        made = {value.tiebreakers[0]}
    elif value.rank == HandRank.TWO_PAIR:
        made = set(value.tiebreakers[:2])
    elif value.rank == HandRank.HIGH_CARD:
        high = max(ranks)
        return [positions[ranks.index(high)]]
    else:
        return positions
    return [idx for idx, rank in zip(positions, ranks) if rank in made]


def evaluate_best_hand(cards: Sequence[int]) -> EvaluatedHand:
    value = best_hand_value(cards)
    key_indices = key_card_indices(value, cards)
    return EvaluatedHand(
        rank=value.rank,
        rank_name=rank_name(value.rank),
        description=describe_hand(value),
        contributing_card_indices=tuple(key_indices),
        contributing_cards=tuple(cards[idx] for idx in key_indices),
        value=value,
    )


def detect_hand(hole: Sequence[int], community: Sequence[int]) -> Optional[QuickHand]:
    """Live in-hand readout; ``None`` until five cards are known."""
    if len(hole) != 2:
        return None
    cards = list(hole) + list(community)
    if len(cards) < MIN_CARDS:
        return None
    value = best_hand_value(cards)
    emoji, name = rank_display(value.rank)
    return QuickHand(
        rank=value.rank,
        name=name,
        emoji=emoji,
        description=describe_quick(value, [rank_of(card) for card in hole]),
    )


def showdown(
    community: Sequence[int],
    hands: Mapping[str, Sequence[int]],
    winner: Optional[str] = None,
) -> List[ShowdownEntry]:
    """Evaluate every shown hand against the board, strongest first.

    ``winner`` is the externally decided winner; when omitted the strongest
    hands are flagged instead.
    """
    evaluated: List[Tuple[str, Tuple[int, ...], EvaluatedHand]] = []
    for player, hole in hands.items():
        evaluated.append((player, tuple(hole), evaluate_best_hand(list(hole) + list(community))))
    evaluated.sort(key=lambda item: hand_sort_key(item[2].value), reverse=True)

    entries: List[ShowdownEntry] = []
    for player, hole, hand in evaluated:
        is_best = compare_hands(hand.value, evaluated[0][2].value) == 0
        entries.append(
            ShowdownEntry(
                player=player,
                hole=hole,
                hand=hand,
                is_best=is_best,
                is_winner=(player == winner) if winner is not None else is_best,
            )
        )
    return entries
