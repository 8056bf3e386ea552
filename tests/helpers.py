from __future__ import annotations

import random
from typing import List, Optional

from handrank.cards import parse_cards


def cards(*labels: str) -> List[int]:
    """Card codes for a readable list of labels, e.g. ``cards("Ah", "Kd")``."""
    return parse_cards(labels)


def random_cards(count: int, seed: Optional[int] = None) -> List[int]:
    """Distinct card codes drawn from a seeded deck."""
    return random.Random(seed).sample(range(52), count)
