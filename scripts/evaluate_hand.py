#!/usr/bin/env python3
"""Evaluate a hand from the terminal.

Examples::

    python scripts/evaluate_hand.py Ah Kh Qh Jh Th
    python scripts/evaluate_hand.py 48 1 6 11 12 30 31
    python scripts/evaluate_hand.py --hole Ks Kd --board 2c 7h Kh
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Sequence

from handrank.cards import card_name, parse_label
from handrank.evaluator import detect_hand, evaluate_best_hand

LOGGER = logging.getLogger("evaluate_hand")


def parse_token(token: str) -> int:
    # Accept raw card codes as well as labels so encoded boards can be pasted.
    if not token.isdigit():
        return parse_label(token)
    code = int(token)
    if not 0 <= code <= 51:
        raise ValueError(f"Card code out of range: {token}")
    return code


def parse_tokens(tokens: Sequence[str]) -> List[int]:
    return [parse_token(token) for token in tokens]


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Rank a 5-7 card poker hand.")
    parser.add_argument("cards", nargs="*", help="Cards as labels (Ah, 10d) or codes (0-51).")
    parser.add_argument("--hole", nargs=2, metavar="CARD", help="Hole cards for the quick readout.")
    parser.add_argument("--board", nargs="*", default=[], metavar="CARD", help="Community cards for --hole.")
    parser.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, etc.).")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO), format="%(message)s")

    try:
        if args.hole:
            hole, board = parse_tokens(args.hole), parse_tokens(args.board)
            quick = detect_hand(hole, board)
            payload = {"hand": quick.to_payload() if quick else None}
        else:
            cards = parse_tokens(args.cards)
            hand = evaluate_best_hand(cards)
            LOGGER.info("Key cards: %s", " ".join(card_name(card) for card in hand.contributing_cards))
            payload = hand.to_payload()
    except ValueError as exc:
        LOGGER.error("%s", exc)
        return 2

    print(json.dumps(payload, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
