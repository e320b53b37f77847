from __future__ import annotations

from typing import Iterable

from .cards import Card

FACE_RANKS = frozenset({"J", "Q", "K"})


def blackjack_card_value(card: Card) -> int:
    if card.rank == "A":
        return 11
    if card.rank in FACE_RANKS:
        return 10
    return int(card.rank)


def blackjack_total(cards: Iterable[Card]) -> int:
    """Best total not over 21 where possible, counting aces as 11 then 1."""
    total = 0
    aces = 0
    for card in cards:
        total += blackjack_card_value(card)
        if card.rank == "A":
            aces += 1
    while total > 21 and aces > 0:
        total -= 10
        aces -= 1
    return total


def baccarat_card_value(card: Card) -> int:
    if card.rank == "A":
        return 1
    if card.rank == "10" or card.rank in FACE_RANKS:
        return 0
    return int(card.rank)


def baccarat_total(cards: Iterable[Card]) -> int:
    return sum(baccarat_card_value(card) for card in cards) % 10
