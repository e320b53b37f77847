from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, List, Optional

SUITS = ("spades", "hearts", "diamonds", "clubs")
RANKS = ("A", "2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K")

# Card exists but the engine is concealing it (e.g. the dealer hole card).
HIDDEN_CARD = 0xFF
DECK_SIZE = len(SUITS) * len(RANKS)


@dataclass(frozen=True)
class Card:
    suit: str
    rank: str

    def __post_init__(self) -> None:
        if self.rank not in RANKS:
            raise ValueError(f"Invalid rank: {self.rank}")
        if self.suit not in SUITS:
            raise ValueError(f"Invalid suit: {self.suit}")

    @property
    def label(self) -> str:
        return f"{self.rank}{self.suit[0]}"


def _as_index(card_id: object) -> Optional[int]:
    if isinstance(card_id, bool):
        return None
    if isinstance(card_id, int):
        return card_id
    if isinstance(card_id, float) and math.isfinite(card_id) and card_id.is_integer():
        return int(card_id)
    return None


def decode_card_id(card_id: object) -> Optional[Card]:
    """Map a canonical index 0..51 to a card; anything else (including 255) is no card."""
    index = _as_index(card_id)
    if index is None or index < 0 or index >= DECK_SIZE:
        return None
    suit_index, rank_index = divmod(index, len(RANKS))
    return Card(SUITS[suit_index], RANKS[rank_index])


def encode_card(card: Card) -> int:
    return SUITS.index(card.suit) * len(RANKS) + RANKS.index(card.rank)


def is_hidden_card(card_id: object) -> bool:
    return _as_index(card_id) == HIDDEN_CARD


def decode_card_list(card_ids: Optional[Iterable[object]]) -> List[Card]:
    """Decode in order, silently dropping ids that are hidden or invalid."""
    if card_ids is None:
        return []
    decoded = []
    for card_id in card_ids:
        card = decode_card_id(card_id)
        if card is not None:
            decoded.append(card)
    return decoded
