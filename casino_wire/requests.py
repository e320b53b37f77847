from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Tuple

from .instructions import encode_casino_start_game
from .models import BaccaratBet, GameType

INVALID_BET = "INVALID_BET"

_MULTI_BET_KEYS = {
    "PLAYER": BaccaratBet.PLAYER,
    "BANKER": BaccaratBet.BANKER,
    "TIE": BaccaratBet.TIE,
}
_SINGLE_BET_NAMES = {
    "player": BaccaratBet.PLAYER,
    "banker": BaccaratBet.BANKER,
    "tie": BaccaratBet.TIE,
}


class RequestError(ValueError):
    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


@dataclass(frozen=True)
class BaccaratDealRequest:
    bets: Dict[BaccaratBet, int] = field(default_factory=dict)

    @property
    def total(self) -> int:
        return sum(self.bets.values())

    def start_game_instruction(self, session_id: int) -> bytes:
        return encode_casino_start_game(GameType.BACCARAT, self.total, session_id)


def _amount(raw: Any) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float)):
        raise RequestError(INVALID_BET, "Bet amount must be a number")
    if isinstance(raw, float) and (not math.isfinite(raw) or not raw.is_integer()):
        raise RequestError(INVALID_BET, "Bet amount must be a whole number")
    if raw < 0:
        raise RequestError(INVALID_BET, "Bet amount must not be negative")
    return int(raw)


def _multi_bet(entries: Iterable[Tuple[Any, Any]]) -> BaccaratDealRequest:
    pairs = list(entries)
    unknown = {key for key, _ in pairs if not isinstance(key, str) or key not in _MULTI_BET_KEYS}
    if unknown:
        raise RequestError(INVALID_BET, f"Unknown bet keys: {', '.join(sorted(map(str, unknown)))}")
    resolved: Dict[BaccaratBet, int] = {}
    for key, value in pairs:
        if value is None:
            continue
        bet = _MULTI_BET_KEYS[key]
        resolved[bet] = resolved.get(bet, 0) + _amount(value)
    resolved = {bet: amount for bet, amount in resolved.items() if amount > 0}
    if not resolved:
        raise RequestError(INVALID_BET, "No bets placed")
    return BaccaratDealRequest(bets=resolved)


def normalize_baccarat_deal(message: Mapping[str, Any]) -> BaccaratDealRequest:
    """Resolve any accepted deal shape into one canonical request.

    Multi-bet map: ``{"bets": {"PLAYER": 25, "BANKER": 0, "TIE": 5}}``.
    Multi-bet list: ``{"bets": [{"type": "PLAYER", "amount": 25}]}``.
    Single-bet: ``{"amount": 25, "betType": "player"}``.
    """
    bets = message.get("bets")
    if isinstance(bets, Mapping):
        return _multi_bet(bets.items())
    if isinstance(bets, (list, tuple)):
        entries = []
        for entry in bets:
            if not isinstance(entry, Mapping):
                raise RequestError(INVALID_BET, "Each bet must be an object with type and amount")
            entries.append((entry.get("type"), entry.get("amount")))
        return _multi_bet(entries)

    bet_type = message.get("betType")
    if not isinstance(bet_type, str) or bet_type not in _SINGLE_BET_NAMES:
        raise RequestError(INVALID_BET, "Invalid bet type (must be player, banker, or tie)")
    amount = _amount(message.get("amount"))
    if amount <= 0:
        raise RequestError(INVALID_BET, "Invalid bet amount")
    return BaccaratDealRequest(bets={_SINGLE_BET_NAMES[bet_type]: amount})
