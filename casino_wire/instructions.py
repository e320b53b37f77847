"""Binary instruction encoders.

Every multi-byte integer is big-endian. Variable-length fields carry a u32
length prefix. Callers pass already-validated values; nothing here checks
business rules.
"""

from __future__ import annotations

import struct
from typing import Iterable, Sequence

from .models import (
    BaccaratBet,
    BlackjackMove,
    CasinoWarDecision,
    CrapsAction,
    CrapsBet,
    GameType,
    HiLoGuess,
    InstructionTag,
    PlayerAction,
    RouletteBet,
    SicBoBet,
    ThreeCardDecision,
    UltimateHoldemAction,
)

_U32 = struct.Struct(">I")
_U64 = struct.Struct(">Q")


def encode_varint(value: int) -> bytes:
    """Unsigned LEB128: seven bits per byte, least significant group first."""
    out = bytearray()
    while True:
        byte = value & 0x7F
        value >>= 7
        if value:
            out.append(byte | 0x80)
        else:
            out.append(byte)
            return bytes(out)


def encode_casino_register(name: str) -> bytes:
    name_bytes = name.encode("utf-8")
    return bytes([InstructionTag.CASINO_REGISTER]) + _U32.pack(len(name_bytes)) + name_bytes


def encode_casino_deposit(amount: int) -> bytes:
    return bytes([InstructionTag.CASINO_DEPOSIT]) + _U64.pack(amount)


def encode_casino_start_game(game_type: GameType, bet: int, session_id: int) -> bytes:
    return struct.pack(">BBQQ", InstructionTag.CASINO_START_GAME, game_type, bet, session_id)


def encode_casino_game_move(session_id: int, payload: bytes) -> bytes:
    header = struct.pack(">BQI", InstructionTag.CASINO_GAME_MOVE, session_id, len(payload))
    return header + bytes(payload)


def encode_casino_player_action(action: PlayerAction) -> bytes:
    return bytes([InstructionTag.CASINO_PLAYER_ACTION, action])


def encode_casino_join_tournament(tournament_id: int) -> bytes:
    return bytes([InstructionTag.CASINO_JOIN_TOURNAMENT]) + _U64.pack(tournament_id)


# Game move payloads, wrapped by encode_casino_game_move.


def build_blackjack_payload(move: BlackjackMove) -> bytes:
    return bytes([move])


def build_hilo_payload(guess: HiLoGuess) -> bytes:
    return bytes([guess])


def build_baccarat_payload(bet: BaccaratBet) -> bytes:
    return bytes([bet])


def build_roulette_payload(bets: Sequence[RouletteBet]) -> bytes:
    out = bytearray([len(bets)])
    for bet in bets:
        out += struct.pack(">BBQ", bet.bet_type, bet.value, bet.amount)
    return bytes(out)


def build_video_poker_payload(holds: Iterable[bool]) -> bytes:
    mask = 0
    for idx, hold in enumerate(holds):
        if idx >= 5:
            break
        if hold:
            mask |= 1 << idx
    return bytes([mask])


def build_craps_payload(bet_type: int, amount: int) -> bytes:
    return struct.pack(">BQ", bet_type, amount)


def build_craps_batch_payload(bets: Sequence[CrapsBet]) -> bytes:
    # Place every bet and roll in a single move.
    out = bytearray([CrapsAction.ATOMIC_BATCH, len(bets)])
    for bet in bets:
        out += struct.pack(">BBQ", bet.bet_type, bet.target, bet.amount)
    return bytes(out)


def build_craps_place_bet_payload(bet: CrapsBet) -> bytes:
    return struct.pack(">BBBQ", CrapsAction.PLACE_BET, bet.bet_type, bet.target, bet.amount)


def build_craps_add_odds_payload(amount: int) -> bytes:
    return struct.pack(">BQ", CrapsAction.ADD_ODDS, amount)


def build_craps_roll_payload() -> bytes:
    return bytes([CrapsAction.ROLL])


def build_craps_clear_bets_payload() -> bytes:
    return bytes([CrapsAction.CLEAR_BETS])


def build_sic_bo_payload(bets: Sequence[SicBoBet]) -> bytes:
    out = bytearray([len(bets)])
    for bet in bets:
        out += struct.pack(">BQ", bet.bet_type, bet.amount)
    return bytes(out)


def build_casino_war_payload(decision: CasinoWarDecision) -> bytes:
    return bytes([decision])


def build_three_card_payload(decision: ThreeCardDecision) -> bytes:
    return bytes([decision])


def build_ultimate_holdem_payload(action: UltimateHoldemAction, multiplier: int = 0) -> bytes:
    return bytes([action, multiplier])
