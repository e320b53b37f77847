"""Reference structural parser for raw engine state blobs.

Turns the bytes the ledger returns into the intermediate mappings that
``decoders`` consume. Layouts follow the engine's current state versions; a
blob that is truncated or carries an unknown version parses to ``None``.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Dict, List, Optional

from .models import GameType
from .reader import InsufficientData, SafeReader

LOGGER = logging.getLogger("casino_wire.blobs")

Intermediate = Dict[str, Any]
BlobParser = Callable[[bytes], Optional[Intermediate]]

BLACKJACK_VERSION = 2
CASINO_WAR_VERSION = 1
THREE_CARD_VERSION = 3
ULTIMATE_HOLDEM_VERSION = 3

BACCARAT_BET_SIZE = 9
SIC_BO_BET_SIZE = 10
ROULETTE_BET_SIZE = 10
ROULETTE_V2_HEADER = 19


def _unparseable_as_none(func: BlobParser) -> BlobParser:
    @functools.wraps(func)
    def wrapper(blob: bytes) -> Optional[Intermediate]:
        try:
            return func(bytes(blob))
        except InsufficientData as exc:
            LOGGER.debug("%s: blob of %d bytes is unparseable (%s)", func.__name__, len(blob), exc)
            return None

    return wrapper


def _read_card_ids(reader: SafeReader, count: int, label: str) -> List[int]:
    return list(reader.read_bytes(count, label))


@_unparseable_as_none
def parse_blackjack_blob(blob: bytes) -> Optional[Intermediate]:
    if len(blob) < 14 or blob[0] != BLACKJACK_VERSION:
        return None
    reader = SafeReader(blob)
    reader.skip(1, "version")
    stage = reader.read_u8("stage")
    reader.skip(8, "side_bet_21plus3")
    reader.skip(2, "initial_player_cards")
    active_hand_index = reader.read_u8("active_hand_index")
    hand_count = reader.read_u8("hand_count")

    hands = []
    for idx in range(hand_count):
        bet_multiplier = reader.read_u8(f"hand[{idx}].bet_multiplier")
        reader.skip(2, f"hand[{idx}].status")
        card_count = reader.read_u8(f"hand[{idx}].card_count")
        cards = _read_card_ids(reader, card_count, f"hand[{idx}].cards")
        hands.append({"bet_multiplier": bet_multiplier, "cards": cards})

    dealer_count = reader.read_u8("dealer_count")
    dealer_cards = _read_card_ids(reader, dealer_count, "dealer_cards")

    state: Intermediate = {
        "hands": hands,
        "dealer_cards": dealer_cards,
        "active_hand_index": active_hand_index,
        "stage": stage,
        "action_mask": 0,
    }
    if reader.remaining() >= 2:
        reader.skip(2, "rules")
    if reader.remaining() >= 1:
        state["player_value"] = reader.read_u8("player_value")
    if reader.remaining() >= 1:
        state["dealer_value"] = reader.read_u8("dealer_value")
    if reader.remaining() >= 1:
        state["action_mask"] = reader.read_u8("action_mask")
    return state


@_unparseable_as_none
def parse_baccarat_blob(blob: bytes) -> Optional[Intermediate]:
    reader = SafeReader(blob)
    bet_count = reader.read_u8("bet_count")
    reader.skip(bet_count * BACCARAT_BET_SIZE, "bets")
    if reader.remaining() == 0:
        return None
    player_len = reader.read_u8("player_len")
    player_cards = _read_card_ids(reader, min(player_len, reader.remaining()), "player_cards")
    banker_cards: List[int] = []
    if reader.remaining() > 0:
        banker_len = reader.read_u8("banker_len")
        banker_cards = _read_card_ids(reader, min(banker_len, reader.remaining()), "banker_cards")
    return {"player_cards": player_cards, "banker_cards": banker_cards}


@_unparseable_as_none
def parse_craps_blob(blob: bytes) -> Optional[Intermediate]:
    reader = SafeReader(blob)
    version = reader.read_u8("version")
    phase = reader.read_u8("phase")
    main_point = reader.read_u8("main_point")
    d1 = reader.read_u8("die_1")
    d2 = reader.read_u8("die_2")
    if version < 1:
        return None
    return {
        "dice": [d1, d2] if d1 > 0 and d2 > 0 else None,
        "main_point": main_point,
        "phase": phase,
    }


@_unparseable_as_none
def parse_casino_war_blob(blob: bytes) -> Optional[Intermediate]:
    if len(blob) < 12 or blob[0] != CASINO_WAR_VERSION:
        return None
    reader = SafeReader(blob)
    reader.skip(1, "version")
    return {
        "stage": reader.read_u8("stage"),
        "player_card": reader.read_u8("player_card"),
        "dealer_card": reader.read_u8("dealer_card"),
        "tie_bet": reader.read_u64_be("tie_bet"),
    }


@_unparseable_as_none
def parse_sic_bo_blob(blob: bytes) -> Optional[Intermediate]:
    reader = SafeReader(blob)
    bet_count = reader.read_u8("bet_count")
    if reader.remaining() < bet_count * SIC_BO_BET_SIZE + 3:
        return {"dice": None}
    reader.skip(bet_count * SIC_BO_BET_SIZE, "bets")
    dice = list(reader.read_bytes(3, "dice"))
    # Zero means the dice have not been rolled yet.
    return {"dice": dice if all(dice) else None}


@_unparseable_as_none
def parse_three_card_blob(blob: bytes) -> Optional[Intermediate]:
    if len(blob) < 32 or blob[0] != THREE_CARD_VERSION:
        return None
    reader = SafeReader(blob)
    reader.skip(1, "version")
    return {
        "stage": reader.read_u8("stage"),
        "player_cards": _read_card_ids(reader, 3, "player_cards"),
        "dealer_cards": _read_card_ids(reader, 3, "dealer_cards"),
        "pair_plus_bet": reader.read_u64_be("pair_plus_bet"),
    }


@_unparseable_as_none
def parse_ultimate_holdem_blob(blob: bytes) -> Optional[Intermediate]:
    if len(blob) < 40 or blob[0] != ULTIMATE_HOLDEM_VERSION:
        return None
    reader = SafeReader(blob)
    reader.skip(1, "version")
    state: Intermediate = {
        "stage": reader.read_u8("stage"),
        "player_cards": _read_card_ids(reader, 2, "player_cards"),
        "community_cards": _read_card_ids(reader, 5, "community_cards"),
        "dealer_cards": _read_card_ids(reader, 2, "dealer_cards"),
    }
    reader.skip(5, "play_state")
    state["trips_bet"] = reader.read_u64_be("trips_bet")
    return state


@_unparseable_as_none
def parse_video_poker_blob(blob: bytes) -> Optional[Intermediate]:
    if len(blob) < 6:
        return None
    reader = SafeReader(blob)
    return {
        "stage": reader.read_u8("stage"),
        "cards": _read_card_ids(reader, 5, "cards"),
    }


@_unparseable_as_none
def parse_hilo_blob(blob: bytes) -> Optional[Intermediate]:
    reader = SafeReader(blob)
    card_id = reader.read_u8("card_id")
    return {
        "card_id": card_id,
        "accumulator_basis_points": reader.read_i64_be("accumulator"),
    }


@_unparseable_as_none
def parse_roulette_blob(blob: bytes) -> Optional[Intermediate]:
    reader = SafeReader(blob)
    bet_count = reader.read_u8("bet_count")
    bets_size = bet_count * ROULETTE_BET_SIZE
    # v2 blobs carry a fixed header before the bets; legacy blobs do not.
    looks_like_v2 = len(blob) in (ROULETTE_V2_HEADER + bets_size, ROULETTE_V2_HEADER + bets_size + 1)
    if looks_like_v2:
        phase = reader.read_u8_at(2, "phase")
        result_offset = ROULETTE_V2_HEADER + bets_size
    else:
        phase = 0
        result_offset = 1 + bets_size
    result = reader.read_u8_at(result_offset, "result") if len(blob) > result_offset else None
    return {"result": result, "phase": phase}


BLOB_PARSERS: Dict[GameType, BlobParser] = {
    GameType.BACCARAT: parse_baccarat_blob,
    GameType.BLACKJACK: parse_blackjack_blob,
    GameType.CASINO_WAR: parse_casino_war_blob,
    GameType.CRAPS: parse_craps_blob,
    GameType.VIDEO_POKER: parse_video_poker_blob,
    GameType.HILO: parse_hilo_blob,
    GameType.ROULETTE: parse_roulette_blob,
    GameType.SIC_BO: parse_sic_bo_blob,
    GameType.THREE_CARD: parse_three_card_blob,
    GameType.ULTIMATE_HOLDEM: parse_ultimate_holdem_blob,
}


def parse_state_blob(game_type: GameType, blob: bytes) -> Optional[Intermediate]:
    return BLOB_PARSERS[GameType(game_type)](blob)
