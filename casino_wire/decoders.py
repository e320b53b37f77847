"""Typed per-game views built from structurally parsed state.

Each ``parse_*_state`` takes the intermediate mapping produced by the
structural deserializer (see ``blobs``) and returns a view, or ``None`` when
there is nothing usable. Missing numbers default to 0 and missing card lists
to empty. Given a mapping, none of these functions raise on odd field
values: entries of the wrong shape are skipped or read as missing.
"""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

from .blobs import parse_state_blob
from .cards import Card, decode_card_id, decode_card_list, is_hidden_card
from .models import (
    BaccaratView,
    BlackjackPhase,
    BlackjackView,
    CasinoWarStage,
    CasinoWarView,
    CrapsPhase,
    CrapsView,
    GameType,
    HiLoView,
    RouletteView,
    SicBoView,
    ThreeCardStage,
    ThreeCardView,
    UltimateHoldemStage,
    UltimateHoldemView,
    VideoPokerStage,
    VideoPokerView,
)
from .scoring import baccarat_total, blackjack_total

Intermediate = Optional[Mapping[str, Any]]
StageT = TypeVar("StageT")

BLACKJACK_PHASES: Dict[int, BlackjackPhase] = {
    0: BlackjackPhase.BETTING,
    1: BlackjackPhase.PLAYER_TURN,
    2: BlackjackPhase.DEALER_TURN,
    3: BlackjackPhase.RESULT,
}
CASINO_WAR_STAGES: Dict[int, CasinoWarStage] = {
    0: CasinoWarStage.BETTING,
    1: CasinoWarStage.WAR,
    2: CasinoWarStage.COMPLETE,
}
THREE_CARD_STAGES: Dict[int, ThreeCardStage] = {
    0: ThreeCardStage.BETTING,
    1: ThreeCardStage.DECISION,
    2: ThreeCardStage.AWAITING,
    3: ThreeCardStage.COMPLETE,
}
ULTIMATE_HOLDEM_STAGES: Dict[int, UltimateHoldemStage] = {
    0: UltimateHoldemStage.BETTING,
    1: UltimateHoldemStage.PREFLOP,
    2: UltimateHoldemStage.FLOP,
    3: UltimateHoldemStage.RIVER,
    4: UltimateHoldemStage.SHOWDOWN,
    5: UltimateHoldemStage.RESULT,
}
VIDEO_POKER_STAGES: Dict[int, VideoPokerStage] = {
    0: VideoPokerStage.DEAL,
    1: VideoPokerStage.DRAW,
}

# Only these two bits are confirmed by the engine.
ACTION_CAN_DOUBLE = 0x04
ACTION_CAN_SPLIT = 0x08


def _to_number(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        number = float(value) if isinstance(value, (str, Decimal)) else value
    except ValueError:
        return None
    if isinstance(number, float):
        return number if math.isfinite(number) else None
    return None


def finite_or_zero(value: Any) -> float:
    """Amounts shown to a view are never NaN or infinite."""
    number = _to_number(value)
    return 0 if number is None else number


def _code(value: Any) -> int:
    number = _to_number(value)
    if number is None or number != int(number):
        return -1
    return int(number)


def _stage(table: Mapping[int, StageT], code: Any, default: StageT) -> StageT:
    return table.get(_code(code), default)


def _ids(value: Any) -> List[Any]:
    if isinstance(value, (list, tuple, bytes, bytearray)):
        return list(value)
    return []


def _dice(value: Any, count: int) -> Optional[tuple]:
    ids = _ids(value)
    if len(ids) < count:
        return None
    return tuple(ids[:count])


def _cards(state: Mapping[str, Any], key: str) -> List[Card]:
    return decode_card_list(_ids(state.get(key)))


def _visible_card(card_id: Any) -> Optional[Card]:
    if is_hidden_card(card_id):
        return None
    return decode_card_id(card_id)


def parse_blackjack_state(state: Intermediate) -> Optional[BlackjackView]:
    if state is None:
        return None

    hands: List[List[Card]] = []
    for hand in _ids(state.get("hands")):
        if not isinstance(hand, Mapping):
            continue
        cards = decode_card_list(_ids(hand.get("cards")))
        if finite_or_zero(hand.get("bet_multiplier")) > 0 or cards:
            hands.append(cards)

    active = _code(state.get("active_hand_index", 0))
    if not 0 <= active < len(hands):
        active = max(len(hands) - 1, 0)
    player_cards = hands[active] if hands else []

    dealer_ids = _ids(state.get("dealer_cards"))
    dealer_cards = decode_card_list(dealer_ids)

    player_value = _to_number(state.get("player_value"))
    dealer_value = _to_number(state.get("dealer_value"))
    action_mask = max(_code(state.get("action_mask", 0)), 0)

    return BlackjackView(
        player_cards=player_cards,
        dealer_cards=dealer_cards,
        player_total=blackjack_total(player_cards) if player_value is None else int(player_value),
        dealer_total=blackjack_total(dealer_cards) if dealer_value is None else int(dealer_value),
        phase=_stage(BLACKJACK_PHASES, state.get("stage"), BlackjackPhase.RESULT),
        can_double=bool(action_mask & ACTION_CAN_DOUBLE),
        can_split=bool(action_mask & ACTION_CAN_SPLIT),
        dealer_hidden=any(is_hidden_card(card_id) for card_id in dealer_ids),
    )


def parse_baccarat_state(state: Intermediate) -> Optional[BaccaratView]:
    if state is None:
        return None
    player_cards = _cards(state, "player_cards")
    banker_cards = _cards(state, "banker_cards")
    if not player_cards and not banker_cards:
        # Hand not dealt yet.
        return None
    return BaccaratView(
        player_cards=player_cards,
        banker_cards=banker_cards,
        player_total=baccarat_total(player_cards),
        banker_total=baccarat_total(banker_cards),
    )


def parse_craps_state(state: Intermediate) -> Optional[CrapsView]:
    if state is None:
        return None
    if _code(state.get("phase")) != 1:
        return CrapsView(dice=None, point=None, phase=CrapsPhase.COMEOUT)
    return CrapsView(
        dice=_dice(state.get("dice"), 2),
        point=int(finite_or_zero(state.get("main_point"))),
        phase=CrapsPhase.POINT,
    )


def parse_casino_war_state(state: Intermediate) -> Optional[CasinoWarView]:
    if state is None:
        return None
    return CasinoWarView(
        player_card=_visible_card(state.get("player_card")),
        dealer_card=_visible_card(state.get("dealer_card")),
        stage=_stage(CASINO_WAR_STAGES, state.get("stage"), CasinoWarStage.BETTING),
        tie_bet=finite_or_zero(state.get("tie_bet")),
    )


def parse_sic_bo_state(state: Intermediate) -> Optional[SicBoView]:
    if state is None:
        return None
    return SicBoView(dice=_dice(state.get("dice"), 3))


def parse_three_card_state(state: Intermediate) -> Optional[ThreeCardView]:
    if state is None:
        return None
    return ThreeCardView(
        stage=_stage(THREE_CARD_STAGES, state.get("stage"), ThreeCardStage.BETTING),
        player_cards=_cards(state, "player_cards"),
        dealer_cards=_cards(state, "dealer_cards"),
        pair_plus_bet=finite_or_zero(state.get("pair_plus_bet")),
        six_card_bonus_bet=finite_or_zero(state.get("six_card_bonus_bet")),
        progressive_bet=finite_or_zero(state.get("progressive_bet")),
    )


def parse_ultimate_holdem_state(state: Intermediate) -> Optional[UltimateHoldemView]:
    if state is None:
        return None
    return UltimateHoldemView(
        stage=_stage(ULTIMATE_HOLDEM_STAGES, state.get("stage"), UltimateHoldemStage.BETTING),
        player_cards=_cards(state, "player_cards"),
        community_cards=_cards(state, "community_cards"),
        dealer_cards=_cards(state, "dealer_cards"),
        trips_bet=finite_or_zero(state.get("trips_bet")),
        six_card_bonus_bet=finite_or_zero(state.get("six_card_bonus_bet")),
        progressive_bet=finite_or_zero(state.get("progressive_bet")),
    )


def parse_video_poker_state(state: Intermediate) -> Optional[VideoPokerView]:
    if state is None:
        return None
    return VideoPokerView(
        stage=_stage(VIDEO_POKER_STAGES, state.get("stage"), VideoPokerStage.DEAL),
        cards=_cards(state, "cards"),
    )


def parse_hilo_state(state: Intermediate) -> Optional[HiLoView]:
    if state is None:
        return None
    return HiLoView(
        current_card=decode_card_id(state.get("card_id")),
        accumulator=_to_number(state.get("accumulator_basis_points")),
    )


def parse_roulette_state(state: Intermediate) -> Optional[RouletteView]:
    if state is None:
        return None
    return RouletteView(
        result=state.get("result"),
        is_prison=_code(state.get("phase")) == 1,
    )


STATE_DECODERS: Dict[GameType, Callable[[Intermediate], Any]] = {
    GameType.BACCARAT: parse_baccarat_state,
    GameType.BLACKJACK: parse_blackjack_state,
    GameType.CASINO_WAR: parse_casino_war_state,
    GameType.CRAPS: parse_craps_state,
    GameType.VIDEO_POKER: parse_video_poker_state,
    GameType.HILO: parse_hilo_state,
    GameType.ROULETTE: parse_roulette_state,
    GameType.SIC_BO: parse_sic_bo_state,
    GameType.THREE_CARD: parse_three_card_state,
    GameType.ULTIMATE_HOLDEM: parse_ultimate_holdem_state,
}


def decode_game_state(game_type: GameType, blob: bytes) -> Any:
    """Raw engine bytes to a typed view, or None when the blob is not usable yet."""
    game_type = GameType(game_type)
    return STATE_DECODERS[game_type](parse_state_blob(game_type, blob))
