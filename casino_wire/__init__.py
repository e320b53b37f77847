"""Client-side wire codec for the ledger casino: instructions, signed transactions, state views."""

from .cards import HIDDEN_CARD, RANKS, SUITS, Card, decode_card_id, decode_card_list, is_hidden_card
from .decoders import (
    decode_game_state,
    finite_or_zero,
    parse_baccarat_state,
    parse_blackjack_state,
    parse_casino_war_state,
    parse_craps_state,
    parse_hilo_state,
    parse_roulette_state,
    parse_sic_bo_state,
    parse_three_card_state,
    parse_ultimate_holdem_state,
    parse_video_poker_state,
)
from .instructions import (
    build_baccarat_payload,
    build_blackjack_payload,
    build_casino_war_payload,
    build_craps_add_odds_payload,
    build_craps_batch_payload,
    build_craps_clear_bets_payload,
    build_craps_payload,
    build_craps_place_bet_payload,
    build_craps_roll_payload,
    build_hilo_payload,
    build_roulette_payload,
    build_sic_bo_payload,
    build_three_card_payload,
    build_ultimate_holdem_payload,
    build_video_poker_payload,
    encode_casino_deposit,
    encode_casino_game_move,
    encode_casino_join_tournament,
    encode_casino_player_action,
    encode_casino_register,
    encode_casino_start_game,
)
from .models import GameType, InstructionTag, PlayerAction, SubmissionTag
from .reader import InsufficientData, SafeReader
from .requests import BaccaratDealRequest, RequestError, normalize_baccarat_deal
from .submission import wrap_multiple_submission, wrap_submission
from .transactions import (
    TRANSACTION_NAMESPACE,
    build_transaction,
    derive_public_key,
    generate_session_id,
    verify_transaction,
)

__all__ = [
    "HIDDEN_CARD",
    "RANKS",
    "SUITS",
    "Card",
    "decode_card_id",
    "decode_card_list",
    "is_hidden_card",
    "decode_game_state",
    "finite_or_zero",
    "parse_baccarat_state",
    "parse_blackjack_state",
    "parse_casino_war_state",
    "parse_craps_state",
    "parse_hilo_state",
    "parse_roulette_state",
    "parse_sic_bo_state",
    "parse_three_card_state",
    "parse_ultimate_holdem_state",
    "parse_video_poker_state",
    "build_baccarat_payload",
    "build_blackjack_payload",
    "build_casino_war_payload",
    "build_craps_add_odds_payload",
    "build_craps_batch_payload",
    "build_craps_clear_bets_payload",
    "build_craps_payload",
    "build_craps_place_bet_payload",
    "build_craps_roll_payload",
    "build_hilo_payload",
    "build_roulette_payload",
    "build_sic_bo_payload",
    "build_three_card_payload",
    "build_ultimate_holdem_payload",
    "build_video_poker_payload",
    "encode_casino_deposit",
    "encode_casino_game_move",
    "encode_casino_join_tournament",
    "encode_casino_player_action",
    "encode_casino_register",
    "encode_casino_start_game",
    "GameType",
    "InstructionTag",
    "PlayerAction",
    "SubmissionTag",
    "InsufficientData",
    "SafeReader",
    "BaccaratDealRequest",
    "RequestError",
    "normalize_baccarat_deal",
    "wrap_multiple_submission",
    "wrap_submission",
    "TRANSACTION_NAMESPACE",
    "build_transaction",
    "derive_public_key",
    "generate_session_id",
    "verify_transaction",
]
