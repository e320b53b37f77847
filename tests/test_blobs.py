import pytest

from casino_wire.blobs import (
    parse_baccarat_blob,
    parse_blackjack_blob,
    parse_casino_war_blob,
    parse_craps_blob,
    parse_hilo_blob,
    parse_roulette_blob,
    parse_sic_bo_blob,
    parse_state_blob,
    parse_three_card_blob,
    parse_ultimate_holdem_blob,
    parse_video_poker_blob,
)
from casino_wire.cards import Card
from casino_wire.decoders import decode_game_state
from casino_wire.models import BlackjackPhase, CasinoWarStage, CrapsPhase, CrapsView, GameType

from .helpers import blackjack_blob, i64, pad, u64


def test_blackjack_blob_reads_hands_dealer_and_trailer():
    state = parse_blackjack_blob(blackjack_blob())
    assert state == {
        "hands": [{"bet_multiplier": 1, "cards": [0, 8, 21]}],
        "dealer_cards": [12, 0xFF],
        "active_hand_index": 0,
        "stage": 1,
        "action_mask": 0x0C,
        "player_value": 19,
        "dealer_value": 10,
    }


def test_blackjack_blob_without_trailer_keeps_defaults():
    state = parse_blackjack_blob(blackjack_blob(trailer=()))
    assert state is not None
    assert state["action_mask"] == 0
    assert "player_value" not in state
    assert "dealer_value" not in state


def test_blackjack_blob_rejects_truncation_and_unknown_version():
    assert parse_blackjack_blob(blackjack_blob()[:20]) is None
    assert parse_blackjack_blob(bytes(13)) is None
    wrong_version = bytes([1]) + blackjack_blob()[1:]
    assert parse_blackjack_blob(wrong_version) is None


def test_blackjack_blob_decodes_to_view():
    view = decode_game_state(GameType.BLACKJACK, blackjack_blob())
    assert view is not None
    assert view.player_cards == [Card("spades", "A"), Card("spades", "9"), Card("hearts", "9")]
    assert view.dealer_cards == [Card("spades", "K")]
    assert view.dealer_hidden is True
    assert (view.player_total, view.dealer_total) == (19, 10)
    assert view.phase == BlackjackPhase.PLAYER_TURN
    assert view.can_double and view.can_split


def test_baccarat_blob_reads_both_sides():
    assert parse_baccarat_blob(bytes([0, 2, 0, 12, 2, 13, 40])) == {
        "player_cards": [0, 12],
        "banker_cards": [13, 40],
    }


def test_baccarat_blob_before_deal_is_none():
    assert parse_baccarat_blob(bytes([0])) is None
    assert parse_baccarat_blob(bytes([1]) + bytes(9)) is None
    assert parse_baccarat_blob(bytes([1]) + bytes(8)) is None
    assert parse_baccarat_blob(b"") is None


def test_baccarat_blob_tolerates_short_card_lists():
    assert parse_baccarat_blob(bytes([0, 3, 7])) == {"player_cards": [7], "banker_cards": []}


def test_craps_blob():
    assert parse_craps_blob(bytes([1, 1, 6, 3, 4])) == {"dice": [3, 4], "main_point": 6, "phase": 1}
    assert parse_craps_blob(bytes([1, 0, 0, 0, 0])) == {"dice": None, "main_point": 0, "phase": 0}
    assert parse_craps_blob(bytes([0, 1, 6, 3, 4])) is None
    assert parse_craps_blob(bytes([1, 1, 6, 3])) is None


def test_craps_blob_decodes_by_phase():
    assert decode_game_state(GameType.CRAPS, bytes([1, 1, 6, 3, 4])) == CrapsView(
        dice=(3, 4), point=6, phase=CrapsPhase.POINT
    )
    assert decode_game_state(GameType.CRAPS, bytes([1, 0, 0, 5, 2])) == CrapsView(
        dice=None, point=None, phase=CrapsPhase.COMEOUT
    )


def test_casino_war_blob():
    blob = bytes([1, 1, 5, 0xFF]) + u64(25)
    assert parse_casino_war_blob(blob) == {"stage": 1, "player_card": 5, "dealer_card": 0xFF, "tie_bet": 25}
    assert parse_casino_war_blob(blob[:11]) is None
    assert parse_casino_war_blob(bytes([2]) + blob[1:]) is None

    view = decode_game_state(GameType.CASINO_WAR, blob)
    assert view.player_card == Card("spades", "6")
    assert view.dealer_card is None
    assert view.stage == CasinoWarStage.WAR
    assert view.tie_bet == 25


def test_sic_bo_blob():
    assert parse_sic_bo_blob(bytes([0, 1, 2, 3])) == {"dice": [1, 2, 3]}
    assert parse_sic_bo_blob(bytes([1]) + bytes(10) + bytes([4, 5, 6])) == {"dice": [4, 5, 6]}
    assert parse_sic_bo_blob(bytes([0, 0, 2, 3])) == {"dice": None}
    assert parse_sic_bo_blob(bytes([2, 1, 2, 3])) == {"dice": None}
    assert parse_sic_bo_blob(b"") is None


def test_three_card_blob():
    blob = pad(bytes([3, 2, 0, 1, 2, 3, 4, 5]) + u64(7), 32)
    assert parse_three_card_blob(blob) == {
        "stage": 2,
        "player_cards": [0, 1, 2],
        "dealer_cards": [3, 4, 5],
        "pair_plus_bet": 7,
    }
    assert parse_three_card_blob(blob[:31]) is None
    assert parse_three_card_blob(bytes([2]) + blob[1:]) is None


def test_ultimate_holdem_blob():
    head = bytes([3, 4, 0, 1, 2, 3, 4, 5, 6, 7, 8]) + bytes(5)
    blob = pad(head + u64(11), 40)
    assert parse_ultimate_holdem_blob(blob) == {
        "stage": 4,
        "player_cards": [0, 1],
        "community_cards": [2, 3, 4, 5, 6],
        "dealer_cards": [7, 8],
        "trips_bet": 11,
    }
    assert parse_ultimate_holdem_blob(blob[:39]) is None
    assert parse_ultimate_holdem_blob(bytes([1]) + blob[1:]) is None


def test_video_poker_blob():
    assert parse_video_poker_blob(bytes([1, 0, 1, 2, 3, 4])) == {"stage": 1, "cards": [0, 1, 2, 3, 4]}
    assert parse_video_poker_blob(bytes([1, 0, 1])) is None


def test_hilo_blob():
    assert parse_hilo_blob(bytes([13]) + i64(-40)) == {"card_id": 13, "accumulator_basis_points": -40}
    assert parse_hilo_blob(bytes([13]) + bytes(7)) is None

    view = decode_game_state(GameType.HILO, bytes([13]) + i64(15000))
    assert view.current_card == Card("hearts", "A")
    assert view.accumulator == 15000


def test_roulette_legacy_blob():
    assert parse_roulette_blob(bytes([1]) + bytes(10) + bytes([17])) == {"result": 17, "phase": 0}
    assert parse_roulette_blob(bytes([0])) == {"result": None, "phase": 0}
    assert parse_roulette_blob(b"") is None


def test_roulette_v2_blob_reads_phase_from_header():
    header = pad(bytes([0, 0, 1]), 19)
    assert parse_roulette_blob(header + bytes([17])) == {"result": 17, "phase": 1}
    assert parse_roulette_blob(header) == {"result": None, "phase": 1}

    view = decode_game_state(GameType.ROULETTE, header + bytes([0]))
    assert view.result == 0
    assert view.is_prison is True


def test_parse_state_blob_dispatches_on_game_type():
    assert parse_state_blob(GameType.VIDEO_POKER, bytes([0, 1, 2, 3, 4, 5]))["cards"] == [1, 2, 3, 4, 5]
    assert parse_state_blob(3, bytes([1, 1, 6, 3, 4]))["phase"] == 1
    with pytest.raises(ValueError):
        parse_state_blob(42, b"")


def test_decode_game_state_returns_none_for_unusable_blobs():
    assert decode_game_state(GameType.BACCARAT, bytes([0])) is None
    assert decode_game_state(GameType.BLACKJACK, b"") is None
    assert decode_game_state(GameType.THREE_CARD, bytes(4)) is None
