import math

import pytest

from casino_wire.cards import (
    HIDDEN_CARD,
    Card,
    decode_card_id,
    decode_card_list,
    encode_card,
    is_hidden_card,
)


def test_decode_card_id_is_a_bijection_over_the_deck():
    cards = [decode_card_id(idx) for idx in range(52)]
    assert all(card is not None for card in cards)
    assert len(set(cards)) == 52
    for idx, card in enumerate(cards):
        assert encode_card(card) == idx


def test_decode_card_id_uses_fixed_suit_and_rank_order():
    assert decode_card_id(0) == Card("spades", "A")
    assert decode_card_id(9) == Card("spades", "10")
    assert decode_card_id(12) == Card("spades", "K")
    assert decode_card_id(13) == Card("hearts", "A")
    assert decode_card_id(26) == Card("diamonds", "A")
    assert decode_card_id(51) == Card("clubs", "K")


@pytest.mark.parametrize("card_id", [-1, 52, 1.5, math.nan, math.inf, None, "3", True])
def test_decode_card_id_rejects_out_of_domain_values(card_id):
    assert decode_card_id(card_id) is None


def test_hidden_card_is_concealed_not_decoded():
    assert decode_card_id(HIDDEN_CARD) is None
    assert is_hidden_card(255) is True
    assert is_hidden_card(254) is False
    assert is_hidden_card(0) is False


def test_decode_card_list_drops_invalid_ids_in_order():
    assert decode_card_list([0, 52, 13, 51]) == [
        Card("spades", "A"),
        Card("hearts", "A"),
        Card("clubs", "K"),
    ]
    assert decode_card_list([255, 1, -3]) == [Card("spades", "2")]
    assert decode_card_list(None) == []
    assert decode_card_list(bytes([0, 12])) == [Card("spades", "A"), Card("spades", "K")]


def test_card_validation_rejects_unknown_labels():
    with pytest.raises(ValueError, match="Invalid rank"):
        Card("spades", "1")
    with pytest.raises(ValueError, match="Invalid suit"):
        Card("stars", "A")


def test_card_labels():
    assert [card.label for card in decode_card_list([0, 22, 51])] == ["As", "10h", "Kc"]
