from __future__ import annotations

from typing import Iterable, List, Sequence

# RFC 8032 test vector 1.
RFC8032_SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC_KEY = bytes.fromhex("d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a")

SEED = bytes(range(32))


def u64(value: int) -> bytes:
    return value.to_bytes(8, "big")


def i64(value: int) -> bytes:
    return value.to_bytes(8, "big", signed=True)


def pad(blob: bytes, length: int) -> bytes:
    """Right-pad with zeros up to ``length`` bytes."""
    return blob + bytes(max(length - len(blob), 0))


def flip(data: bytes, index: int) -> bytes:
    mutated = bytearray(data)
    mutated[index] ^= 0x01
    return bytes(mutated)


def blackjack_blob(
    *,
    stage: int = 1,
    active: int = 0,
    hands: Sequence[tuple[int, Sequence[int]]] = ((1, (0, 8, 21)),),
    dealer: Iterable[int] = (12, 0xFF),
    trailer: Sequence[int] = (0, 0, 19, 10, 0x0C),
) -> bytes:
    """Assemble a version 2 blackjack blob: header, hands, dealer, rules and totals."""
    out = bytearray([2, stage]) + bytearray(8) + bytearray([0, 0, active, len(hands)])
    for bet_mult, cards in hands:
        out += bytes([bet_mult, 0, 0, len(cards), *cards])
    dealer_ids: List[int] = list(dealer)
    out += bytes([len(dealer_ids), *dealer_ids])
    out += bytes(trailer)
    return bytes(out)
