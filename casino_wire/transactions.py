"""Transaction building, signing and verification.

Wire layout::

    [nonce:u64 BE] [instruction] [public_key:32] [signature:64]

The signature covers ``TRANSACTION_NAMESPACE || nonce || instruction``.
"""

from __future__ import annotations

import hashlib
import logging
import struct
from dataclasses import dataclass
from enum import Enum

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.ed25519 import Ed25519PrivateKey, Ed25519PublicKey

from .instructions import encode_varint
from .reader import read_u64_be, safe_slice

LOGGER = logging.getLogger("casino_wire.transactions")

# Must match the verifying engine byte for byte.
TRANSACTION_NAMESPACE = b"_NULLSPACE_TX"

NONCE_SIZE = 8
PUBLIC_KEY_SIZE = 32
SIGNATURE_SIZE = 64
SEED_SIZE = 32

_U64 = struct.Struct(">Q")


class NamespaceFraming(str, Enum):
    RAW = "raw"
    VARINT_PREFIXED = "varint_prefixed"


@dataclass(frozen=True)
class Transaction:
    nonce: int
    instruction: bytes
    public_key: bytes
    signature: bytes

    @property
    def payload(self) -> bytes:
        return _U64.pack(self.nonce) + self.instruction

    def to_bytes(self) -> bytes:
        return self.payload + self.public_key + self.signature


def signing_preimage(payload: bytes, framing: NamespaceFraming = NamespaceFraming.RAW) -> bytes:
    if framing is NamespaceFraming.VARINT_PREFIXED:
        return encode_varint(len(TRANSACTION_NAMESPACE)) + TRANSACTION_NAMESPACE + payload
    return TRANSACTION_NAMESPACE + payload


def _private_key(seed: bytes) -> Ed25519PrivateKey:
    if len(seed) != SEED_SIZE:
        raise ValueError(f"Private key must be {SEED_SIZE} bytes, got {len(seed)}")
    return Ed25519PrivateKey.from_private_bytes(bytes(seed))


def _raw_public_key(key: Ed25519PrivateKey) -> bytes:
    return key.public_key().public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )


def derive_public_key(seed: bytes) -> bytes:
    return _raw_public_key(_private_key(seed))


def build_transaction(
    nonce: int,
    instruction: bytes,
    private_key: bytes,
    framing: NamespaceFraming = NamespaceFraming.RAW,
) -> bytes:
    key = _private_key(private_key)
    payload = _U64.pack(nonce) + bytes(instruction)
    signature = key.sign(signing_preimage(payload, framing))
    return payload + _raw_public_key(key) + signature


def split_transaction(tx: bytes, instruction_len: int) -> Transaction:
    """Slice a transaction out of ``tx`` at fixed offsets.

    Bytes after the signature are ignored, so a transaction can be read straight
    out of a larger buffer such as a multi-transaction submission body.
    """
    expected = NONCE_SIZE + instruction_len + PUBLIC_KEY_SIZE + SIGNATURE_SIZE
    if instruction_len < 0 or len(tx) < expected:
        raise ValueError(f"Transaction length {len(tx)} is shorter than expected {expected}")
    key_start = NONCE_SIZE + instruction_len
    sig_start = key_start + PUBLIC_KEY_SIZE
    return Transaction(
        nonce=read_u64_be(tx, 0),
        instruction=safe_slice(tx, NONCE_SIZE, instruction_len),
        public_key=safe_slice(tx, key_start, PUBLIC_KEY_SIZE),
        signature=safe_slice(tx, sig_start, SIGNATURE_SIZE),
    )


def verify_transaction(
    tx: bytes,
    instruction_len: int,
    framing: NamespaceFraming = NamespaceFraming.RAW,
) -> bool:
    """Check the signature of a serialized transaction. Never raises."""
    try:
        parsed = split_transaction(tx, instruction_len)
        public_key = Ed25519PublicKey.from_public_bytes(parsed.public_key)
        public_key.verify(parsed.signature, signing_preimage(parsed.payload, framing))
    except (InvalidSignature, ValueError, TypeError) as exc:
        LOGGER.debug("Transaction verification failed: %s", exc.__class__.__name__)
        return False
    return True


def generate_session_id(public_key: bytes, counter: int) -> int:
    digest = hashlib.sha256(bytes(public_key) + _U64.pack(counter)).digest()
    return _U64.unpack_from(digest, 0)[0]
