from __future__ import annotations

import struct
from typing import Sequence

from .models import SubmissionTag

_HEADER = struct.Struct(">BI")


def wrap_submission(tx: bytes) -> bytes:
    return wrap_multiple_submission([tx])


def wrap_multiple_submission(txs: Sequence[bytes]) -> bytes:
    # Tag 0 is Seed, an unrelated message; transactions always travel under tag 1.
    return _HEADER.pack(SubmissionTag.TRANSACTIONS, len(txs)) + b"".join(bytes(tx) for tx in txs)
