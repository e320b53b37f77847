from casino_wire.instructions import encode_casino_deposit
from casino_wire.models import SubmissionTag
from casino_wire.submission import wrap_multiple_submission, wrap_submission
from casino_wire.transactions import build_transaction

from .helpers import SEED


def test_wrap_submission_prefixes_tag_and_count():
    tx = build_transaction(1, encode_casino_deposit(100), SEED)
    wrapped = wrap_submission(tx)
    assert wrapped[:5] == bytes([1, 0, 0, 0, 1])
    assert wrapped[5:] == tx


def test_wrap_multiple_submission_concatenates_in_order():
    txs = [build_transaction(nonce, encode_casino_deposit(nonce * 10), SEED) for nonce in range(3)]
    wrapped = wrap_multiple_submission(txs)
    assert wrapped[:5] == bytes([1, 0, 0, 0, 3])
    assert wrapped[5:] == b"".join(txs)


def test_submission_tag_is_never_seed():
    assert wrap_multiple_submission([])[0] == SubmissionTag.TRANSACTIONS
    assert wrap_multiple_submission([]) == bytes([1, 0, 0, 0, 0])
    assert wrap_submission(b"\xaa")[0] != SubmissionTag.SEED
