from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import os
import secrets
import sys
from enum import Enum
from typing import Any, List, Optional

from .cards import decode_card_id, is_hidden_card
from .decoders import decode_game_state
from .instructions import encode_casino_deposit, encode_casino_register
from .models import GameType
from .submission import wrap_submission
from .transactions import (
    TRANSACTION_NAMESPACE,
    build_transaction,
    derive_public_key,
    generate_session_id,
    verify_transaction,
)

LOGGER = logging.getLogger("casino_wire")

KEY_ENV = "CASINO_WIRE_KEY"


def _hex_bytes(value: str) -> bytes:
    try:
        return bytes.fromhex(value.replace(" ", ""))
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"not valid hex: {value!r}") from exc


def _game_type(value: str) -> GameType:
    try:
        return GameType[value.upper()]
    except KeyError:
        choices = ", ".join(game.name.lower() for game in GameType)
        raise argparse.ArgumentTypeError(f"unknown game {value!r} (choose from {choices})") from None


def _load_key(args: argparse.Namespace) -> bytes:
    raw = args.key or os.environ.get(KEY_ENV)
    if not raw:
        raise SystemExit(f"a private key is required (--key or {KEY_ENV})")
    return _hex_bytes(raw)


def _jsonable(value: Any) -> Any:
    if dataclasses.is_dataclass(value):
        return {key: _jsonable(item) for key, item in dataclasses.asdict(value).items()}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, dict):
        return {key: _jsonable(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(item) for item in value]
    return value


def _print_signed(instruction: bytes, nonce: int, key: bytes) -> None:
    tx = build_transaction(nonce, instruction, key)
    LOGGER.debug("namespace=%s instruction=%d bytes", TRANSACTION_NAMESPACE.decode("ascii"), len(instruction))
    print(json.dumps(
        {
            "public_key": derive_public_key(key).hex(),
            "instruction": instruction.hex(),
            "transaction": tx.hex(),
            "submission": wrap_submission(tx).hex(),
            "verified": verify_transaction(tx, len(instruction)),
        },
        indent=2,
    ))


def cmd_keygen(args: argparse.Namespace) -> int:
    seed = secrets.token_bytes(32)
    print(json.dumps({"private_key": seed.hex(), "public_key": derive_public_key(seed).hex()}, indent=2))
    return 0


def cmd_deposit(args: argparse.Namespace) -> int:
    _print_signed(encode_casino_deposit(args.amount), args.nonce, _load_key(args))
    return 0


def cmd_register(args: argparse.Namespace) -> int:
    _print_signed(encode_casino_register(args.name), args.nonce, _load_key(args))
    return 0


def cmd_verify(args: argparse.Namespace) -> int:
    ok = verify_transaction(args.tx, args.instruction_len)
    print("PASS" if ok else "FAIL")
    return 0 if ok else 1


def cmd_session_id(args: argparse.Namespace) -> int:
    print(generate_session_id(args.public_key, args.counter))
    return 0


def cmd_decode_card(args: argparse.Namespace) -> int:
    for card_id in args.ids:
        if is_hidden_card(card_id):
            print(f"{card_id}: hidden")
            continue
        card = decode_card_id(card_id)
        print(f"{card_id}: {card.label if card else 'invalid'}")
    return 0


def cmd_decode_state(args: argparse.Namespace) -> int:
    view = decode_game_state(args.game, args.blob)
    if view is None:
        LOGGER.info("No view for %s blob of %d bytes", args.game.name.lower(), len(args.blob))
    print(json.dumps(_jsonable(view), indent=2))
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="casino_wire", description="Ledger casino wire codec tools")
    parser.add_argument("--log-level", default="INFO", help="Logging level (DEBUG, INFO, WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    keygen = sub.add_parser("keygen", help="Generate an Ed25519 signing seed")
    keygen.set_defaults(func=cmd_keygen)

    deposit = sub.add_parser("deposit", help="Build and sign a deposit transaction")
    deposit.add_argument("--amount", type=int, required=True)
    deposit.add_argument("--nonce", type=int, default=0)
    deposit.add_argument("--key", help=f"Hex private key seed (defaults to ${KEY_ENV})")
    deposit.set_defaults(func=cmd_deposit)

    register = sub.add_parser("register", help="Build and sign a player registration")
    register.add_argument("--name", required=True)
    register.add_argument("--nonce", type=int, default=0)
    register.add_argument("--key", help=f"Hex private key seed (defaults to ${KEY_ENV})")
    register.set_defaults(func=cmd_register)

    verify = sub.add_parser("verify", help="Verify a serialized transaction")
    verify.add_argument("--tx", type=_hex_bytes, required=True)
    verify.add_argument("--instruction-len", type=int, required=True)
    verify.set_defaults(func=cmd_verify)

    session = sub.add_parser("session-id", help="Derive a game session id")
    session.add_argument("--public-key", type=_hex_bytes, required=True)
    session.add_argument("--counter", type=int, default=0)
    session.set_defaults(func=cmd_session_id)

    card = sub.add_parser("decode-card", help="Decode raw card ids")
    card.add_argument("ids", type=int, nargs="+")
    card.set_defaults(func=cmd_decode_card)

    state = sub.add_parser("decode-state", help="Decode a raw state blob into a view")
    state.add_argument("--game", type=_game_type, required=True)
    state.add_argument("--blob", type=_hex_bytes, required=True)
    state.set_defaults(func=cmd_decode_state)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
