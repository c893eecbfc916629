"""Request handlers: health, keypairs, message signing and SOL transfers."""

from __future__ import annotations

import base64
import binascii
import logging
from typing import Any

from .keys import Keypair, Pubkey, parse_pubkey, verify_signature
from .system import transfer
from .types import AppState, BadRequest, success_response

logger = logging.getLogger(__name__)

MISSING_FIELDS = "Missing required fields"
_U64_MAX = 2**64 - 1


def _require(payload: Any, name: str, kind: type) -> Any:
    """Fetch a typed field, treating absent or mistyped fields as missing."""
    if not isinstance(payload, dict) or name not in payload:
        raise BadRequest(MISSING_FIELDS)
    value = payload[name]
    if kind is int:
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U64_MAX:
            raise BadRequest(MISSING_FIELDS)
    elif not isinstance(value, kind):
        raise BadRequest(MISSING_FIELDS)
    return value


def get_health(state: AppState) -> str:
    """Report that the server is up."""
    return f"Server running as expected:  {state.app_name}"


def generate_keypair() -> dict[str, Any]:
    """Create a fresh keypair and return its public key and secret."""
    pair = Keypair.generate()
    return success_response({"pubkey": str(pair.pubkey), "secret": pair.to_base58()})


def sign_message(payload: Any) -> dict[str, Any]:
    """Sign a message with a base58 secret key."""
    message = _require(payload, "message", str)
    secret_text = _require(payload, "secret", str)
    logger.info("Sign message: %r", message)
    if not message or not secret_text:
        raise BadRequest(MISSING_FIELDS)
    try:
        pair = Keypair.from_base58(secret_text)
    except ValueError:
        raise BadRequest("Invalid base58 encoding for field 'secret'") from None
    signature = pair.sign(message.encode("utf-8"))
    return success_response(
        {
            "signature": base64.b64encode(signature).decode("ascii"),
            "public_key": str(pair.pubkey),
            "message": message,
        }
    )


def verify_message(payload: Any) -> dict[str, Any]:
    """Check a base64 signature of a message against a public key."""
    message = _require(payload, "message", str)
    signature_text = _require(payload, "signature", str)
    pubkey_text = _require(payload, "pubkey", str)
    if not message or not signature_text or not pubkey_text:
        raise BadRequest(MISSING_FIELDS)
    pubkey: Pubkey = parse_pubkey(pubkey_text, "pubkey")
    try:
        signature = base64.b64decode(signature_text, validate=True)
    except (binascii.Error, ValueError):
        raise BadRequest("Invalid base64 encoding for field 'signature'") from None
    if len(signature) != 64:
        raise BadRequest("Signature must be 64 bytes")
    valid = verify_signature(pubkey, message.encode("utf-8"), signature)
    return success_response({"valid": valid, "message": message, "pubkey": pubkey_text})


def send_sol(payload: Any) -> dict[str, Any]:
    """Build a SOL transfer instruction."""
    from_text = _require(payload, "from", str)
    to_text = _require(payload, "to", str)
    lamports = _require(payload, "lamports", int)
    if not from_text or not to_text:
        raise BadRequest(MISSING_FIELDS)
    if lamports == 0:
        raise BadRequest("Lamports must be greater than zero")
    source = parse_pubkey(from_text, "from")
    destination = parse_pubkey(to_text, "to")
    instruction = transfer(source, destination, lamports)
    return success_response(
        {
            "program_id": str(instruction.program_id),
            "accounts": [str(meta.pubkey) for meta in instruction.accounts],
            "instruction_data": base64.b64encode(instruction.data).decode("ascii"),
        }
    )