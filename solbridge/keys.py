"""Base58 encoding, public keys and ed25519 keypairs."""

from __future__ import annotations

from dataclasses import dataclass

from nacl.exceptions import CryptoError
from nacl.signing import SigningKey, VerifyKey

from .types import BadRequest

_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_INDEX = {ch: i for i, ch in enumerate(_ALPHABET)}

PUBKEY_LENGTH = 32
_MAX_PUBKEY_STRING = 44


def b58encode(data: bytes) -> str:
    """Encode bytes as base58 text."""
    data = bytes(data)
    pad = len(data) - len(data.lstrip(b"\x00"))
    num = int.from_bytes(data, "big")
    digits = []
    while num:
        num, rem = divmod(num, 58)
        digits.append(_ALPHABET[rem])
    return "1" * pad + "".join(reversed(digits))


def b58decode(text: str) -> bytes:
    """Decode base58 text; raise ValueError on characters outside the alphabet."""
    num = 0
    for ch in text:
        try:
            num = num * 58 + _INDEX[ch]
        except KeyError:
            raise ValueError(f"invalid base58 character {ch!r}") from None
    pad = len(text) - len(text.lstrip("1"))
    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    return b"\x00" * pad + body


@dataclass(frozen=True)
class Pubkey:
    """A 32-byte public key shown as base58."""

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != PUBKEY_LENGTH:
            raise ValueError("public key must be 32 bytes")

    @classmethod
    def from_string(cls, text: str) -> Pubkey:
        """Parse a base58 public key; raise ValueError if it is not valid."""
        if len(text) > _MAX_PUBKEY_STRING:
            raise ValueError("public key string too long")
        raw = b58decode(text)
        if len(raw) != PUBKEY_LENGTH:
            raise ValueError("public key must be 32 bytes")
        return cls(raw)

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        return b58encode(self.raw)


class Keypair:
    """An ed25519 signing keypair."""

    def __init__(self, signing_key: SigningKey) -> None:
        self._signing_key = signing_key

    @classmethod
    def generate(cls) -> Keypair:
        """Create a new random keypair."""
        return cls(SigningKey.generate())

    @classmethod
    def from_base58(cls, text: str) -> Keypair:
        """Load a keypair from base58 of its 64 bytes (secret then public)."""
        raw = b58decode(text)
        if len(raw) != 64:
            raise ValueError("keypair must be 64 bytes")
        signing_key = SigningKey(raw[:32])
        if bytes(signing_key.verify_key) != raw[32:]:
            raise ValueError("public half does not match secret half")
        return cls(signing_key)

    @property
    def pubkey(self) -> Pubkey:
        return Pubkey(bytes(self._signing_key.verify_key))

    def to_base58(self) -> str:
        """Return base58 of the secret bytes followed by the public bytes."""
        return b58encode(bytes(self._signing_key) + bytes(self._signing_key.verify_key))

    def sign(self, message: bytes) -> bytes:
        """Return the 64-byte signature of message."""
        return self._signing_key.sign(bytes(message)).signature


def verify_signature(pubkey: Pubkey, message: bytes, signature: bytes) -> bool:
    """Tell whether signature is a valid signature of message by pubkey."""
    try:
        VerifyKey(bytes(pubkey)).verify(bytes(message), bytes(signature))
    except (CryptoError, ValueError):
        return False
    return True


def parse_pubkey(key_str: str, field_name: str) -> Pubkey:
    """Parse a public key from a request field, raising BadRequest if invalid."""
    try:
        return Pubkey.from_string(key_str)
    except ValueError:
        raise BadRequest(f"Invalid base58 encoding for field '{field_name}'") from None