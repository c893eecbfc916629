"""Instructions of the system program."""

from __future__ import annotations

from .keys import Pubkey
from .types import AccountMeta, Instruction

SYSTEM_PROGRAM_ID = Pubkey(bytes(32))

_TRANSFER_TAG = 2
_U64_MAX = 2**64 - 1


def transfer(from_pubkey: Pubkey, to_pubkey: Pubkey, lamports: int) -> Instruction:
    """Build an instruction moving lamports between two accounts."""
    if not 0 <= lamports <= _U64_MAX:
        raise ValueError("lamports must fit in an unsigned 64-bit integer")
    data = _TRANSFER_TAG.to_bytes(4, "little") + lamports.to_bytes(8, "little")
    return Instruction(
        program_id=SYSTEM_PROGRAM_ID,
        accounts=[
            AccountMeta(from_pubkey, is_signer=True, is_writable=True),
            AccountMeta(to_pubkey, is_signer=False, is_writable=True),
        ],
        data=data,
    )