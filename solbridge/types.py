"""Shared response types, API errors and instruction descriptions."""

from __future__ import annotations

import base64
from dataclasses import dataclass, field
from typing import Any


class ApiError(Exception):
    """An error reported to the client as a JSON error body."""

    status_code = 400
    label = "Error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"{self.label}: {self.message}"

    def _client_message(self) -> str:
        return self.message

    def to_response(self) -> tuple[int, dict[str, Any]]:
        """Return the HTTP status code and JSON body for this error."""
        return self.status_code, {"success": False, "error": self._client_message()}


class BadRequest(ApiError):
    """The request was malformed or carried invalid values."""

    label = "Bad Request"


class InternalError(ApiError):
    """Something failed on the server side."""

    label = "Internal Server Error"

    def _client_message(self) -> str:
        return f"An internal error occurred: {self.message}"


@dataclass
class AppState:
    """Application-wide state shared by the request handlers."""

    app_name: str = "Superdev assingment"
    rpc_url: str | None = None


@dataclass(frozen=True)
class AccountMeta:
    """An account referenced by an instruction."""

    pubkey: Any
    is_signer: bool
    is_writable: bool


@dataclass(frozen=True)
class Instruction:
    """A program instruction: the program, its accounts and its raw data."""

    program_id: Any
    accounts: list[AccountMeta] = field(default_factory=list)
    data: bytes = b""

    def to_response_data(self) -> dict[str, Any]:
        """Describe the instruction as JSON-ready data.

        The instruction data is length-prefixed (little-endian u64) before
        being base64 encoded.
        """
        serialized = len(self.data).to_bytes(8, "little") + bytes(self.data)
        return {
            "program_id": str(self.program_id),
            "accounts": [
                {
                    "pubkey": str(meta.pubkey),
                    "is_signer": meta.is_signer,
                    "is_writable": meta.is_writable,
                }
                for meta in self.accounts
            ],
            "instruction_data": base64.b64encode(serialized).decode("ascii"),
        }


def success_response(data: Any) -> dict[str, Any]:
    """Wrap data in the standard success envelope."""
    return {"success": True, "data": data}