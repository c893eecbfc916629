import base64

import pytest

from solbridge.handlers import (
    generate_keypair,
    get_health,
    send_sol,
    sign_message,
    verify_message,
)
from solbridge.keys import Keypair, Pubkey
from solbridge.types import AppState, BadRequest


def test_get_health():
    assert get_health(AppState(app_name="demo")) == "Server running as expected:  demo"


def test_generate_keypair_is_consistent():
    body = generate_keypair()
    assert body["success"] is True
    pair = Keypair.from_base58(body["data"]["secret"])
    assert str(pair.pubkey) == body["data"]["pubkey"]


def test_sign_then_verify():
    pair = Keypair.generate()
    signed = sign_message({"message": "hello", "secret": pair.to_base58()})["data"]
    assert signed["public_key"] == str(pair.pubkey)
    assert signed["message"] == "hello"
    result = verify_message(
        {"message": "hello", "signature": signed["signature"], "pubkey": signed["public_key"]}
    )
    assert result == {
        "success": True,
        "data": {"valid": True, "message": "hello", "pubkey": signed["public_key"]},
    }


def test_verify_wrong_message_is_invalid():
    pair = Keypair.generate()
    signed = sign_message({"message": "hello", "secret": pair.to_base58()})["data"]
    result = verify_message(
        {"message": "bye", "signature": signed["signature"], "pubkey": str(pair.pubkey)}
    )
    assert result["data"]["valid"] is False


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"message": "hi"},
        {"message": "", "secret": "secret"},
        {"message": 3, "secret": "secret"},
        ["message"],
    ],
)
def test_sign_missing_fields(payload):
    with pytest.raises(BadRequest) as info:
        sign_message(payload)
    assert info.value.message == "Missing required fields"


def test_sign_invalid_secret():
    with pytest.raises(BadRequest) as info:
        sign_message({"message": "hi", "secret": "secret"})
    assert info.value.message == "Invalid base58 encoding for field 'secret'"


def test_verify_invalid_pubkey():
    with pytest.raises(BadRequest) as info:
        verify_message({"message": "hi", "signature": "AAAA", "pubkey": "0bad"})
    assert info.value.message == "Invalid base58 encoding for field 'pubkey'"


def test_verify_invalid_base64():
    key = str(Keypair.generate().pubkey)
    with pytest.raises(BadRequest) as info:
        verify_message({"message": "hi", "signature": "***", "pubkey": key})
    assert info.value.message == "Invalid base64 encoding for field 'signature'"


def test_verify_wrong_signature_length():
    key = str(Keypair.generate().pubkey)
    sig = base64.b64encode(b"x" * 10).decode()
    with pytest.raises(BadRequest) as info:
        verify_message({"message": "hi", "signature": sig, "pubkey": key})
    assert info.value.message == "Signature must be 64 bytes"


def test_send_sol_builds_transfer():
    src, dst = str(Keypair.generate().pubkey), str(Keypair.generate().pubkey)
    data = send_sol({"from": src, "to": dst, "lamports": 42})["data"]
    assert data["accounts"] == [src, dst]
    assert data["program_id"] == str(Pubkey(bytes(32)))
    raw = base64.b64decode(data["instruction_data"])
    assert int.from_bytes(raw[4:], "little") == 42


def test_send_sol_zero_lamports():
    src, dst = str(Keypair.generate().pubkey), str(Keypair.generate().pubkey)
    with pytest.raises(BadRequest) as info:
        send_sol({"from": src, "to": dst, "lamports": 0})
    assert info.value.message == "Lamports must be greater than zero"


@pytest.mark.parametrize("lamports", [-1, "5", True, 1.5])
def test_send_sol_bad_lamports_type(lamports):
    with pytest.raises(BadRequest) as info:
        send_sol({"from": "a", "to": "b", "lamports": lamports})
    assert info.value.message == "Missing required fields"


def test_send_sol_invalid_to():
    src = str(Keypair.generate().pubkey)
    with pytest.raises(BadRequest) as info:
        send_sol({"from": src, "to": "nope", "lamports": 1})
    assert info.value.message == "Invalid base58 encoding for field 'to'"