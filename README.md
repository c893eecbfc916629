# solbridge

solbridge is a small JSON-over-HTTP service for everyday Solana chores. It
can do three things:

* generate ed25519 keypairs;
* sign messages with a keypair and verify signatures;
* build System Program transfer instructions.

Every answer is computed locally.

## Running the server

```
solbridge
```

The command takes these options:

* `--host` sets the address to bind. The default is `127.0.0.1`.
* `--port` sets the port. The default is `8000`.
* `--rpc-url` sets a cluster RPC address. The value is stored in the
  application state, but no endpoint uses it.

The server runs with Flask's built-in development server, and logging is
set to INFO.

In your own code, `solbridge.app.create_app(state)` returns the Flask
application for a given `solbridge.types.AppState`. You can mount it or
serve it however you like. `AppState` has two fields:

* `app_name`, which the health check reports;
* `rpc_url`, which defaults to `None`.

If you do not pass a state, `create_app` uses a default one.

## Endpoints

Every successful JSON answer has this shape:

```json
{"success": true, "data": { ... }}
```

Every failure is answered with HTTP status 400:

```json
{"success": false, "error": "Missing required fields"}
```

The service answers `Missing required fields` in each of these cases:

* the body is missing or is not valid JSON;
* a required field is absent;
* a field has the wrong JSON type.

### `GET /`

A plain-text health check. Its text has the form
`Server running as expected:  <app_name>`.

### `POST /keypair`

Generates a fresh keypair. The answer holds two base58 strings:

* `pubkey`, the 32-byte public key;
* `secret`, the 64-byte keypair, which is the secret half followed by the
  public half.

```json
{"success": true, "data": {"pubkey": "...", "secret": "..."}}
```

### `POST /message/sign`

Request:

```json
{"message": "hello", "secret": "secret"}
```

`secret` must be a base58-encoded 64-byte keypair, such as the one returned
by `/keypair`. The answer holds three fields:

* `signature`, the signature in base64;
* `public_key`, the signer's key in base58;
* `message`, the message that was signed.

The request fails in these cases:

* An empty `message` or `secret` gives `Missing required fields`.
* A secret that is not valid base58 gives
  `Invalid base58 encoding for field 'secret'`.
* A secret that is not 64 bytes gives the same error.
* A secret whose public half does not match its secret half gives the same
  error.

### `POST /message/verify`

Request:

```json
{"message": "hello", "signature": "<base64>", "pubkey": "<base58>"}
```

The answer holds `valid`, which is `true` or `false`. It also echoes
`message` and `pubkey`. The request fails in these cases:

* an empty field gives `Missing required fields`;
* a malformed public key gives `Invalid base58 encoding for field 'pubkey'`;
* a signature that is not strict base64 gives
  `Invalid base64 encoding for field 'signature'`;
* a signature that does not decode to 64 bytes gives
  `Signature must be 64 bytes`.

### `POST /send/sol`

Request:

```json
{"from": "<base58>", "to": "<base58>", "lamports": 1000}
```

`lamports` must be a JSON integer that fits in an unsigned 64-bit value.

The answer describes a System Program transfer instruction with three
fields:

* `program_id`, the System Program's key, which is all ones in base58;
* `accounts`, the sender then the recipient;
* `instruction_data`, in base64.

The instruction data is the little-endian u32 tag `2` followed by the
little-endian u64 amount.

The request fails in these cases:

* a zero amount gives `Lamports must be greater than zero`;
* an invalid key gives `Invalid base58 encoding for field 'from'` or
  `Invalid base58 encoding for field 'to'`.

## Library use

The building blocks can be imported directly.

`solbridge.keys` provides:

* `b58encode` and `b58decode` convert between bytes and base58 text.
  `b58decode` raises `ValueError` on characters outside the alphabet.
* `Pubkey` holds a 32-byte key. Its `str()` is the base58 form.
  `Pubkey.from_string` parses that form.
* `Keypair.generate` creates a keypair.
* `Keypair.from_base58` and `Keypair.to_base58` load and save a keypair.
* `Keypair.sign` signs a message.
* `Keypair.pubkey` is the keypair's public key.
* `verify_signature(pubkey, message, signature)` returns `True` or `False`.
* `parse_pubkey(key_str, field_name)` raises a `BadRequest` error that
  names the field.

`solbridge.system` provides `transfer(from_pubkey, to_pubkey, lamports)`,
which builds the transfer `Instruction`.

`solbridge.types` provides the following:

* the error classes `ApiError`, `BadRequest` and `InternalError`. Each has
  a `to_response()` method, which returns the status code and the JSON
  body.
* `AccountMeta` and `Instruction`. `Instruction.to_response_data()`
  describes an instruction with length-prefixed data.
* `success_response`.

```python
from solbridge.keys import Keypair, b58decode, b58encode, verify_signature

keypair = Keypair.generate()
signature = keypair.sign(b"hello")
assert verify_signature(keypair.pubkey, b"hello", signature)
assert b58decode(b58encode(b"\x00\x01")) == b"\x00\x01"
```

## What it does not do

The service never connects to a Solana cluster. It does not submit
transactions, query balances or look up accounts. There are no SPL token
endpoints: it cannot create tokens, mint them or transfer them. The only
instruction it builds is the SOL transfer.