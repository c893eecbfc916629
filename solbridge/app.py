"""The HTTP application and its command-line entry point."""

from __future__ import annotations

import argparse
import logging

from flask import Flask, Response, jsonify, request

from . import handlers
from .types import ApiError, AppState


def create_app(state: AppState | None = None) -> Flask:
    """Build the Flask application serving all endpoints."""
    state = state or AppState()
    app = Flask(__name__)

    def _json_payload():
        payload = request.get_json(silent=True)
        if payload is None:
            raise handlers.BadRequest(handlers.MISSING_FIELDS)
        return payload

    @app.errorhandler(ApiError)
    def _handle_api_error(err: ApiError):
        status, body = err.to_response()
        return jsonify(body), status

    @app.get("/")
    def health():
        return Response(handlers.get_health(state), mimetype="text/plain")

    @app.post("/keypair")
    def keypair():
        return jsonify(handlers.generate_keypair())

    @app.post("/message/sign")
    def sign():
        return jsonify(handlers.sign_message(_json_payload()))

    @app.post("/message/verify")
    def verify():
        return jsonify(handlers.verify_message(_json_payload()))

    @app.post("/send/sol")
    def send():
        return jsonify(handlers.send_sol(_json_payload()))

    return app


def main(argv: list[str] | None = None) -> int:
    """Run the HTTP server."""
    parser = argparse.ArgumentParser(description="Run the HTTP server.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8000)
    parser.add_argument("--rpc-url", default=None)
    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    app = create_app(AppState(rpc_url=args.rpc_url))
    app.run(host=args.host, port=args.port)
    return 0