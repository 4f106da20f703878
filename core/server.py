"""
HTTP endpoint receiving Slack interaction callbacks.

Slack posts button clicks, menu selections and dialog submissions as a
form-encoded body with a single `payload` field holding JSON.
"""

import json
import logging

from flask import Flask, jsonify, request

from .dispatcher import InteractionDispatcher
from .models import InteractionCallback, InteractionResponse, PayloadError

logger = logging.getLogger(__name__)


def parse_payload(raw: str | None) -> InteractionCallback:
    """
    Decode the `payload` form field.

    Raises:
        PayloadError: field missing, not JSON, or not a callback object
    """
    if not raw:
        raise PayloadError("missing payload")

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise PayloadError(f"payload is not valid JSON: {e}") from e

    return InteractionCallback.from_payload(data)


def create_server(dispatcher: InteractionDispatcher, interaction_path: str = "/interaction") -> Flask:
    """Create the Flask app serving interaction callbacks."""
    flask_app = Flask(__name__)

    @flask_app.route(interaction_path, methods=["GET", "POST"])
    def interaction():
        if request.method != "POST":
            logger.error(f"Invalid method: {request.method}")
            return "", 405

        try:
            callback = parse_payload(request.form.get("payload"))
        except PayloadError as e:
            logger.error(f"Failed to decode interaction payload: {e}")
            return "", 400

        return _to_http(dispatcher.dispatch(callback))

    @flask_app.route("/healthz", methods=["GET"])
    def healthz():
        return jsonify({"status": "ok"})

    return flask_app


def _to_http(response: InteractionResponse):
    if response.body is None:
        return "", response.status
    return jsonify(response.body), response.status
