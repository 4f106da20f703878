"""Shared fixtures for the order bot test suite.

Slack's Web client is always a MagicMock; no test talks to Slack.
"""

import json
from typing import Any, Dict, Optional
from unittest.mock import MagicMock

import pytest

from core.dispatcher import InteractionDispatcher
from core.models import BotConfig
from core.server import create_server

VERIFICATION_TOKEN = "test-verification-token"
BOT_ID = "UBOT123"
CHANNEL_ID = "C0ORDERS"


# ---------------------------------------------------------------------------
# Payload helpers
# ---------------------------------------------------------------------------


def make_action_payload(
    name: str,
    value: Optional[str] = None,
    selected: Optional[str] = None,
    token: str = VERIFICATION_TOKEN,
) -> Dict[str, Any]:
    """Build an interactive_message payload for a single attachment action."""
    action: Dict[str, Any] = {"name": name, "type": "button"}
    if value is not None:
        action["value"] = value
    if selected is not None:
        action["type"] = "select"
        action["selected_options"] = [{"value": selected}]

    return {
        "type": "interactive_message",
        "token": token,
        "callback_id": "order",
        "trigger_id": "13345224609.738474920.8088930838d88f008e0",
        "response_url": "https://hooks.slack.com/actions/T0/1/abc",
        "user": {"id": "U0ALICE", "name": "alice"},
        "channel": {"id": CHANNEL_ID, "name": "orders"},
        "actions": [action],
    }


def make_submission_payload(
    submission: Dict[str, Any],
    token: str = VERIFICATION_TOKEN,
    response_url: str = "https://hooks.slack.com/app/T0/2/def",
) -> Dict[str, Any]:
    """Build a dialog_submission payload."""
    return {
        "type": "dialog_submission",
        "token": token,
        "callback_id": "order_dialog",
        "response_url": response_url,
        "user": {"id": "U0ALICE", "name": "alice"},
        "channel": {"id": CHANNEL_ID, "name": "orders"},
        "submission": submission,
    }


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def bot_config() -> BotConfig:
    return BotConfig(
        bot_token="xoxb-test",
        app_token="xapp-test",
        verification_token=VERIFICATION_TOKEN,
        bot_id=BOT_ID,
        channel_id=CHANNEL_ID,
    )


@pytest.fixture
def slack_client() -> MagicMock:
    client = MagicMock()
    client.chat_postEphemeral.return_value = {"ok": True, "message_ts": "1700000000.000100"}
    client.dialog_open.return_value = {"ok": True}
    return client


@pytest.fixture
def dispatcher(slack_client) -> InteractionDispatcher:
    return InteractionDispatcher(slack_client, VERIFICATION_TOKEN)


@pytest.fixture
def http_client(dispatcher):
    server = create_server(dispatcher)
    server.config["TESTING"] = True
    return server.test_client()


def post_payload(http_client, payload: Any):
    """POST a payload the way Slack does: form-encoded JSON string."""
    return http_client.post("/interaction", data={"payload": json.dumps(payload)})
