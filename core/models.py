"""
Data models for the order bot.

Interaction callbacks arrive as Slack's JSON payload and are parsed into
dataclasses here so the dispatcher never digs through raw dicts.
"""

from dataclasses import dataclass, field
from typing import Optional, Any


class InvalidMessageError(ValueError):
    """Raised when a mention to the bot is not a command it understands."""


class PayloadError(ValueError):
    """Raised when an interaction callback payload cannot be parsed."""


def _string(data: dict, key: str) -> str:
    """Read an optional string field, rejecting any other JSON type."""
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise PayloadError(f"{key} must be a string")
    return value


def _object(data: dict, key: str) -> dict:
    """Read an optional object field, rejecting any other JSON type."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise PayloadError(f"{key} must be an object")
    return value


@dataclass
class CallbackUser:
    """The Slack user who triggered an interaction."""
    id: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "CallbackUser":
        data = data or {}
        return cls(
            id=_string(data, "id"),
            name=_string(data, "name"),
        )


@dataclass
class CallbackChannel:
    """The channel an interaction happened in."""
    id: str = ""
    name: str = ""

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "CallbackChannel":
        data = data or {}
        return cls(
            id=_string(data, "id"),
            name=_string(data, "name"),
        )


@dataclass
class CallbackAction:
    """A single attachment action (button click or menu selection)."""
    name: str
    type: str = ""
    value: str = ""
    selected_options: list[dict] = field(default_factory=list)

    @property
    def selected_value(self) -> Optional[str]:
        """Value of the first selected menu option, if any."""
        if not self.selected_options:
            return None
        return self.selected_options[0].get("value")

    @classmethod
    def from_dict(cls, data: dict) -> "CallbackAction":
        selected_options = data.get("selected_options") or []
        if not isinstance(selected_options, list) or not all(
            isinstance(o, dict) and isinstance(o.get("value", ""), str)
            for o in selected_options
        ):
            raise PayloadError("selected_options must be a list of objects with string values")

        return cls(
            name=_string(data, "name"),
            type=_string(data, "type"),
            value=_string(data, "value"),
            selected_options=selected_options,
        )


@dataclass
class InteractionCallback:
    """
    Parsed interaction payload.

    Covers interactive_message, dialog_submission and dialog_cancellation
    callbacks. Fields a callback type does not carry stay empty.
    """
    type: str
    token: str
    callback_id: str = ""
    trigger_id: str = ""
    response_url: str = ""
    user: CallbackUser = field(default_factory=CallbackUser)
    channel: CallbackChannel = field(default_factory=CallbackChannel)
    actions: list[CallbackAction] = field(default_factory=list)
    submission: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: Any) -> "InteractionCallback":
        """
        Build a callback from the decoded JSON payload.

        Raises:
            PayloadError: if the payload is not a JSON object or any known
                field has the wrong JSON type
        """
        if not isinstance(payload, dict):
            raise PayloadError("payload is not a JSON object")

        raw_actions = payload.get("actions") or []
        if not isinstance(raw_actions, list) or not all(
            isinstance(a, dict) for a in raw_actions
        ):
            raise PayloadError("actions must be a list of objects")

        submission = _object(payload, "submission")

        callback_type = _string(payload, "type")
        # Older deliveries omit the type but always carry actions
        if not callback_type and raw_actions:
            callback_type = "interactive_message"

        return cls(
            type=callback_type,
            token=_string(payload, "token"),
            callback_id=_string(payload, "callback_id"),
            trigger_id=_string(payload, "trigger_id"),
            response_url=_string(payload, "response_url"),
            user=CallbackUser.from_dict(_object(payload, "user")),
            channel=CallbackChannel.from_dict(_object(payload, "channel")),
            actions=[CallbackAction.from_dict(a) for a in raw_actions],
            submission=submission,
        )


@dataclass
class InteractionResponse:
    """HTTP answer to an interaction callback."""
    status: int = 200
    body: Optional[dict] = None

    @classmethod
    def replace(cls, attachment: dict) -> "InteractionResponse":
        """Answer that replaces the original message with one attachment."""
        return cls(
            status=200,
            body={"replace_original": True, "attachments": [attachment]},
        )

    @classmethod
    def error(cls, status: int) -> "InteractionResponse":
        return cls(status=status)


@dataclass
class BotConfig:
    """Runtime configuration assembled from the environment and bot JSON."""
    bot_token: str
    app_token: str
    verification_token: str
    bot_id: str
    channel_id: str
    name: str = "order-bot"
    port: int = 3000
    interaction_path: str = "/interaction"
    trigger_word: str = "hey"
    prompt: str = "Which beer do you want? :beer:"
    menu: list[str] = field(default_factory=lambda: [
        "Asahi Super Dry",
        "Kirin Lager Beer",
        "Sapporo Black Label",
        "Suntory Malts",
        "Yona Yona Ale",
    ])
