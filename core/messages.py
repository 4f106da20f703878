"""
Slack attachment builders for the ordering flow.

Every builder returns a plain dict in Slack's legacy attachment schema,
ready to be passed to chat.postEphemeral or returned as a replacement
message.
"""

from typing import Optional

# Attachment action names, used as the dispatch keys for callbacks
ACTION_SELECT = "select"
ACTION_START = "start"
ACTION_DIALOG = "dialog"
ACTION_CANCEL = "cancel"

CALLBACK_ORDER = "order"

ORDER_COLOR = "#f9a41b"


def title_case(value: str) -> str:
    """
    Upper-case the first letter of every word.

    A word starts after whitespace or ASCII punctuation, so "yona-yona"
    becomes "Yona-Yona". Unlike str.title() the rest of each word is left
    alone, so "IPA" stays "IPA".
    """
    chars = []
    at_word_start = True
    for ch in value:
        chars.append(ch.upper() if at_word_start else ch)
        at_word_start = ch.isspace() or (
            ch.isascii() and not (ch.isalnum() or ch == "_")
        )
    return "".join(chars)


def button(name: str, text: str, style: Optional[str] = None, value: Optional[str] = None) -> dict:
    """Build a button attachment action."""
    action = {"name": name, "text": text, "type": "button"}
    if value is not None:
        action["value"] = value
    if style:
        action["style"] = style
    return action


def build_menu_attachment(items: list[str], prompt: str) -> dict:
    """
    Build the order menu posted when a user mentions the bot.

    Args:
        items: Menu entries, used as both option text and value
        prompt: Text shown above the dropdown
    """
    return {
        "text": prompt,
        "color": ORDER_COLOR,
        "callback_id": CALLBACK_ORDER,
        "actions": [
            {
                "name": ACTION_SELECT,
                "type": "select",
                "options": [{"text": item, "value": item} for item in items],
            },
            button(ACTION_CANCEL, "Cancel", style="danger"),
        ],
    }


def build_confirm_attachment(item: str) -> dict:
    """Build the confirmation prompt that replaces the menu after a selection."""
    return {
        "text": f"OK to order {title_case(item)} ?",
        "color": ORDER_COLOR,
        "callback_id": CALLBACK_ORDER,
        "actions": [
            button(ACTION_START, "Yes", style="primary", value="start"),
            button(ACTION_DIALOG, "Open Dialog", style="warning", value=item),
            button(ACTION_CANCEL, "No", style="danger"),
        ],
    }


def build_result_attachment(title: str, value: str = "") -> dict:
    """
    Build a final message without buttons.

    Used to replace an interactive message once the user has acted on it.
    """
    return {
        "color": ORDER_COLOR,
        "callback_id": CALLBACK_ORDER,
        "actions": [],
        "fields": [
            {"title": title, "value": value, "short": False},
        ],
    }
