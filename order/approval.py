"""
Order requests submitted through the order dialog.

Turns a dialog submission into an OrderRequest, validates it, and builds
the approval attachment shown back to the requester.
"""

from dataclasses import dataclass
from typing import Any

ACTION_APPROVE = "approve"
ACTION_REJECT = "reject"

CALLBACK_APPROVAL = "order_approval"
APPROVAL_COLOR = "#36a64f"

MAX_ITEM_COUNT = 99


def _text(submission: dict[str, Any], name: str) -> str:
    """Stripped string value of a dialog element, blank when missing."""
    value = submission.get(name)
    if value is None:
        return ""
    return str(value).strip()


@dataclass
class OrderRequest:
    """An order as entered in the dialog."""
    item_name: str
    item_url: str
    item_reason: str
    item_count: str
    user_id: str
    user_name: str

    @classmethod
    def from_submission(cls, submission: dict[str, Any], user_id: str, user_name: str) -> "OrderRequest":
        return cls(
            item_name=_text(submission, "item_name"),
            item_url=_text(submission, "item_url"),
            item_reason=_text(submission, "item_reason"),
            item_count=_text(submission, "item_count"),
            user_id=user_id,
            user_name=user_name,
        )


def validate_submission(submission: dict[str, Any]) -> list[dict]:
    """
    Check a dialog submission.

    Returns:
        Slack dialog errors ({"name": element, "error": text}), empty when
        the submission is valid
    """
    errors = []

    item_name = _text(submission, "item_name")
    if not item_name:
        errors.append({"name": "item_name", "error": "Tell us what to order"})

    item_url = _text(submission, "item_url")
    if item_url and not item_url.startswith(("http://", "https://")):
        errors.append({"name": "item_url", "error": "URL must start with http:// or https://"})

    item_count = _text(submission, "item_count")
    # isdigit alone accepts superscripts and non-Latin digits int() rejects
    if not (item_count.isascii() and item_count.isdigit()) or not 1 <= int(item_count) <= MAX_ITEM_COUNT:
        errors.append({
            "name": "item_count",
            "error": f"Enter a whole number from 1 to {MAX_ITEM_COUNT}",
        })

    return errors


def make_approval_attachment(order: OrderRequest) -> dict:
    """Build the attachment asking for the order to be approved or rejected."""
    return {
        "text": f"@{order.user_name} submitted order request",
        "color": APPROVAL_COLOR,
        "callback_id": CALLBACK_APPROVAL,
        "fields": [
            {"title": "Item name", "value": order.item_name, "short": False},
            {"title": "Reason", "value": order.item_reason, "short": False},
            {"title": "URL", "value": order.item_url, "short": False},
            {"title": "How many", "value": order.item_count, "short": False},
        ],
        "actions": [
            {"name": ACTION_APPROVE, "text": "Approve", "type": "button", "style": "primary"},
            {"name": ACTION_REJECT, "text": "Reject", "type": "button", "style": "danger"},
        ],
    }
