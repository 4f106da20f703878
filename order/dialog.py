"""
Order request dialog definition.
"""

from typing import Optional

CALLBACK_DIALOG = "order_dialog"


def build_order_dialog(item_name: Optional[str] = None) -> dict:
    """
    Build the dialog opened by the "Open Dialog" button.

    Args:
        item_name: Prefills the item field, usually the item picked from
            the menu
    """
    name_element = {
        "type": "text",
        "label": "Item name",
        "name": "item_name",
        "placeholder": "Yona Yona Ale",
    }
    if item_name:
        name_element["value"] = item_name

    return {
        "callback_id": CALLBACK_DIALOG,
        "title": "Order request",
        "submit_label": "Request",
        "notify_on_cancel": True,
        "elements": [
            name_element,
            {
                "type": "text",
                "subtype": "url",
                "label": "URL",
                "name": "item_url",
                "optional": True,
            },
            {
                "type": "textarea",
                "label": "Reason",
                "name": "item_reason",
                "optional": True,
                "hint": "Why should we order this?",
            },
            {
                "type": "text",
                "subtype": "number",
                "label": "How many",
                "name": "item_count",
                "value": "1",
            },
        ],
    }
