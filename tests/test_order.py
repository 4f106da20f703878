"""Tests for order request validation, approval messages and the dialog."""

import pytest

from order import (
    ACTION_APPROVE,
    ACTION_REJECT,
    CALLBACK_APPROVAL,
    CALLBACK_DIALOG,
    OrderRequest,
    build_order_dialog,
    make_approval_attachment,
    validate_submission,
)

VALID_SUBMISSION = {
    "item_name": "Yona Yona Ale",
    "item_url": "https://example.com/yona-yona",
    "item_reason": "Friday drinks",
    "item_count": "12",
}


def _error_names(errors):
    return [e["name"] for e in errors]


# ---------------------------------------------------------------------------
# Tests: validate_submission
# ---------------------------------------------------------------------------


class TestValidateSubmission:

    def test_valid(self):
        assert validate_submission(VALID_SUBMISSION) == []

    def test_url_and_reason_optional(self):
        assert validate_submission({"item_name": "Suntory Malts", "item_count": "1"}) == []

    def test_missing_name(self):
        errors = validate_submission({**VALID_SUBMISSION, "item_name": "  "})
        assert _error_names(errors) == ["item_name"]

    def test_bad_url(self):
        errors = validate_submission({**VALID_SUBMISSION, "item_url": "example.com"})
        assert _error_names(errors) == ["item_url"]

    @pytest.mark.parametrize("count", ["0", "100", "-1", "two", "1.5", "", None, "²", "١٢"])
    def test_bad_count(self, count):
        errors = validate_submission({**VALID_SUBMISSION, "item_count": count})
        assert _error_names(errors) == ["item_count"]

    @pytest.mark.parametrize("count", ["1", "99"])
    def test_count_bounds(self, count):
        assert validate_submission({**VALID_SUBMISSION, "item_count": count}) == []

    def test_count_sent_as_number(self):
        assert validate_submission({**VALID_SUBMISSION, "item_count": 3}) == []

    def test_collects_all_errors(self):
        errors = validate_submission({"item_url": "ftp://x", "item_count": "0"})
        assert _error_names(errors) == ["item_name", "item_url", "item_count"]


# ---------------------------------------------------------------------------
# Tests: make_approval_attachment
# ---------------------------------------------------------------------------


class TestApprovalAttachment:

    def _order(self, **overrides):
        submission = {**VALID_SUBMISSION, **overrides}
        return OrderRequest.from_submission(submission, "U0ALICE", "alice")

    def test_header(self):
        attachment = make_approval_attachment(self._order())
        assert attachment["text"] == "@alice submitted order request"
        assert attachment["color"] == "#36a64f"
        assert attachment["callback_id"] == CALLBACK_APPROVAL

    def test_fields(self):
        attachment = make_approval_attachment(self._order())
        fields = {f["title"]: f["value"] for f in attachment["fields"]}
        assert fields == {
            "Item name": "Yona Yona Ale",
            "Reason": "Friday drinks",
            "URL": "https://example.com/yona-yona",
            "How many": "12",
        }
        assert all(f["short"] is False for f in attachment["fields"])

    def test_buttons(self):
        attachment = make_approval_attachment(self._order())
        assert [(a["name"], a["style"]) for a in attachment["actions"]] == [
            (ACTION_APPROVE, "primary"),
            (ACTION_REJECT, "danger"),
        ]

    def test_missing_optional_fields_are_blank(self):
        order = OrderRequest.from_submission(
            {"item_name": "Suntory Malts", "item_count": "1", "item_url": None},
            "U0ALICE",
            "alice",
        )
        assert order.item_url == ""
        assert order.item_reason == ""


# ---------------------------------------------------------------------------
# Tests: build_order_dialog
# ---------------------------------------------------------------------------


class TestOrderDialog:

    def test_definition(self):
        dialog = build_order_dialog()
        assert dialog["callback_id"] == CALLBACK_DIALOG
        assert dialog["notify_on_cancel"] is True
        assert [e["name"] for e in dialog["elements"]] == [
            "item_name", "item_url", "item_reason", "item_count",
        ]

    def test_prefill(self):
        dialog = build_order_dialog("Suntory Malts")
        assert dialog["elements"][0]["value"] == "Suntory Malts"

    def test_no_prefill(self):
        dialog = build_order_dialog()
        assert "value" not in dialog["elements"][0]

    def test_count_defaults_to_one(self):
        count = build_order_dialog()["elements"][3]
        assert count["subtype"] == "number"
        assert count["value"] == "1"
