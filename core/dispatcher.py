"""
Interaction dispatcher for the order bot.

Handles:
- Verifying the shared verification token on every callback
- Routing attachment actions to their handler by action name
- Dialog submissions and cancellations
- Answering the same callbacks when Slack delivers them over Socket Mode
"""

import hmac
import logging
from typing import Callable

import requests
from slack_sdk.errors import SlackApiError

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

from .messages import (
    ACTION_CANCEL,
    ACTION_DIALOG,
    ACTION_SELECT,
    ACTION_START,
    CALLBACK_ORDER,
    build_confirm_attachment,
    build_result_attachment,
)
from .models import CallbackAction, InteractionCallback, InteractionResponse, PayloadError

logger = logging.getLogger(__name__)

RESPONSE_URL_TIMEOUT = 10


class InteractionDispatcher:
    """Routes interaction callbacks to the handler for their action."""

    def __init__(self, client, verification_token: str):
        self.client = client
        self.verification_token = verification_token
        self.handlers: dict[str, Callable[[InteractionCallback, CallbackAction], InteractionResponse]] = {
            ACTION_SELECT: self._handle_select,
            ACTION_START: self._handle_start,
            ACTION_CANCEL: self._handle_cancel,
            ACTION_DIALOG: self._handle_dialog,
            ACTION_APPROVE: self._handle_approval,
            ACTION_REJECT: self._handle_approval,
        }

    def is_token_valid(self, token: str) -> bool:
        """Constant-time comparison against the configured token."""
        return hmac.compare_digest(
            (token or "").encode("utf-8"),
            self.verification_token.encode("utf-8"),
        )

    def register(self, app) -> None:
        """
        Route interactions delivered over the Socket Mode connection.

        With Socket Mode enabled Slack sends attachment actions and dialog
        callbacks down the socket instead of to the HTTP endpoint.
        """
        def handle_interaction(ack, body, respond):
            self.handle_bolt_request(ack, body, respond)

        for callback_id in (CALLBACK_ORDER, CALLBACK_APPROVAL):
            app.action({"type": "interactive_message", "callback_id": callback_id})(handle_interaction)
        for callback_type in ("dialog_submission", "dialog_cancellation"):
            app.action({"type": callback_type, "callback_id": CALLBACK_DIALOG})(handle_interaction)

    def handle_bolt_request(self, ack, body, respond) -> None:
        """
        Answer an interaction received through Bolt.

        Dialog errors go back in the ack; replacement messages go through
        the callback's response_url.
        """
        try:
            callback = InteractionCallback.from_payload(body)
        except PayloadError as e:
            ack()
            logger.error(f"Failed to decode interaction payload: {e}")
            return

        response = self.dispatch(callback)
        answer = response.body or {}

        if "errors" in answer:
            ack(dialog_errors=answer["errors"])
            return

        ack()
        if response.status != 200:
            logger.error(f"Interaction {callback.type} failed with status {response.status}")
            return
        if answer:
            respond(**answer)

    def dispatch(self, callback: InteractionCallback) -> InteractionResponse:
        """
        Handle a parsed interaction callback.

        Args:
            callback: Parsed callback payload

        Returns:
            InteractionResponse to write back to Slack
        """
        # Only accept callbacks carrying our token
        if not self.is_token_valid(callback.token):
            logger.error(f"Invalid token on {callback.type or 'unknown'} callback")
            return InteractionResponse.error(401)

        if callback.type == "interactive_message":
            return self._dispatch_action(callback)

        if callback.type == "dialog_submission":
            return self._handle_dialog_submission(callback)

        if callback.type == "dialog_cancellation":
            logger.info(f"User {callback.user.id} closed the {callback.callback_id} dialog")
            return InteractionResponse()

        logger.error(f"Unsupported callback type: {callback.type}")
        return InteractionResponse.error(400)

    def _dispatch_action(self, callback: InteractionCallback) -> InteractionResponse:
        if not callback.actions:
            logger.error("Interactive message without actions")
            return InteractionResponse.error(400)

        action = callback.actions[0]
        handler = self.handlers.get(action.name)
        if handler is None:
            logger.error(f"Invalid action was submitted: {action.name}")
            return InteractionResponse.error(400)

        return handler(callback, action)

    def _handle_select(self, callback: InteractionCallback, action: CallbackAction) -> InteractionResponse:
        value = action.selected_value
        if not value:
            logger.error("Select action without a selected option")
            return InteractionResponse.error(400)

        logger.info(f"User {callback.user.id} selected {value}")
        # Overwrite the original drop down message
        return InteractionResponse.replace(build_confirm_attachment(value))

    def _handle_start(self, callback: InteractionCallback, action: CallbackAction) -> InteractionResponse:
        logger.info(f"User {callback.user.id} confirmed the order")
        return InteractionResponse.replace(build_result_attachment(":ok: Donezo"))

    def _handle_cancel(self, callback: InteractionCallback, action: CallbackAction) -> InteractionResponse:
        logger.info(f"User {callback.user.id} canceled the order")
        title = f":x: @{callback.user.name} canceled the request"
        return InteractionResponse.replace(build_result_attachment(title))

    def _handle_dialog(self, callback: InteractionCallback, action: CallbackAction) -> InteractionResponse:
        dialog = build_order_dialog(item_name=action.value or None)

        try:
            self.client.dialog_open(trigger_id=callback.trigger_id, dialog=dialog)
        except SlackApiError as e:
            logger.error(f"Failed to open order dialog: {e.response.get('error', e)}")
            return InteractionResponse.error(500)

        logger.info(f"Opened order dialog for user {callback.user.id}")
        title = f":memo: @{callback.user.name} is filling in the order form"
        return InteractionResponse.replace(build_result_attachment(title))

    def _handle_approval(self, callback: InteractionCallback, action: CallbackAction) -> InteractionResponse:
        if action.name == ACTION_APPROVE:
            title = f":white_check_mark: @{callback.user.name} approved the order request"
        else:
            title = f":no_entry_sign: @{callback.user.name} rejected the order request"

        logger.info(f"User {callback.user.id} chose {action.name} on an order request")
        return InteractionResponse.replace(build_result_attachment(title))

    def _handle_dialog_submission(self, callback: InteractionCallback) -> InteractionResponse:
        if callback.callback_id != CALLBACK_DIALOG:
            logger.error(f"Unknown dialog submitted: {callback.callback_id}")
            return InteractionResponse.error(400)

        errors = validate_submission(callback.submission)
        if errors:
            logger.info(
                f"Rejected order dialog from {callback.user.id}: "
                f"{[e['name'] for e in errors]}"
            )
            return InteractionResponse(body={"errors": errors})

        order = OrderRequest.from_submission(
            callback.submission, callback.user.id, callback.user.name
        )

        try:
            self._send_ephemeral(
                callback,
                f"you said {order.item_name}",
                [make_approval_attachment(order)],
            )
        except (SlackApiError, requests.RequestException) as e:
            logger.error(f"Failed to post order approval: {e}")

        return InteractionResponse()

    def _send_ephemeral(
        self,
        callback: InteractionCallback,
        text: str,
        attachments: list[dict],
    ) -> None:
        """
        Show a message to the user behind a callback only.

        Goes through the callback's response_url when Slack provided one,
        otherwise through chat.postEphemeral.
        """
        if callback.response_url:
            resp = requests.post(
                callback.response_url,
                json={
                    "response_type": "ephemeral",
                    "replace_original": False,
                    "text": text,
                    "attachments": attachments,
                },
                timeout=RESPONSE_URL_TIMEOUT,
            )
            resp.raise_for_status()
            return

        self.client.chat_postEphemeral(
            channel=callback.channel.id,
            user=callback.user.id,
            text=text,
            attachments=attachments,
        )
