"""
Order request dialog and approval messages.
"""

from .approval import (
    ACTION_APPROVE,
    ACTION_REJECT,
    CALLBACK_APPROVAL,
    OrderRequest,
    validate_submission,
    make_approval_attachment,
)
from .dialog import CALLBACK_DIALOG, build_order_dialog

__all__ = [
    'ACTION_APPROVE',
    'ACTION_REJECT',
    'CALLBACK_APPROVAL',
    'CALLBACK_DIALOG',
    'OrderRequest',
    'validate_submission',
    'make_approval_attachment',
    'build_order_dialog',
]
