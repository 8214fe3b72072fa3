"""Conversation module."""

from .receipts import ReceiptSimulator
from .service import LOCAL_USER_ID, IMessagingService, MessagingService

__all__ = [
    "LOCAL_USER_ID",
    "IMessagingService",
    "MessagingService",
    "ReceiptSimulator",
]
