"""
Auth Event Handler

Handles account events:
- PasswordResetRequestedEvent
"""
from ..events import PasswordResetRequestedEvent
from ....clients import EmailClient
import logging

logger = logging.getLogger(__name__)


class AuthEventHandler:
    """Handler for account-related events"""
    
    def __init__(self, email_client: EmailClient):
        self.email_client = email_client
    
    def handle_password_reset_requested(self, event: PasswordResetRequestedEvent):
        """Send the reset email; failures are logged by the event bus"""
        logger.info(f"Password reset requested for user {event.user_id}")
        self.email_client.send_password_reset(event.email, event.first_name, event.token)
