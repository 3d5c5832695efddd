from email.message import EmailMessage
from urllib.parse import urlencode
import smtplib
from ..config import Settings
import logging

logger = logging.getLogger(__name__)


class EmailClient:
    """Sends transactional email over SMTP"""

    def __init__(self, settings: Settings):
        self.settings = settings

    @property
    def enabled(self) -> bool:
        return bool(self.settings.smtp_host)

    def build_reset_url(self, token: str) -> str:
        base_url = self.settings.frontend_url.rstrip("/")
        return f"{base_url}/reset-password?{urlencode({'token': token})}"

    def send_password_reset(self, to_email: str, first_name: str, token: str) -> bool:
        """Send the password reset link; returns False when SMTP is not configured"""
        if not self.enabled:
            logger.warning(f"SMTP not configured, password reset email to {to_email} not sent")
            return False

        reset_url = self.build_reset_url(token)
        minutes = self.settings.password_reset_expiration_minutes
        message = EmailMessage()
        message["Subject"] = "Reset your password"
        message["From"] = self.settings.email_from
        message["To"] = to_email
        message.set_content(
            f"Hi {first_name},\n\n"
            f"We received a request to reset your password. Open the link below to choose a new one:\n\n"
            f"{reset_url}\n\n"
            f"The link expires in {minutes} minutes. If you did not ask for a reset, ignore this email.\n"
        )

        self._send(message)
        logger.info(f"Password reset email sent to {to_email}")
        return True

    def _send(self, message: EmailMessage) -> None:
        with smtplib.SMTP(self.settings.smtp_host, self.settings.smtp_port, timeout=10) as smtp:
            if self.settings.smtp_use_tls:
                smtp.starttls()
            if self.settings.smtp_username:
                smtp.login(self.settings.smtp_username, self.settings.smtp_password or "")
            smtp.send_message(message)
