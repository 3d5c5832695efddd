from .email_client import EmailClient

__all__ = [
    "EmailClient",
]
