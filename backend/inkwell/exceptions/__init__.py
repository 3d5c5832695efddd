from .base import InkwellException
from .not_found import NotFoundError
from .validation import ValidationError, ConflictError
from .auth import AuthenticationError, AuthorizationError, InvalidTokenError

__all__ = [
    "InkwellException",
    "NotFoundError",
    "ValidationError",
    "ConflictError",
    "AuthenticationError",
    "AuthorizationError",
    "InvalidTokenError",
]
