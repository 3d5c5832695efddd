from .user import User
from .document import Document
from .share import DocumentShare, Permission
from .version import DocumentVersion
from .password_reset import PasswordReset

__all__ = [
    "User",
    "Document",
    "DocumentShare",
    "Permission",
    "DocumentVersion",
    "PasswordReset",
]
