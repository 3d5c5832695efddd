from .base import BaseRepository
from .user_repository import UserRepository
from .document_repository import DocumentRepository
from .share_repository import ShareRepository
from .version_repository import VersionRepository
from .password_reset_repository import PasswordResetRepository

__all__ = [
    "BaseRepository",
    "UserRepository",
    "DocumentRepository",
    "ShareRepository",
    "VersionRepository",
    "PasswordResetRepository",
]
