from .auth_service import AuthService
from .document_service import DocumentService
from .share_service import ShareService
from .version_service import VersionService
from .search_service import SearchService
from .user_service import UserService

__all__ = [
    "AuthService",
    "DocumentService",
    "ShareService",
    "VersionService",
    "SearchService",
    "UserService",
]
