from .auth import (
    UserRegister,
    UserLogin,
    AuthResponse,
    CurrentUser,
    ForgotPasswordRequest,
    ResetPasswordRequest,
    MessageResponse,
)
from .user import User, UserBase, UserSummary, UserContact, UserProfile
from .document import Document, DocumentBase, DocumentCreate, DocumentUpdate, to_document_schema
from .share import Share, ShareCreate, ShareResult, ShareDetail
from .version import DocumentVersion
from .search import SearchResult

__all__ = [
    "UserRegister",
    "UserLogin",
    "AuthResponse",
    "CurrentUser",
    "ForgotPasswordRequest",
    "ResetPasswordRequest",
    "MessageResponse",
    "User",
    "UserBase",
    "UserSummary",
    "UserContact",
    "UserProfile",
    "Document",
    "DocumentBase",
    "DocumentCreate",
    "DocumentUpdate",
    "to_document_schema",
    "Share",
    "ShareCreate",
    "ShareResult",
    "ShareDetail",
    "DocumentVersion",
    "SearchResult",
]
