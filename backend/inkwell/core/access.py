"""
Access Evaluator

Single place where view/edit/manage permission on a document is decided.
Every route that touches a document goes through an AccessEvaluator built
for the current request; nothing is cached between calls since shares can
change from one request to the next.
"""
from typing import Optional
from ..models import Document, Permission
from ..repositories import ShareRepository
from ..exceptions import AuthenticationError, AuthorizationError


class AccessEvaluator:
    """Decides whether a user may view, edit or manage a document"""

    def __init__(self, share_repo: ShareRepository):
        self.share_repo = share_repo

    def permission_for(self, user_id: Optional[str], document: Document) -> Optional[Permission]:
        """The share permission the user holds on the document, if any"""
        if user_id is None:
            return None
        share = self.share_repo.get_by_document_and_user(document.id, user_id)
        return share.permission if share else None

    def is_author(self, user_id: Optional[str], document: Document) -> bool:
        return user_id is not None and document.author_id == user_id

    def can_view(self, user_id: Optional[str], document: Document) -> bool:
        if document.is_public:
            return True
        if user_id is None:
            return False
        if self.is_author(user_id, document):
            return True
        return self.permission_for(user_id, document) is not None

    def can_edit(self, user_id: Optional[str], document: Document) -> bool:
        # Public visibility never grants edit
        if user_id is None:
            return False
        if self.is_author(user_id, document):
            return True
        return self.permission_for(user_id, document) == Permission.EDIT

    def can_manage(self, user_id: Optional[str], document: Document) -> bool:
        """Sharing and deletion are reserved to the author"""
        return self.is_author(user_id, document)

    def require_view(self, user_id: Optional[str], document: Document) -> None:
        if not self.can_view(user_id, document):
            self._deny(user_id, "Access denied")

    def require_edit(self, user_id: Optional[str], document: Document) -> None:
        if not self.can_edit(user_id, document):
            self._deny(user_id, "Edit permission required")

    def require_manage(self, user_id: Optional[str], document: Document, action: str = "manage this document") -> None:
        if not self.can_manage(user_id, document):
            self._deny(user_id, f"Only the author can {action}")

    @staticmethod
    def _deny(user_id: Optional[str], detail: str) -> None:
        if user_id is None:
            raise AuthenticationError("Authentication required")
        raise AuthorizationError(detail)
