from typing import List, Optional
from sqlalchemy.orm import Session
from ..repositories import DocumentRepository
from ..schemas import SearchResult, UserSummary
from ..core.telemetry import get_tracer
import logging

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

MIN_QUERY_LENGTH = 2
MAX_RESULTS = 20
SNIPPET_CONTEXT = 50


def build_snippet(content: str, query: str) -> str:
    """Text around the first case-insensitive occurrence of query, or '' if absent"""
    index = content.lower().find(query.lower())
    if index == -1:
        return ""
    start = max(0, index - SNIPPET_CONTEXT)
    end = min(len(content), index + len(query) + SNIPPET_CONTEXT)
    return "..." + content[start:end] + "..."


class SearchService:
    """Substring search over the documents a user may view"""

    def __init__(self, db: Session):
        self.document_repo = DocumentRepository(db)
        self.db = db

    def search(self, user_id: str, query: Optional[str]) -> List[SearchResult]:
        """Search titles and contents; short queries return nothing without hitting the database"""
        if not query or len(query) < MIN_QUERY_LENGTH:
            return []

        logger.debug(f"Searching documents for user {user_id}: {query!r}")
        with tracer.start_as_current_span("search.documents") as span:
            span.set_attribute("search.user_id", user_id)
            span.set_attribute("search.query_length", len(query))
            documents = self.document_repo.search_visible(user_id, query, limit=MAX_RESULTS)
            span.set_attribute("search.result_count", len(documents))

        needle = query.lower()
        seen = set()
        results = []
        for document in documents:
            if document.id in seen:
                continue
            seen.add(document.id)
            content_match = needle in document.content.lower()
            results.append(SearchResult(
                id=document.id,
                title=document.title,
                content=document.content,
                is_public=document.is_public,
                created_at=document.created_at,
                updated_at=document.updated_at,
                author=UserSummary.model_validate(document.author) if document.author else None,
                title_match=needle in document.title.lower(),
                content_match=content_match,
                snippet=build_snippet(document.content, query) if content_match else ""
            ))

        logger.debug(f"Search returned {len(results)} documents")
        return results
