from sqlalchemy import Column, Integer, String, Text, ForeignKey, DateTime, UniqueConstraint
from sqlalchemy.orm import relationship
from ..core.database import Base
from ..utils import generate_id, get_current_timestamp


class DocumentVersion(Base):
    """Immutable snapshot of a document's title and content"""

    __tablename__ = "document_versions"

    id = Column(String(36), primary_key=True, default=generate_id)
    document_id = Column(String(36), ForeignKey("documents.id", ondelete="CASCADE"), nullable=False, index=True)
    version_number = Column(Integer, nullable=False)
    title = Column(String(200), nullable=False)
    content = Column(Text, nullable=False)
    created_by = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=get_current_timestamp, nullable=False)
    change_summary = Column(String, nullable=True)

    document = relationship("Document", back_populates="versions")
    created_by_user = relationship("User")

    __table_args__ = (
        UniqueConstraint("document_id", "version_number", name="uq_document_version_number"),
    )
