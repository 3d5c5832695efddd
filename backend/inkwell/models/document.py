from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey, DateTime
from sqlalchemy.orm import relationship
from ..core.database import Base
from ..utils import generate_id, get_current_timestamp


class Document(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=generate_id)
    title = Column(String(200), nullable=False, default="Untitled Document")
    content = Column(Text, nullable=False, default="")
    is_public = Column(Boolean, nullable=False, default=False, index=True)
    author_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    version = Column(Integer, nullable=False, default=1)
    created_at = Column(DateTime, default=get_current_timestamp, nullable=False)
    updated_at = Column(DateTime, default=get_current_timestamp, nullable=False, index=True)

    author = relationship("User", back_populates="documents")
    shares = relationship("DocumentShare", back_populates="document", cascade="all, delete-orphan")
    versions = relationship(
        "DocumentVersion",
        back_populates="document",
        cascade="all, delete-orphan",
        order_by="DocumentVersion.version_number.desc()",
    )
