from sqlalchemy import Column, String, ForeignKey, DateTime, Enum, UniqueConstraint
from sqlalchemy.orm import relationship
import enum
from ..core.database import Base
from ..utils import generate_id, get_current_timestamp


class Permission(str, enum.Enum):
    VIEW = "view"
    EDIT = "edit"


class DocumentShare(Base):
    __tablename__ = "document_shares"

    id = Column(String(36), primary_key=True, default=generate_id)
    document_id = Column(String(36), ForeignKey("documents.id", ondelete="CASCADE"), nullable=False, index=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    permission = Column(
        Enum(Permission, values_callable=lambda enum_cls: [member.value for member in enum_cls], name="share_permission"),
        nullable=False,
    )
    shared_by = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime, default=get_current_timestamp, nullable=False)

    document = relationship("Document", back_populates="shares")
    user = relationship("User", foreign_keys=[user_id])
    shared_by_user = relationship("User", foreign_keys=[shared_by])

    __table_args__ = (
        UniqueConstraint("document_id", "user_id", name="uq_document_share_user"),
    )
