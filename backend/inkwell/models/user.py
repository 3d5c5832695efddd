from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
from ..core.database import Base
from ..utils import generate_id, get_current_timestamp


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_id)
    email = Column(String, unique=True, index=True, nullable=False)
    hashed_password = Column(String, nullable=False)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=False)
    created_at = Column(DateTime, default=get_current_timestamp, nullable=False)
    last_login = Column(DateTime, nullable=True)

    documents = relationship("Document", back_populates="author", cascade="all, delete-orphan", passive_deletes=True)
    password_resets = relationship("PasswordReset", back_populates="user", cascade="all, delete-orphan", passive_deletes=True)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"
