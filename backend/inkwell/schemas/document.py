from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime
from ..models.share import Permission
from .user import UserSummary


class DocumentBase(BaseModel):
    title: str = Field(min_length=1, max_length=200)
    content: str = ""
    is_public: bool = Field(default=False, alias="isPublic")

    class Config:
        populate_by_name = True


class DocumentCreate(DocumentBase):
    pass


class DocumentUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1, max_length=200)
    content: Optional[str] = None
    is_public: Optional[bool] = Field(default=None, alias="isPublic")

    class Config:
        populate_by_name = True


class Document(BaseModel):
    id: str
    title: str
    content: str
    is_public: bool
    author_id: str
    version: int
    created_at: datetime
    updated_at: datetime
    author: Optional[UserSummary] = None
    # The caller's share grant; absent for the author
    permission: Optional[Permission] = None

    class Config:
        from_attributes = True


def to_document_schema(document, permission: Optional[Permission] = None) -> Document:
    schema = Document.model_validate(document)
    schema.permission = permission
    return schema
