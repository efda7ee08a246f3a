"""Pydantic schemas for request and response validation."""

from datetime import datetime, date
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator


def _not_blank(value: str, field: str) -> str:
    if not value or not value.strip():
        raise ValueError(f'{field} cannot be empty')
    return value


# Category Schemas
class CategoryCreate(BaseModel):
    """Schema for category creation request; the caller supplies the id."""

    id: str
    name: str
    slug: str


class CategoryOut(BaseModel):
    id: str
    name: str
    slug: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Article Schemas
class ArticleCreate(BaseModel):
    """Schema for article creation request; the caller supplies the id."""

    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: Optional[str] = None
    author: str
    category_id: Optional[str] = None
    published_date: date

    @field_validator('id', 'title', 'slug')
    @classmethod
    def required_not_blank(cls, v: str, info) -> str:
        """Validate that identifying fields are not empty."""
        return _not_blank(v, info.field_name.capitalize())


class ArticleUpdate(BaseModel):
    """
    Schema for article update request.

    Only the fields present in the request body are written.
    """

    title: Optional[str] = None
    slug: Optional[str] = None
    excerpt: Optional[str] = None
    content: Optional[str] = None
    image_url: Optional[str] = None
    author: Optional[str] = None
    category_id: Optional[str] = None
    published_date: Optional[date] = None


class ArticleOut(BaseModel):
    """Article with its category embedded (None when unset or unresolvable)."""

    id: str
    title: str
    slug: str
    excerpt: str
    content: str
    image_url: Optional[str] = None
    author: str
    category_id: Optional[str] = None
    published_date: date
    created_at: datetime
    updated_at: datetime
    category: Optional[CategoryOut] = None

    model_config = ConfigDict(from_attributes=True)


# Comment Schemas
class CommentCreate(BaseModel):
    username: str
    content: str
    user_id: Optional[str] = None

    @field_validator('username', 'content')
    @classmethod
    def required_not_blank(cls, v: str, info) -> str:
        return _not_blank(v, info.field_name.capitalize())


class CommentOut(BaseModel):
    id: str
    article_id: str
    user_id: Optional[str] = None
    username: str
    content: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# Media Schemas
class MediaUpdate(BaseModel):
    """Schema for media metadata update request."""

    original_name: Optional[str] = None
    alt_text: Optional[str] = None
    description: Optional[str] = None


class MediaOut(BaseModel):
    id: str
    filename: str
    original_name: str
    mimetype: str
    size: int
    url: str
    alt_text: Optional[str] = None
    description: Optional[str] = None
    uploaded_at: datetime

    model_config = ConfigDict(from_attributes=True)


# User Schemas
class UserRegister(BaseModel):
    """Schema for user registration request."""

    username: str
    email: str
    password: str

    @field_validator('username', 'email', 'password')
    @classmethod
    def required_not_blank(cls, v: str, info) -> str:
        """Validate that no credential field is empty."""
        return _not_blank(v, info.field_name.capitalize())


class UserLogin(BaseModel):
    """Schema for user login request."""

    username: str
    password: str


class UserOut(BaseModel):
    """Public view of a user; never carries the password."""

    id: str
    username: str
    email: str
    role: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class Message(BaseModel):
    message: str
