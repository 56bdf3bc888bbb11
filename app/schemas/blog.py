from typing import Optional

from pydantic import BaseModel, Field


class Post(BaseModel):
    title: str = Field(min_length=1)
    date: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    excerpt: str = ""
    featuredImage: Optional[str] = None
    content: str  # Sanitized HTML, safe to inject as-is


class DraftOut(BaseModel):
    id: str
    filename: str
    title: str = ""
    slug: str = ""
    date: str
    excerpt: str = ""
    featuredImage: str = ""
    markdown: str = ""
    submitting: bool = False
    error: Optional[str] = None


class DraftUpdate(BaseModel):
    title: Optional[str] = None
    date: Optional[str] = None
    excerpt: Optional[str] = None
    featuredImage: Optional[str] = None
    markdown: Optional[str] = None


class SubmitResponse(BaseModel):
    slug: str
