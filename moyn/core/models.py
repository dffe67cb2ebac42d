"""Data models shared by the parser, the API client and the commands."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

DEFAULT_API_URL = "https://moyn.dev"


class Visibility(str, Enum):
    PUBLIC = "public"
    PRIVATE = "private"
    UNLISTED = "unlisted"

    @classmethod
    def choices(cls) -> list[str]:
        return [v.value for v in cls]


class Session(BaseModel):
    """Stored credentials: API token plus the base URL they belong to."""

    api_token: str
    api_url: str = DEFAULT_API_URL


class Post(BaseModel):
    """A post built from a local markdown file, ready to be published."""

    title: str
    body: str
    published: bool = False
    tags: list[str] = Field(default_factory=list)
    slug: Optional[str] = None
    space: Optional[str] = None

    def to_payload(self) -> dict:
        """Request body for the create-post endpoints."""
        post: dict = {
            "title": self.title,
            "content": self.body,
            "published": self.published,
        }
        if self.slug is not None:
            post["slug"] = self.slug
        if self.tags:
            post["tags"] = list(self.tags)
        return {"post": post}


class PostSummary(BaseModel):
    """A post as the server returns it."""

    id: int
    title: str
    slug: str = ""
    url: str = ""
    published: Optional[bool] = None


class Space(BaseModel):
    """A space as the server returns it."""

    slug: str
    name: str
    visibility: str = Visibility.PRIVATE.value
    url: str = ""
    description: Optional[str] = None
    access_token: Optional[str] = None
    token_url: Optional[str] = None
