"""Request and resource models for the example posts API."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field


class Post(BaseModel):
    """A stored blog post."""

    id: uuid.UUID
    title: str
    body: str


class CreatePost(BaseModel):
    """Request model for creating a post."""

    title: str = Field(..., min_length=1)
    body: str
