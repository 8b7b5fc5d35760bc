"""CRUD endpoints for blog posts.

- GET /posts — list all posts
- POST /posts — create a post
- GET /posts/{post_id} — fetch one post (404 fail when missing)
- DELETE /posts/{post_id} — delete one post (404 fail when missing)
"""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from examples.posts_api.error_handler import PostNotFoundError
from examples.posts_api.models import CreatePost, Post
from examples.posts_api.responses import jsend_response
from jsend import success

logger = logging.getLogger(__name__)


def create_posts_router(*, store: dict[uuid.UUID, Post]) -> APIRouter:
    """Factory that creates the posts router over an in-memory store."""

    posts_router = APIRouter(prefix="/posts", tags=["posts"])

    @posts_router.get("")
    async def list_posts() -> JSONResponse:
        posts = [post.model_dump(mode="json") for post in store.values()]
        return jsend_response(success({"posts": posts}))

    @posts_router.post("")
    async def create_post(payload: CreatePost) -> JSONResponse:
        post = Post(id=uuid.uuid4(), title=payload.title, body=payload.body)
        store[post.id] = post
        logger.info("Created post %s", post.id, extra={"jsend_status": "success"})
        return jsend_response(success({"id": str(post.id)}), 201)

    @posts_router.get("/{post_id}")
    async def get_post(post_id: uuid.UUID) -> JSONResponse:
        post = store.get(post_id)
        if post is None:
            raise PostNotFoundError(id="not found")
        return jsend_response(success({"post": post.model_dump(mode="json")}))

    @posts_router.delete("/{post_id}")
    async def delete_post(post_id: uuid.UUID) -> JSONResponse:
        if store.pop(post_id, None) is None:
            raise PostNotFoundError(id="not found")
        return jsend_response(success(None))

    return posts_router
