"""FastAPI application entry point for the example posts API.

Startup: configure JSON logging from settings.
Every route, including error paths, answers with a JSend envelope.
"""

from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI

from examples.posts_api.error_handler import register_error_handlers
from examples.posts_api.models import Post
from examples.posts_api.routers.envelopes import create_envelopes_router
from examples.posts_api.routers.posts import create_posts_router
from jsend import JSendCodec, JSendSettings
from jsend.logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(settings: JSendSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Seeds the store with a single post so ``GET /posts`` has something to
    return on a fresh start.
    """
    settings = settings or JSendSettings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        configure_logging(settings.log_level)
        logger.info("Starting posts API (strict decoding: %s)", settings.strict_decoding)
        yield
        logger.info("Posts API shut down")

    app = FastAPI(title="JSend Posts Example", version="1.0.0", lifespan=lifespan)

    codec = JSendCodec.from_settings(settings)

    seed = Post(id=uuid.uuid4(), title="Blog Post Title", body="Blog post body")
    store: dict[uuid.UUID, Post] = {seed.id: seed}

    register_error_handlers(app)
    app.include_router(create_posts_router(store=store))
    app.include_router(create_envelopes_router(codec=codec))

    app.state.settings = settings
    app.state.store = store
    return app
