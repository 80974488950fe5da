"""Posts API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PostsApiError → fixed JSON bodies
    - CORS configured from settings (not hardcoded)
    - Database initialized on startup and disposed on shutdown via lifespan
    - The schema is NOT created here: run `alembic upgrade head` from backend/
      before the first start, or every posts request fails with a 500
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse

from posts_api.api.error_handlers import register_error_handlers
from posts_api.api.routes import health, posts
from posts_api.config import get_settings
from posts_api.infrastructure.database import close_db, init_db
from posts_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)

WELCOME_HTML = """
<h2>Lord of the Rings Blog Post</h2>
<p>Welcome to the Lord of the Rings web log API</p>
"""


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    logger.info("Posts API started")
    yield
    await close_db()
    logger.info("Posts API shutting down")


app = FastAPI(title="Posts API", version="1.0.0", lifespan=lifespan)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)


@app.get("/", response_class=HTMLResponse)
async def root():
    return WELCOME_HTML


app.include_router(health.router)
app.include_router(posts.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
