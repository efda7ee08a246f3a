"""Main FastAPI application for AutoRecyclingNews."""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware

from recycling_news import config
from recycling_news.database import Store
from recycling_news.seed import seed_admin_user, seed_sample_content
from recycling_news.routers import articles, categories, comments, media, users

logger = logging.getLogger(__name__)


def configure_logging():
    """Log to stderr and, when LOG_FILE is set, to that file."""
    handlers = [logging.StreamHandler()]
    if config.LOG_FILE:
        handlers.append(logging.FileHandler(config.LOG_FILE))

    logging.basicConfig(
        level=config.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Open the store, create tables and seed on startup; close it on shutdown.
    """
    logger.info(f"Starting {config.NAME_APP}")
    store: Store = app.state.store
    store.init_db()

    db = store.session()
    try:
        seed_admin_user(db)
        seed_sample_content(db)
    finally:
        db.close()
    logger.info("Seed data check completed")

    yield

    logger.info(f"Stopping {config.NAME_APP}")
    store.close()


def create_app(database_url: Optional[str] = None, uploads_dir: Optional[str] = None) -> FastAPI:
    """
    Build the application around its own Store and uploads directory.

    Args:
        database_url: SQLAlchemy URL; defaults to PATH_DATABASE/NAME_DB
        uploads_dir: Upload directory; defaults to PATH_UPLOADS

    Returns:
        FastAPI: Configured application
    """
    app = FastAPI(
        title=config.NAME_APP,
        description="API for auto recycling industry news articles, media and comments",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Configure CORS (adjust origins as needed)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.store = Store(database_url or config.default_database_url())

    uploads_path = Path(uploads_dir or config.PATH_UPLOADS)
    uploads_path.mkdir(parents=True, exist_ok=True)
    app.state.uploads_dir = uploads_path
    logger.info(f"Uploads directory: {uploads_path}")

    app.include_router(categories.router)
    app.include_router(articles.router)
    app.include_router(comments.router)
    app.include_router(media.router)
    app.include_router(users.router)

    # Uploaded files are served under the same path stored in Media.url
    app.mount("/uploads", StaticFiles(directory=str(uploads_path)), name="uploads")

    @app.get("/")
    def root():
        """Root endpoint."""
        return {
            "name": config.NAME_APP,
            "version": "1.0.0",
            "status": "running"
        }

    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app


if __name__ == "__main__":
    import uvicorn

    configure_logging()
    uvicorn.run(create_app(), host=config.HOST, port=config.PORT)
