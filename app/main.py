import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, settings as default_settings
from app.routers.auth import router as auth_router
from app.routers.books import router as books_router
from app.routers.reviews import router as reviews_router
from app.seed import seed_books
from app.services.auth_service import AuthService
from app.services.catalog import Catalog
from app.services.registry import UserRegistry
from app.services.review_service import ReviewService
from app.stores import InMemoryReviewStore, InMemorySessionStore, InMemoryUserStore
from app.utils.exceptions import register_exception_handlers

VERSION = "0.1.0"


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or default_settings
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title="Bookstore Reviews API",
        description="Public book catalog lookups and per-user book reviews",
        version=VERSION,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    catalog = Catalog(seed_books())
    registry = UserRegistry(InMemoryUserStore())
    app.state.settings = settings
    app.state.catalog = catalog
    app.state.registry = registry
    app.state.auth_service = AuthService(registry, InMemorySessionStore(), settings)
    app.state.review_service = ReviewService(catalog, InMemoryReviewStore())

    @app.get("/health")
    async def health_check():
        return {"status": "success", "data": {"service": "bookstore-reviews-api", "version": VERSION}, "message": None}

    app.include_router(auth_router)
    app.include_router(reviews_router)
    app.include_router(books_router)

    return app


app = create_app()
