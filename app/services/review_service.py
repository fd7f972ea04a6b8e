import logging

from app.services.catalog import Catalog
from app.stores.base import ReviewStore
from app.utils.exceptions import BookNotFound, EmptyReview, ReviewNotFound

logger = logging.getLogger(__name__)


class ReviewService:
    """Per-book reviews, one per user, owned by the user that wrote them."""

    def __init__(self, catalog: Catalog, store: ReviewStore):
        self.catalog = catalog
        self.store = store

    async def reviews_for(self, isbn: str) -> dict[str, str]:
        if not self.catalog.exists(isbn):
            raise BookNotFound()
        return await self.store.for_book(isbn)

    async def stored_reviews(self, isbn: str) -> dict[str, str]:
        """Reviews for a book already known to be in the catalog."""
        return await self.store.for_book(isbn)

    async def upsert_review(self, isbn: str, username: str, text: str | None) -> bool:
        """Create or overwrite ``username``'s review; return True when created."""
        if not text:
            raise EmptyReview()
        if not self.catalog.exists(isbn):
            raise BookNotFound()

        created = await self.store.get(isbn, username) is None
        await self.store.put(isbn, username, text)
        logger.info("Review %s for isbn=%s by %s", "added" if created else "updated", isbn, username)
        return created

    async def delete_review(self, isbn: str, username: str) -> None:
        if not self.catalog.exists(isbn):
            raise BookNotFound()
        if not await self.store.delete(isbn, username):
            raise ReviewNotFound(isbn, username)
        logger.info("Review deleted for isbn=%s by %s", isbn, username)
