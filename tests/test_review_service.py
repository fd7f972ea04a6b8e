import pytest

from app.models.book import Book
from app.services.catalog import Catalog
from app.services.review_service import ReviewService
from app.stores.memory import InMemoryReviewStore
from app.utils.exceptions import BookNotFound, EmptyReview, ReviewNotFound


def _service():
    catalog = Catalog([Book(isbn="0", author="Someone", title="Zero")])
    return ReviewService(catalog, InMemoryReviewStore())


@pytest.mark.asyncio
async def test_upsert_creates_then_updates():
    reviews = _service()

    assert await reviews.upsert_review("0", "alice", "Good") is True
    assert await reviews.upsert_review("0", "alice", "Better") is False
    assert await reviews.reviews_for("0") == {"alice": "Better"}


@pytest.mark.asyncio
async def test_upsert_rejects_empty_text():
    reviews = _service()

    with pytest.raises(EmptyReview):
        await reviews.upsert_review("0", "alice", "")
    assert await reviews.reviews_for("0") == {}


@pytest.mark.asyncio
async def test_upsert_unknown_book():
    reviews = _service()

    with pytest.raises(BookNotFound):
        await reviews.upsert_review("1", "alice", "Good")


@pytest.mark.asyncio
async def test_delete_missing_review():
    reviews = _service()

    with pytest.raises(ReviewNotFound):
        await reviews.delete_review("0", "alice")


@pytest.mark.asyncio
async def test_delete_only_removes_own_review():
    reviews = _service()
    await reviews.upsert_review("0", "alice", "Good")
    await reviews.upsert_review("0", "bob", "Meh")

    await reviews.delete_review("0", "alice")

    assert await reviews.reviews_for("0") == {"bob": "Meh"}
    with pytest.raises(ReviewNotFound):
        await reviews.delete_review("0", "alice")


@pytest.mark.asyncio
async def test_delete_unknown_book():
    reviews = _service()

    with pytest.raises(BookNotFound):
        await reviews.delete_review("1", "alice")


@pytest.mark.asyncio
async def test_stored_reviews_skips_catalog_check():
    reviews = _service()
    await reviews.upsert_review("0", "alice", "Good")

    assert await reviews.stored_reviews("0") == {"alice": "Good"}
    assert await reviews.stored_reviews("missing") == {}
