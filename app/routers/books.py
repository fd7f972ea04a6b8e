from fastapi import APIRouter, Depends

from app.dependencies import get_catalog, get_review_service
from app.models.book import Book
from app.schemas.book import BookResponse
from app.services.catalog import Catalog
from app.services.review_service import ReviewService
from app.utils.exceptions import BookNotFound
from app.utils.response import success_response

router = APIRouter(tags=["books"])


async def _with_reviews(books: dict[str, Book], reviews: ReviewService) -> dict[str, dict]:
    data = {}
    for isbn, book in books.items():
        data[isbn] = BookResponse(
            author=book.author,
            title=book.title,
            reviews=await reviews.stored_reviews(isbn),
        ).model_dump()
    return data


@router.get("/")
@router.get("/books")
async def list_books(
    catalog: Catalog = Depends(get_catalog),
    reviews: ReviewService = Depends(get_review_service),
):
    return success_response(data=await _with_reviews(catalog.all_books(), reviews))


@router.get("/isbn/{isbn}")
@router.get("/async/isbn/{isbn}")
async def get_by_isbn(
    isbn: str,
    catalog: Catalog = Depends(get_catalog),
    reviews: ReviewService = Depends(get_review_service),
):
    book = catalog.get(isbn)
    if book is None:
        raise BookNotFound()
    data = await _with_reviews({isbn: book}, reviews)
    return success_response(data=data[isbn])


@router.get("/author/{author}")
@router.get("/async/author/{author}")
async def get_by_author(
    author: str,
    catalog: Catalog = Depends(get_catalog),
    reviews: ReviewService = Depends(get_review_service),
):
    books = catalog.by_author(author)
    if not books:
        raise BookNotFound("No books found by this author")
    return success_response(data=await _with_reviews(books, reviews))


@router.get("/title/{title}")
@router.get("/async/title/{title}")
async def get_by_title(
    title: str,
    catalog: Catalog = Depends(get_catalog),
    reviews: ReviewService = Depends(get_review_service),
):
    books = catalog.by_title(title)
    if not books:
        raise BookNotFound("No books found with this title")
    return success_response(data=await _with_reviews(books, reviews))


@router.get("/review/{isbn}")
async def get_reviews(isbn: str, reviews: ReviewService = Depends(get_review_service)):
    return success_response(data=await reviews.reviews_for(isbn))
