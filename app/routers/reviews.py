from fastapi import APIRouter, Depends, Query

from app.dependencies import get_review_service, require_user
from app.services.review_service import ReviewService
from app.utils.response import success_response

router = APIRouter(prefix="/customer/auth/review", tags=["reviews"])


@router.put("/{isbn}")
async def put_review(
    isbn: str,
    review: str | None = Query(default=None),
    username: str = Depends(require_user),
    reviews: ReviewService = Depends(get_review_service),
):
    created = await reviews.upsert_review(isbn, username, review)
    action = "added" if created else "updated"
    return success_response(
        data={"isbn": isbn, "username": username, "review": review},
        message=f"Review for ISBN {isbn} by {username} {action} successfully.",
    )


@router.delete("/{isbn}")
async def delete_review(
    isbn: str,
    username: str = Depends(require_user),
    reviews: ReviewService = Depends(get_review_service),
):
    await reviews.delete_review(isbn, username)
    return success_response(message=f"Review for ISBN {isbn} by {username} deleted successfully.")
