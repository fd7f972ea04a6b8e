from fastapi import Request

from app.services.auth_service import AuthService
from app.services.catalog import Catalog
from app.services.registry import UserRegistry
from app.services.review_service import ReviewService


def get_catalog(request: Request) -> Catalog:
    return request.app.state.catalog


def get_registry(request: Request) -> UserRegistry:
    return request.app.state.registry


def get_auth_service(request: Request) -> AuthService:
    return request.app.state.auth_service


def get_review_service(request: Request) -> ReviewService:
    return request.app.state.review_service


def get_session_id(request: Request) -> str | None:
    return request.cookies.get(request.app.state.settings.session_cookie_name)


async def require_user(request: Request) -> str:
    """Auth gate for /customer/auth routes; returns the token's username."""
    auth = get_auth_service(request)
    username = await auth.authorize(get_session_id(request))
    request.state.username = username
    return username
