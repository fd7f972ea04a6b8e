from fastapi import APIRouter, Depends, Request, Response

from app.dependencies import get_auth_service, get_registry, get_session_id
from app.schemas.auth import Credentials, LoginResponse
from app.services.auth_service import AuthService
from app.services.registry import UserRegistry
from app.utils.response import success_response

router = APIRouter(tags=["auth"])


@router.post("/register")
async def register(payload: Credentials, registry: UserRegistry = Depends(get_registry)):
    await registry.register(payload.username, payload.password)
    return success_response(message="User successfully registered. You can now login.")


@router.post("/customer/login")
async def login(
    payload: Credentials,
    request: Request,
    response: Response,
    auth: AuthService = Depends(get_auth_service),
):
    settings = request.app.state.settings
    session_id, token = await auth.login(payload.username, payload.password, get_session_id(request))

    response.set_cookie(
        settings.session_cookie_name,
        session_id,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
    return success_response(
        data=LoginResponse(username=payload.username, token=token).model_dump(),
        message="User successfully logged in",
    )


@router.post("/customer/logout")
async def logout(request: Request, response: Response, auth: AuthService = Depends(get_auth_service)):
    await auth.logout(get_session_id(request))
    response.delete_cookie(request.app.state.settings.session_cookie_name, path="/")
    return success_response(message="User successfully logged out")
