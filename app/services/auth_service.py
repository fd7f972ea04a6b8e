"""Login, logout and the token check guarding review mutations."""
import logging
import secrets

import jwt

from app.config import Settings
from app.models.session import SessionData
from app.services.registry import UserRegistry
from app.services.tokens import create_access_token, decode_access_token
from app.stores.base import SessionStore
from app.utils.exceptions import InvalidCredentials, InvalidToken, MissingCredentials, NotLoggedIn

logger = logging.getLogger(__name__)


def new_session_id() -> str:
    return secrets.token_urlsafe(32)


class AuthService:
    def __init__(self, registry: UserRegistry, sessions: SessionStore, settings: Settings):
        self.registry = registry
        self.sessions = sessions
        self.settings = settings

    async def login(
        self, username: str | None, password: str | None, previous_session_id: str | None = None
    ) -> tuple[str, str]:
        """Check credentials and bind a fresh token to a newly issued session id.

        Returns ``(session_id, token)``. The caller's previous session, if
        any, is dropped; its id is never reused. A rejected login leaves the
        session store untouched.
        """
        if not username or not password:
            raise MissingCredentials("Error logging in - Username and password required")

        if not await self.registry.authenticate(username, password):
            logger.info("Login rejected for %s", username)
            raise InvalidCredentials(status_code=self.settings.login_rejected_status)

        if previous_session_id:
            await self.sessions.delete(previous_session_id)

        session_id = new_session_id()
        token = create_access_token(username, self.settings)
        await self.sessions.put(session_id, SessionData(token=token, username=username))
        logger.info("User %s logged in", username)
        return session_id, token

    async def logout(self, session_id: str | None) -> None:
        if not session_id:
            return
        await self.sessions.delete(session_id)
        logger.info("Session closed")

    async def authorize(self, session_id: str | None) -> str:
        """Return the username embedded in the session's token.

        Only the token's own signature and expiry are checked; there is no
        revocation list. Sessions holding an expired token are dropped.
        """
        session = await self.sessions.get(session_id) if session_id else None
        if session is None or not session.token:
            logger.warning("Review mutation without a logged-in session")
            raise NotLoggedIn()

        try:
            payload = decode_access_token(session.token, self.settings)
        except jwt.ExpiredSignatureError:
            logger.warning("Rejected expired session token")
            await self.sessions.delete(session_id)
            raise InvalidToken()
        except jwt.PyJWTError as e:
            logger.warning("Rejected session token: %s", e)
            raise InvalidToken()

        return payload["sub"]
