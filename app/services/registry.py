import asyncio
import logging

from app.models.user import User
from app.stores.base import UserStore
from app.utils.exceptions import AlreadyExists, MissingCredentials

logger = logging.getLogger(__name__)


class UserRegistry:
    """Registered customers, unique by exact username."""

    def __init__(self, store: UserStore):
        self._store = store
        self._lock = asyncio.Lock()

    async def register(self, username: str | None, password: str | None) -> User:
        if not username or not password:
            raise MissingCredentials(
                "Unable to register user. Username and password are required."
            )

        # Check and insert must not interleave with another registration.
        async with self._lock:
            if await self._store.get(username) is not None:
                logger.info("Registration rejected, username taken: %s", username)
                raise AlreadyExists()
            user = User(username=username, password=password)
            await self._store.put(user)

        logger.info("Registered user %s", username)
        return user

    async def authenticate(self, username: str, password: str) -> bool:
        user = await self._store.get(username)
        return user is not None and user.password == password
