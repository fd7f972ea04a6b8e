"""Storage interfaces for users, reviews and sessions.

Services depend only on these abstract classes; the in-memory
implementations in ``app.stores.memory`` back the running app and tests.
"""
from abc import ABC, abstractmethod

from app.models.session import SessionData
from app.models.user import User


class UserStore(ABC):
    @abstractmethod
    async def get(self, username: str) -> User | None: ...

    @abstractmethod
    async def put(self, user: User) -> None: ...


class ReviewStore(ABC):
    @abstractmethod
    async def get(self, isbn: str, username: str) -> str | None: ...

    @abstractmethod
    async def put(self, isbn: str, username: str, text: str) -> None: ...

    @abstractmethod
    async def delete(self, isbn: str, username: str) -> bool:
        """Remove a review; return False when there was nothing to remove."""

    @abstractmethod
    async def for_book(self, isbn: str) -> dict[str, str]:
        """Return the username -> text mapping for one book."""


class SessionStore(ABC):
    @abstractmethod
    async def get(self, session_id: str) -> SessionData | None: ...

    @abstractmethod
    async def put(self, session_id: str, data: SessionData) -> None: ...

    @abstractmethod
    async def delete(self, session_id: str) -> None: ...
