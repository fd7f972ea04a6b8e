from app.models.session import SessionData
from app.models.user import User
from app.stores.base import ReviewStore, SessionStore, UserStore


class InMemoryUserStore(UserStore):
    def __init__(self):
        self._users: dict[str, User] = {}

    async def get(self, username: str) -> User | None:
        return self._users.get(username)

    async def put(self, user: User) -> None:
        self._users[user.username] = user


class InMemoryReviewStore(ReviewStore):
    def __init__(self):
        # isbn -> username -> text
        self._reviews: dict[str, dict[str, str]] = {}

    async def get(self, isbn: str, username: str) -> str | None:
        return self._reviews.get(isbn, {}).get(username)

    async def put(self, isbn: str, username: str, text: str) -> None:
        self._reviews.setdefault(isbn, {})[username] = text

    async def delete(self, isbn: str, username: str) -> bool:
        book_reviews = self._reviews.get(isbn)
        if not book_reviews or username not in book_reviews:
            return False
        del book_reviews[username]
        return True

    async def for_book(self, isbn: str) -> dict[str, str]:
        return dict(self._reviews.get(isbn, {}))


class InMemorySessionStore(SessionStore):
    def __init__(self):
        self._sessions: dict[str, SessionData] = {}

    async def get(self, session_id: str) -> SessionData | None:
        return self._sessions.get(session_id)

    async def put(self, session_id: str, data: SessionData) -> None:
        self._sessions[session_id] = data

    async def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)
