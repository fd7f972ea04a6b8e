from app.stores.base import ReviewStore, SessionStore, UserStore
from app.stores.memory import InMemoryReviewStore, InMemorySessionStore, InMemoryUserStore

__all__ = [
    "ReviewStore",
    "SessionStore",
    "UserStore",
    "InMemoryReviewStore",
    "InMemorySessionStore",
    "InMemoryUserStore",
]
