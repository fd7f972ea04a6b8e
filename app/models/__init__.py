from app.models.book import Book
from app.models.session import SessionData
from app.models.user import User

__all__ = ["Book", "SessionData", "User"]
