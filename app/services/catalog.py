"""Read-only book catalog keyed by ISBN."""
from app.models.book import Book


class Catalog:
    def __init__(self, books: list[Book]):
        self._books: dict[str, Book] = {b.isbn: b for b in books}

    def exists(self, isbn: str) -> bool:
        return isbn in self._books

    def get(self, isbn: str) -> Book | None:
        return self._books.get(isbn)

    def all_books(self) -> dict[str, Book]:
        return dict(self._books)

    def by_author(self, author: str) -> dict[str, Book]:
        return {isbn: b for isbn, b in self._books.items() if b.author == author}

    def by_title(self, title: str) -> dict[str, Book]:
        return {isbn: b for isbn, b in self._books.items() if b.title == title}
