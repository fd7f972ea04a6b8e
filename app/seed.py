from app.models.book import Book


SEED_BOOKS = [
    {"isbn": "1", "author": "Chinua Achebe", "title": "Things Fall Apart"},
    {"isbn": "2", "author": "Hans Christian Andersen", "title": "Fairy tales"},
    {"isbn": "3", "author": "Dante Alighieri", "title": "The Divine Comedy"},
    {"isbn": "4", "author": "Unknown", "title": "The Epic Of Gilgamesh"},
    {"isbn": "5", "author": "Unknown", "title": "The Book Of Job"},
    {"isbn": "6", "author": "Unknown", "title": "One Thousand and One Nights"},
    {"isbn": "7", "author": "Unknown", "title": "Njál's Saga"},
    {"isbn": "8", "author": "Jane Austen", "title": "Pride and Prejudice"},
    {"isbn": "9", "author": "Honoré de Balzac", "title": "Le Père Goriot"},
    {"isbn": "10", "author": "Samuel Beckett", "title": "Molloy, Malone Dies, The Unnamable, the trilogy"},
]


def seed_books() -> list[Book]:
    return [Book(**b) for b in SEED_BOOKS]
