import threading
from collections.abc import Callable, Iterable
from datetime import datetime, timezone
from typing import List

from .models import Book


def seed_books() -> list[Book]:
    return [
        Book(
            id=1,
            title="The Begining After The End",
            author="James Vladimir",
            year=2018,
            completed=False,
            created_at=datetime(2025, 1, 15, tzinfo=timezone.utc),
        ),
        Book(
            id=2,
            title="Clean Code",
            author="Khine Akira",
            year=2008,
            completed=True,
            created_at=datetime(2024, 2, 20, tzinfo=timezone.utc),
        ),
        Book(
            id=3,
            title="Saga of Tanya the Evil",
            author="Saori Metsubayashi",
            year=2008,
            completed=True,
            created_at=datetime(2024, 2, 20, tzinfo=timezone.utc),
        ),
    ]


class BookRegistry:
    """Ordered in-memory collection of books.

    Books keep their insertion order. Every access goes through one re-entrant
    lock because FastAPI runs sync endpoints on a worker thread pool.
    """

    def __init__(self, books: Iterable[Book] = ()):
        self._books: List[Book] = list(books)
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._books)

    def list(self) -> List[Book]:
        with self._lock:
            return list(self._books)

    def find(self, book_id: int | None) -> Book | None:
        if book_id is None:
            return None
        with self._lock:
            return next((book for book in self._books if book.id == book_id), None)

    def filter(self, predicate: Callable[[Book], bool]) -> List[Book]:
        with self._lock:
            return [book for book in self._books if predicate(book)]

    def next_id(self) -> int:
        with self._lock:
            return max((book.id for book in self._books), default=0) + 1

    def add(self, book: Book) -> Book:
        with self._lock:
            if self.find(book.id) is not None:
                raise ValueError(f"duplicate book id {book.id}")
            self._books.append(book)
            return book

    def replace(self, book: Book) -> Book:
        with self._lock:
            for index, existing in enumerate(self._books):
                if existing.id == book.id:
                    self._books[index] = book
                    return book
        raise KeyError(book.id)

    def remove(self, book_id: int) -> bool:
        with self._lock:
            for index, existing in enumerate(self._books):
                if existing.id == book_id:
                    del self._books[index]
                    return True
        return False
