import logging
import re
from datetime import datetime, timezone
from typing import List

from opentelemetry import metrics

from .errors import (
    EMPTY_TEXT_FIELD,
    FIELDS_REQUIRED,
    TITLE_QUERY_REQUIRED,
    YEAR_TOO_EARLY,
    BookNotFoundError,
    InvalidBookError,
)
from .models import Book, CreateBook, UpdateBook
from .registry import BookRegistry

logger = logging.getLogger("book_tracker.service")
meter = metrics.get_meter("book_tracker.service")
mutation_counter = meter.create_counter(
    "book_tracker.books.mutations",
    description="Successful create, update and delete operations on the book registry",
)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")
MIN_YEAR = 1900


def parse_book_id(raw: str) -> int | None:
    """Parse a path segment the way ``parseInt`` does: leading digits win, no digits means no id."""
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


class BookService:
    def __init__(self, registry: BookRegistry):
        self.registry = registry

    def list(self) -> List[Book]:
        return self.registry.list()

    def get(self, book_id: int | None) -> Book:
        book = self.registry.find(book_id)
        if book is None:
            raise BookNotFoundError()
        return book

    def create(self, payload: CreateBook) -> Book:
        if not payload.title or not payload.author or not payload.year:
            raise InvalidBookError(FIELDS_REQUIRED)
        if payload.year <= MIN_YEAR:
            raise InvalidBookError(YEAR_TOO_EARLY)

        with self.registry.lock:
            book = Book(
                id=self.registry.next_id(),
                title=payload.title,
                author=payload.author,
                year=payload.year,
                completed=False,
                created_at=datetime.now(timezone.utc),
            )
            self.registry.add(book)
        logger.info("book.created", extra={"book_id": book.id})
        mutation_counter.add(1, {"operation": "create"})
        return book

    def update(self, book_id: int | None, payload: UpdateBook) -> Book:
        with self.registry.lock:
            record = self.get(book_id)
            changes = payload.model_dump(exclude_none=True)
            if "year" in changes and changes["year"] <= MIN_YEAR:
                raise InvalidBookError(YEAR_TOO_EARLY)
            if any(field in changes and not changes[field] for field in ("title", "author")):
                raise InvalidBookError(EMPTY_TEXT_FIELD)

            book = self.registry.replace(record.model_copy(update=changes))
        logger.info("book.updated", extra={"book_id": book.id, "fields": sorted(changes)})
        mutation_counter.add(1, {"operation": "update"})
        return book

    def delete(self, book_id: int | None) -> None:
        with self.registry.lock:
            record = self.get(book_id)
            self.registry.remove(record.id)
        logger.info("book.deleted", extra={"book_id": record.id})
        mutation_counter.add(1, {"operation": "delete"})

    def completed(self) -> List[Book]:
        return self.registry.filter(lambda book: book.completed is True)

    def search(self, title: str | None) -> List[Book]:
        if not title:
            raise InvalidBookError(TITLE_QUERY_REQUIRED)
        term = title.lower()
        return self.registry.filter(lambda book: term in book.title.lower())
