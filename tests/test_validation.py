import pytest
from hypothesis import given, strategies as st

from book_tracker.errors import InvalidBookError
from book_tracker.models import CreateBook, UpdateBook
from book_tracker.registry import BookRegistry, seed_books
from book_tracker.service import BookService


@given(st.integers(min_value=1, max_value=1900))
def test_create_book_rejects_early_years(year):
    service = BookService(BookRegistry(seed_books()))
    with pytest.raises(InvalidBookError) as exc:
        service.create(CreateBook(title="t", author="a", year=year))
    assert exc.value.message == "Year must be greater than 1900"
    assert len(service.list()) == 3


@given(st.integers(min_value=1901, max_value=10_000))
def test_create_book_accepts_later_years(year):
    service = BookService(BookRegistry(seed_books()))
    book = service.create(CreateBook(title="t", author="a", year=year))
    assert book.year == year
    assert book.id == 4


@given(st.integers(max_value=1900))
def test_update_book_rejects_early_years(year):
    service = BookService(BookRegistry(seed_books()))
    with pytest.raises(InvalidBookError):
        service.update(1, UpdateBook(year=year))


@given(st.lists(st.sampled_from(["create", "delete"]), max_size=20))
def test_ids_stay_unique_and_follow_max(operations):
    service = BookService(BookRegistry(seed_books()))
    for operation in operations:
        books = service.list()
        if operation == "create":
            expected = max((b.id for b in books), default=0) + 1
            assert service.create(CreateBook(title="t", author="a", year=2000)).id == expected
        elif books:
            service.delete(books[0].id)
    ids = [b.id for b in service.list()]
    assert len(ids) == len(set(ids))


@given(st.text(min_size=1, max_size=10))
def test_search_matches_title_case_insensitively(term):
    service = BookService(BookRegistry(seed_books()))
    expected = [b.id for b in service.list() if term.lower() in b.title.lower()]
    assert [b.id for b in service.search(term.upper())] == [
        b.id for b in service.list() if term.upper().lower() in b.title.lower()
    ]
    assert [b.id for b in service.search(term)] == expected
