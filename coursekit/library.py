"""A book catalogue loaded from a comma-separated file, with search."""

from __future__ import annotations

import argparse
import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Optional

MAX_BOOKS = 1000
MAX_LINE_LEN = 1024

_C_WHITESPACE = " \t\n\v\f\r"
_ASCII_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_LEADING_INT = re.compile(r"[+-]?\d+")


def contains_ignore_case(haystack: str, needle: str) -> bool:
    """Tell whether ``needle`` occurs in ``haystack``, ignoring ASCII case."""
    return needle.translate(_ASCII_LOWER) in haystack.translate(_ASCII_LOWER)


@dataclass(frozen=True)
class Book:
    id: int
    title: str
    author: str


@dataclass
class Catalog:
    """An ordered collection of books."""

    books: list[Book] = field(default_factory=list)

    def _search(self, attribute: str, substr: str, max_results: Optional[int]) -> list[Book]:
        if max_results is not None and max_results <= 0:
            return []
        matches = [
            book for book in self.books
            if contains_ignore_case(getattr(book, attribute), substr)
        ]
        return matches if max_results is None else matches[:max_results]

    def search_by_title(self, substr: str, max_results: Optional[int] = None) -> list[Book]:
        """Return books whose title contains ``substr``, at most ``max_results``."""
        return self._search("title", substr, max_results)

    def search_by_author(self, substr: str, max_results: Optional[int] = None) -> list[Book]:
        """Return books whose author contains ``substr``, at most ``max_results``."""
        return self._search("author", substr, max_results)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)

    def __len__(self) -> int:
        return len(self.books)


def _trim(text: str) -> str:
    return text.strip(_C_WHITESPACE)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group()) if match else 0


def _parse_line(line: str) -> Optional[Book]:
    fields = [token for token in line.split(",") if token]
    if len(fields) < 3:
        return None
    book_id = _leading_int(_trim(fields[0]))
    if book_id <= 0:
        return None
    title, author = _trim(fields[1]), _trim(fields[2])
    if not title or not author:
        return None
    return Book(book_id, title, author)


def _read_chunks(handle) -> Iterator[str]:
    """Yield lines, splitting any longer than the line buffer into pieces."""
    limit = MAX_LINE_LEN - 1
    for raw in handle:
        while raw:
            yield raw[:limit]
            raw = raw[limit:]


def load_catalog(filename: str) -> Catalog:
    """Read ``id,title,author`` lines, skipping malformed ones."""
    catalog = Catalog()
    with open(filename, encoding="utf-8", errors="replace", newline="") as handle:
        for line in _read_chunks(handle):
            if len(catalog.books) >= MAX_BOOKS:
                break
            book = _parse_line(line)
            if book is not None:
                catalog.books.append(book)
    return catalog


def format_book(book: Book) -> str:
    """Render a book as three labelled lines."""
    return f"ID: {book.id}\nTitle: {book.title}\nAuthor: {book.author}\n"


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Search a book catalogue by title.")
    parser.add_argument("catalog", nargs="?", default="books.csv")
    parser.add_argument("query", nargs="?", default="harry")
    parser.add_argument("--max-results", type=int, default=10)
    args = parser.parse_args(argv)

    try:
        catalog = load_catalog(args.catalog)
    except OSError:
        catalog = Catalog()
    if not catalog.books:
        print("Failed to load catalog")
        return 1
    for book in catalog.search_by_title(args.query, args.max_results):
        print(format_book(book), end="")
    return 0