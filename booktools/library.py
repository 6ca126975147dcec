"""A small library of books."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Book:
    """A book with a title and a year of publication."""

    title: str
    year: int

    def __str__(self) -> str:
        return f"{self.title} ({self.year})"


@dataclass
class Library:
    """An ordered collection of books."""

    books: list[Book] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)

    def add_book(self, book: Book) -> None:
        """Add a book to the end of the library."""
        self.books.append(book)

    def print_books(self) -> None:
        """Print each book on its own line."""
        for book in self.books:
            print(book)

    def oldest_book(self) -> Book | None:
        """Return the earliest published book, or None if the library is empty."""
        return min(self.books, key=lambda book: book.year, default=None)


def main(argv=None) -> int:
    """Show a favourite book and the (empty) library's contents."""
    library = Library()
    favorite_book = Book("Lord of the Rings", 1954)
    print(f"Our favorite book {favorite_book} should go in the library")
    for book in library:
        print(book)
    return 0


if __name__ == "__main__":
    sys.exit(main())