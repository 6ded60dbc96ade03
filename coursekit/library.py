"""A small collection of books."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field


@dataclass
class Book:
    """A book with its title and year of publication."""

    title: str
    year: int


@dataclass
class Library:
    """An ordered collection of books."""

    books: list[Book] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.books)

    def add_book(self, book: Book) -> None:
        """Add a book to the end of the collection."""
        self.books.append(book)

    def print_books(self) -> None:
        """Print each book's title and year."""
        for book in self.books:
            print(f"{book.title}, published in {book.year}")

    def oldest_book(self) -> Book | None:
        """Return the earliest published book, or None if there are none."""
        return min(self.books, key=lambda book: book.year, default=None)


def main(argv: list[str] | None = None) -> int:
    """Demonstrate the library."""
    library = Library()
    print(f"The library is empty: {str(not library).lower()}")

    library.add_book(Book("Lord of the Rings", 1954))
    library.add_book(Book("Alice's Adventures in Wonderland", 1865))

    print(f"The library is no longer empty: {str(not library).lower()}")
    library.print_books()

    oldest = library.oldest_book()
    if oldest is None:
        print("The library is empty!")
    else:
        print(f"The oldest book is {oldest.title}")

    print(f"The library has {len(library)} books")
    library.print_books()
    return 0


if __name__ == "__main__":
    sys.exit(main())