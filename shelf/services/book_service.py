# shelf/services/book_service.py

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from shelf.models.book import AuthorView, BookView, VolumeInfo
from shelf.metadata.google_books import GoogleBooksClient
from shelf.resolvers.book_linker import BookLinker
from shelf.sa.models import Book
from shelf.sa.repositories import BookRepository, UserRepository
from shelf.utils.locks import KeyedLock
from shelf.errors import BookNotFound, UserNotFound, NoCatalogMatch
from shelf.result import Result

logger = logging.getLogger(__name__)


def to_view(book: Book) -> BookView:
    return BookView.model_validate(book)


class BookService:
    """Operations offered to the command line layer.

    Reads are projected to BookView and never touch the store beyond
    SELECTs. Writes are delegated to BookLinker.
    """

    def __init__(self, session: Session, catalog: GoogleBooksClient, locks: Optional[KeyedLock] = None):
        self.session = session
        self.catalog = catalog
        self.book_repository = BookRepository(session)
        self.user_repository = UserRepository(session)
        self.linker = BookLinker(session, locks=locks)

    def get_all_books(self) -> List[BookView]:
        return [to_view(book) for book in self.book_repository.get_all()]

    def find_books_by_author(self, author_id: int) -> List[BookView]:
        """Books written by an author; empty for an unknown author id"""
        return [to_view(book) for book in self.book_repository.get_books_by_author(author_id)]

    def find_book_by_id(self, book_id: int) -> Result[BookView]:
        book = self.book_repository.get_by_id(book_id)
        if book is None:
            return Result.failure(BookNotFound(book_id))
        return Result.success(to_view(book))

    def get_book_authors(self, book_id: int) -> Result[List[AuthorView]]:
        if self.book_repository.get_by_id(book_id) is None:
            return Result.failure(BookNotFound(book_id))
        authors = self.book_repository.get_authors(book_id)
        return Result.success([AuthorView.model_validate(author) for author in authors])

    def get_books_owned_by_user(self, user_id: int) -> Result[List[BookView]]:
        if self.user_repository.get_by_id(user_id) is None:
            return Result.failure(UserNotFound(user_id))
        books = self.book_repository.get_books_for_user(user_id)
        return Result.success([to_view(book) for book in books])

    def search_catalog(self, title: str, author_surname: Optional[str] = None) -> List[VolumeInfo]:
        """Look a title up in the catalog, optionally narrowed to an author surname.

        Raises:
            MetadataLookupError: If the catalog cannot be queried
        """
        if author_surname:
            return self.catalog.search_by_title_and_author(title, author_surname)
        return self.catalog.search_by_title(title)

    def save_book_for_user(self, record: VolumeInfo, user_id: int) -> Result[BookView]:
        result = self.linker.save_book_for_user(record, user_id)
        if not result.ok:
            return Result.failure(result.error)
        return Result.success(to_view(result.value))

    def add_book_for_user(self, title: str, user_id: int, author_surname: Optional[str] = None) -> Result[BookView]:
        """Search the catalog and save its first match for a user.

        Returns:
            Result holding the stored book, or NoCatalogMatch / UserNotFound
        """
        matches = self.search_catalog(title, author_surname)
        if not matches:
            query = f"{title} inauthor:{author_surname}" if author_surname else title
            logger.info(f"No catalog match for '{query}'")
            return Result.failure(NoCatalogMatch(query))
        return self.save_book_for_user(matches[0], user_id)

    def remove_book(self, book_id: int) -> Result[None]:
        return self.linker.remove_book(book_id)

    def remove_book_from_user(self, book_id: int, user_id: int) -> Result[None]:
        return self.linker.remove_book_from_user(book_id, user_id)
