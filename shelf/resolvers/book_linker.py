# shelf/resolvers/book_linker.py
import logging
from contextlib import contextmanager
from typing import Iterator, List, Optional

from sqlalchemy.orm import Session

from ..sa.models import Book, Author
from ..sa.repositories import BookRepository, AuthorRepository, UserRepository
from ..models.book import VolumeInfo
from ..utils.names import split_author_name
from ..utils.locks import KeyedLock
from ..errors import BookNotFound, UserNotFound
from ..result import Result

logger = logging.getLogger(__name__)


def title_key(title: str) -> str:
    return f"title:{title}"


def surname_key(surname: str) -> str:
    return f"surname:{surname}"


class BookLinker:
    """Keeps the Book, Author and User graph consistent.

    Books are deduplicated by title and authors by surname. Every public
    method runs as one transaction on the given session and holds the
    natural-key locks of the records it touches.
    """

    def __init__(self, session: Session, locks: Optional[KeyedLock] = None):
        """
        Initialize the book linker.

        Args:
            session: SQLAlchemy session, one per unit of work
            locks: Natural-key locks shared by every linker in the process
        """
        self.session = session
        self.locks = locks or KeyedLock()
        self.book_repository = BookRepository(session)
        self.author_repository = AuthorRepository(session)
        self.user_repository = UserRepository(session)

    @contextmanager
    def _transaction(self) -> Iterator[None]:
        try:
            yield
            self.session.commit()
        except Exception:
            logger.exception("Rolling back book graph update")
            self.session.rollback()
            raise

    def save_book_for_user(self, record: VolumeInfo, user_id: int) -> Result[Book]:
        """
        Store a catalog record (unless its title is already stored) and add
        the book to a user's collection.

        Args:
            record: Catalog match to store
            user_id: Owner of the book

        Returns:
            Result holding the stored Book, or UserNotFound
        """
        parsed_names = [split_author_name(raw) for raw in record.authors]
        keys = [title_key(record.title)] + [surname_key(surname) for _, surname in parsed_names]

        with self.locks.hold(*keys), self._transaction():
            user = self.user_repository.get_by_id(user_id)
            if user is None:
                return Result.failure(UserNotFound(user_id))

            book = self.book_repository.get_by_title(record.title)
            if book is None:
                book = self._create_book(record, parsed_names)
            else:
                logger.debug(f"Reusing book {book.id} for title '{record.title}'")

            if self.book_repository.link_user(book, user):
                logger.info(f"Added book {book.id} to user {user.id}")
            else:
                logger.debug(f"User {user.id} already owns book {book.id}")

        return Result.success(book)

    def _create_book(self, record: VolumeInfo, parsed_names: List[tuple]) -> Book:
        book = Book(
            title=record.title,
            published_date=record.published_date,
            page_count=record.page_count,
            average_rating=record.average_rating,
            language=record.language,
            description=record.description,
        )
        self.book_repository.save(book)
        logger.info(f"Created book {book.id} '{book.title}'")

        for name, surname in parsed_names:
            author = self.author_repository.get_by_surname(surname)
            if author is None:
                author = self.author_repository.save(Author(name=name, surname=surname))
                logger.info(f"Created author {author.id} '{name} {surname}'")
            else:
                logger.debug(f"Reusing author {author.id} for surname '{surname}'")
            self.book_repository.link_author(book, author)

        return book

    def remove_book(self, book_id: int) -> Result[None]:
        """
        Delete a book, detaching it from its owners and authors first.
        Authors left without books are deleted as well.

        Returns:
            Result with no value, or BookNotFound
        """
        book = self.book_repository.get_by_id(book_id)
        if book is None:
            return Result.failure(BookNotFound(book_id))

        # Lock keys only; the book is looked up again once the locks are held
        authors = self.book_repository.get_authors(book.id)
        keys = [title_key(book.title)] + [surname_key(author.surname) for author in authors]

        with self.locks.hold(*keys), self._transaction():
            book = self.book_repository.reload_by_id(book_id)
            if book is None:
                logger.debug(f"Book {book_id} was removed concurrently")
                return Result.failure(BookNotFound(book_id))

            for user in self.book_repository.get_users(book.id):
                self.book_repository.unlink_user(book.id, user.id)

            for author in self.book_repository.get_authors(book.id):
                self.book_repository.unlink_author(book.id, author.id)
                if self.author_repository.count_books(author.id) == 0:
                    self.author_repository.delete(author)
                    logger.info(f"Deleted author {author.id} '{author.surname}' with no remaining books")

            self.book_repository.delete(book)
            logger.info(f"Deleted book {book_id}")

        return Result.success()

    def remove_book_from_user(self, book_id: int, user_id: int) -> Result[None]:
        """
        Take a book out of a user's collection. The book itself is kept,
        even when no user owns it anymore.

        Returns:
            Result with no value, or BookNotFound / UserNotFound
        """
        book = self.book_repository.get_by_id(book_id)
        if book is None:
            return Result.failure(BookNotFound(book_id))
        user = self.user_repository.get_by_id(user_id)
        if user is None:
            return Result.failure(UserNotFound(user_id))

        with self.locks.hold(title_key(book.title)), self._transaction():
            book = self.book_repository.reload_by_id(book_id)
            if book is None:
                return Result.failure(BookNotFound(book_id))
            user = self.user_repository.reload_by_id(user_id)
            if user is None:
                return Result.failure(UserNotFound(user_id))

            if self.book_repository.unlink_user(book.id, user.id):
                logger.info(f"Removed book {book.id} from user {user.id}")

        return Result.success()
