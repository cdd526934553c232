# shelf/sa/repositories/book.py
from typing import Optional, List
from sqlalchemy import select
from ..models import Book, Author, User, BookAuthor, BookUser
from .base import BaseRepository

class BookRepository(BaseRepository[Book]):
    model = Book

    def get_by_title(self, title: str) -> Optional[Book]:
        """Get a book by its exact title"""
        return self.get_by_field('title', title)

    def exists_by_title(self, title: str) -> bool:
        return self.exists_by_field('title', title)

    def get_authors(self, book_id: int) -> List[Author]:
        """Get all authors linked to a book"""
        return list(self.session.scalars(
            select(Author)
            .join(BookAuthor, BookAuthor.author_id == Author.id)
            .where(BookAuthor.book_id == book_id)
            .order_by(Author.id)
        ))

    def get_users(self, book_id: int) -> List[User]:
        """Get all users that own a book"""
        return list(self.session.scalars(
            select(User)
            .join(BookUser, BookUser.user_id == User.id)
            .where(BookUser.book_id == book_id)
            .order_by(User.id)
        ))

    def get_books_by_author(self, author_id: int) -> List[Book]:
        return list(self.session.scalars(
            select(Book)
            .join(BookAuthor, BookAuthor.book_id == Book.id)
            .where(BookAuthor.author_id == author_id)
            .order_by(Book.id)
        ))

    def get_books_for_user(self, user_id: int) -> List[Book]:
        return list(self.session.scalars(
            select(Book)
            .join(BookUser, BookUser.book_id == Book.id)
            .where(BookUser.user_id == user_id)
            .order_by(Book.id)
        ))

    def is_linked_to_author(self, book_id: int, author_id: int) -> bool:
        return self.session.get(BookAuthor, (book_id, author_id)) is not None

    def is_linked_to_user(self, book_id: int, user_id: int) -> bool:
        return self.session.get(BookUser, (book_id, user_id)) is not None

    def link_author(self, book: Book, author: Author) -> bool:
        """Link a book and an author. Returns False if they were already linked."""
        if self.is_linked_to_author(book.id, author.id):
            return False
        self.session.add(BookAuthor(book_id=book.id, author_id=author.id))
        self.session.flush()
        return True

    def unlink_author(self, book_id: int, author_id: int) -> bool:
        """Remove a book/author link. Returns False if there was none."""
        link = self.session.get(BookAuthor, (book_id, author_id))
        if link is None:
            return False
        self.session.delete(link)
        self.session.flush()
        return True

    def link_user(self, book: Book, user: User) -> bool:
        """Add a book to a user's collection. Returns False if already owned."""
        if self.is_linked_to_user(book.id, user.id):
            return False
        self.session.add(BookUser(book_id=book.id, user_id=user.id))
        self.session.flush()
        return True

    def unlink_user(self, book_id: int, user_id: int) -> bool:
        link = self.session.get(BookUser, (book_id, user_id))
        if link is None:
            return False
        self.session.delete(link)
        self.session.flush()
        return True
