# shelf/sa/models/book.py
from sqlalchemy import String, Integer, Float, Text, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class BookAuthor(Base, TimestampMixin):
    """One row links a book and an author in both directions."""
    __tablename__ = 'book_author'

    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)
    author_id: Mapped[int] = mapped_column(ForeignKey('author.id'), primary_key=True)

    __table_args__ = (
        Index('idx_book_author_author_id', 'author_id'),
    )

class Book(Base, TimestampMixin):
    __tablename__ = 'book'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    title: Mapped[str] = mapped_column(String(500), nullable=False, unique=True)
    published_date: Mapped[str | None] = mapped_column(String(32), nullable=True)
    page_count: Mapped[int | None] = mapped_column(Integer, nullable=True)
    average_rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    language: Mapped[str | None] = mapped_column(String(16), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Convenience relationships, loaded only through repository calls
    authors = relationship('Author', secondary='book_author', viewonly=True, lazy='raise', order_by='Author.id')
    users = relationship('User', secondary='book_user', viewonly=True, lazy='raise', order_by='User.id')

    def __repr__(self) -> str:
        return f"Book(id={self.id}, title='{self.title}')"
