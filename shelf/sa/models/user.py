# shelf/sa/models/user.py
from sqlalchemy import Integer, String, ForeignKey, Index
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class BookUser(Base, TimestampMixin):
    """Ownership link between a user and a book."""
    __tablename__ = 'book_user'

    book_id: Mapped[int] = mapped_column(ForeignKey('book.id'), primary_key=True)
    user_id: Mapped[int] = mapped_column(ForeignKey('user.id'), primary_key=True)

    __table_args__ = (
        Index('idx_book_user_user_id', 'user_id'),
    )

class User(Base, TimestampMixin):
    __tablename__ = 'user'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Convenience relationship
    books = relationship('Book', secondary='book_user', viewonly=True, lazy='raise', order_by='Book.id')

    def __repr__(self) -> str:
        return f"User(id={self.id}, name='{self.name}')"
