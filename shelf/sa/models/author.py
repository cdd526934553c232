# shelf/sa/models/author.py
from sqlalchemy import Integer, String
from sqlalchemy.orm import relationship, Mapped, mapped_column
from .base import Base, TimestampMixin

class Author(Base, TimestampMixin):
    __tablename__ = 'author'

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, default='')
    # Natural key; single-token names leave it empty
    surname: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    # Convenience relationship
    books = relationship('Book', secondary='book_author', viewonly=True, lazy='raise', order_by='Book.id')

    def __repr__(self) -> str:
        return f"Author(id={self.id}, name='{self.name}', surname='{self.surname}')"
