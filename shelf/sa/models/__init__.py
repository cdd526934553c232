# shelf/sa/models/__init__.py
from .base import Base, TimestampMixin
from .author import Author
from .book import Book, BookAuthor
from .user import User, BookUser

__all__ = [
    'Base',
    'TimestampMixin',
    'Book',
    'BookAuthor',
    'Author',
    'User',
    'BookUser'
]
