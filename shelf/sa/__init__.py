# shelf/sa/__init__.py
from .database import Database
from .models import (
    Base, Book, Author, User, BookAuthor, BookUser
)

__all__ = [
    'Database',
    'Base',
    'Book',
    'Author',
    'User',
    'BookAuthor',
    'BookUser'
]
