# shelf/sa/repositories/__init__.py
from .base import BaseRepository
from .book import BookRepository
from .author import AuthorRepository
from .user import UserRepository

__all__ = ['BaseRepository', 'BookRepository', 'AuthorRepository', 'UserRepository']
