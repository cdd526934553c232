# shelf/config.py
import os
from typing import Optional

DEFAULT_DATABASE_URL = "sqlite:///books.db"
DEFAULT_GOOGLE_BOOKS_URL = "https://www.googleapis.com/books/v1/volumes"
DEFAULT_GOOGLE_BOOKS_TIMEOUT = 10.0


def database_url() -> str:
    """Connection string for the book store, from DATABASE_URL"""
    return os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL)


def google_books_api_key() -> Optional[str]:
    return os.getenv("GOOGLE_BOOKS_API_KEY") or None


def google_books_base_url() -> str:
    return os.getenv("GOOGLE_BOOKS_BASE_URL", DEFAULT_GOOGLE_BOOKS_URL)


def google_books_timeout() -> float:
    """HTTP timeout in seconds for catalog lookups.

    Falls back to the default when GOOGLE_BOOKS_TIMEOUT is not a number.
    """
    raw = os.getenv("GOOGLE_BOOKS_TIMEOUT")
    if not raw:
        return DEFAULT_GOOGLE_BOOKS_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        return DEFAULT_GOOGLE_BOOKS_TIMEOUT
