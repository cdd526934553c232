# tests/conftest.py
import os
import sys
import pytest
from pathlib import Path
from sqlalchemy.sql import text

# Add project root to Python path
project_root = str(Path(__file__).parent.parent)
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from sqlalchemy.orm import Session
from shelf.sa.database import Database
from shelf.sa.models import Base, Book, Author, User, BookAuthor, BookUser
from shelf.models.book import VolumeInfo

@pytest.fixture(scope="session")
def test_db_path(tmp_path_factory):
    """Create a temporary directory for the test database."""
    test_dir = tmp_path_factory.mktemp("test_db")
    return str(test_dir / "test_books.db")

@pytest.fixture(scope="session")
def database(test_db_path):
    """Create a test database instance"""
    db = Database(f"sqlite:///{test_db_path}")

    # Drop all tables and recreate schema
    db.drop_db()
    db.init_db()

    yield db

    db.engine.dispose()
    try:
        os.remove(test_db_path)
    except OSError:
        pass

@pytest.fixture(scope="function")
def db_session(database):
    """Create a new database session for a test"""
    session: Session = database.get_session()
    try:
        yield session
    finally:
        session.close()

@pytest.fixture(autouse=True)
def cleanup_db(database):
    """Clean up database tables before each test"""
    with database.get_db() as session:
        # Association rows first, then the rows they point at
        session.execute(text("DELETE FROM book_user"))
        session.execute(text("DELETE FROM book_author"))
        session.execute(text("DELETE FROM book"))
        session.execute(text("DELETE FROM author"))
        session.execute(text('DELETE FROM "user"'))
    yield

@pytest.fixture
def sample_user(db_session):
    """Create a sample user for testing."""
    user = User(name="Test User")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def other_user(db_session):
    user = User(name="Other User")
    db_session.add(user)
    db_session.commit()
    return user

@pytest.fixture
def sample_book(db_session):
    """Create a sample book with one author for testing."""
    book = Book(
        title="Test Book",
        published_date="2020-01-01",
        page_count=200,
        average_rating=4.5,
        language="en",
        description="Test book description"
    )
    author = Author(name="Test", surname="Author")
    db_session.add_all([book, author])
    db_session.flush()
    db_session.add(BookAuthor(book_id=book.id, author_id=author.id))
    db_session.commit()
    return book

@pytest.fixture
def dune():
    """Catalog record for Dune"""
    return VolumeInfo(
        title="Dune",
        published_date="1965-08-01",
        page_count=412,
        average_rating=4.3,
        language="en",
        description="Set on the desert planet Arrakis...",
        authors=["Frank Herbert"]
    )

@pytest.fixture
def dune_messiah():
    return VolumeInfo(
        title="Dune Messiah",
        published_date="1969",
        page_count=256,
        average_rating=3.9,
        language="en",
        authors=["Frank Herbert"]
    )
