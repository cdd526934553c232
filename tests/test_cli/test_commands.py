import pytest
from unittest.mock import Mock
from click.testing import CliRunner
from shelf_cli.main import cli
from shelf_cli.utils import AppContext
from shelf.metadata.google_books import GoogleBooksClient, MetadataLookupError
from shelf.sa.models import Book, Author, BookUser

@pytest.fixture
def runner():
    return CliRunner()

@pytest.fixture
def catalog():
    return Mock(spec=GoogleBooksClient)

@pytest.fixture
def app(database, catalog):
    return AppContext(database=database, catalog=catalog)

def invoke(runner, app, *args):
    return runner.invoke(cli, list(args), obj=app)

def test_user_create(runner, app, db_session):
    result = invoke(runner, app, "user", "create", "alice")
    assert result.exit_code == 0
    assert "Created user" in result.output

def test_user_create_duplicate(runner, app, sample_user):
    result = invoke(runner, app, "user", "create", "Test User")
    assert result.exit_code == 1
    assert "already exists" in result.output

def test_book_add_and_list(runner, app, catalog, sample_user, dune):
    catalog.search_by_title_and_author.return_value = [dune]

    result = invoke(runner, app, "book", "add", "Dune", "--user", str(sample_user.id), "--author", "Herbert")
    assert result.exit_code == 0
    assert "Dune" in result.output

    listed = invoke(runner, app, "book", "list")
    assert listed.exit_code == 0
    assert "Dune" in listed.output

    owned = invoke(runner, app, "user", "books", str(sample_user.id))
    assert "Dune" in owned.output

def test_book_add_without_match(runner, app, catalog, sample_user):
    catalog.search_by_title.return_value = []
    result = invoke(runner, app, "book", "add", "Nothing", "--user", str(sample_user.id))
    assert result.exit_code == 1
    assert "No catalog match" in result.output

def test_book_add_for_unknown_user(runner, app, catalog, dune, db_session):
    catalog.search_by_title.return_value = [dune]
    result = invoke(runner, app, "book", "add", "Dune", "--user", "404")
    assert result.exit_code == 1
    assert "User 404 does not exist" in result.output
    assert db_session.query(Book).count() == 0

def test_book_add_catalog_failure(runner, app, catalog, sample_user):
    catalog.search_by_title.side_effect = MetadataLookupError("Catalog lookup failed for 'Dune'")
    result = invoke(runner, app, "book", "add", "Dune", "--user", str(sample_user.id))
    assert result.exit_code == 1
    assert "Catalog lookup failed" in result.output

def test_book_search(runner, app, catalog, dune):
    catalog.search_by_title.return_value = [dune]
    result = invoke(runner, app, "book", "search", "Dune")
    assert result.exit_code == 0
    assert "Dune by Frank Herbert" in result.output
    assert "412 pages" in result.output

def test_book_show(runner, app, sample_book):
    result = invoke(runner, app, "book", "show", str(sample_book.id))
    assert result.exit_code == 0
    assert "Test Book" in result.output
    assert "Test Author" in result.output

def test_book_show_unknown(runner, app):
    result = invoke(runner, app, "book", "show", "404")
    assert result.exit_code == 1
    assert "Book 404 does not exist" in result.output

def test_book_list_by_author(runner, app, sample_book, db_session):
    author = db_session.query(Author).one()
    result = invoke(runner, app, "book", "list", "--author", str(author.id))
    assert "Test Book" in result.output

    result = invoke(runner, app, "book", "list", "--author", "999")
    assert "No books found" in result.output

def test_book_remove(runner, app, sample_book, db_session):
    result = invoke(runner, app, "book", "remove", str(sample_book.id))
    assert result.exit_code == 0
    db_session.expire_all()
    assert db_session.query(Book).count() == 0
    assert db_session.query(Author).count() == 0

def test_user_remove_book(runner, app, catalog, sample_user, dune, db_session):
    catalog.search_by_title.return_value = [dune]
    invoke(runner, app, "book", "add", "Dune", "--user", str(sample_user.id))
    book_id = db_session.query(Book).one().id

    result = invoke(runner, app, "user", "remove-book", str(sample_user.id), str(book_id))
    assert result.exit_code == 0
    db_session.expire_all()
    assert db_session.query(BookUser).count() == 0
    assert db_session.query(Book).count() == 1

def test_user_books_unknown_user(runner, app):
    result = invoke(runner, app, "user", "books", "404")
    assert result.exit_code == 1
    assert "User 404 does not exist" in result.output

def test_init_db(runner, app):
    result = invoke(runner, app, "init-db")
    assert result.exit_code == 0
    assert "Database initialized" in result.output
