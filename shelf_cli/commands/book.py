# shelf_cli/commands/book.py
import click
from typing import Optional

from shelf.metadata.google_books import MetadataLookupError
from ..utils import AppContext, book_service, fail, unwrap_or_fail, print_books, print_volume

@click.group()
def book():
    """Book related commands"""
    pass

@book.command('list')
@click.option('--author', 'author_id', default=None, type=int, help='Only books written by this author id')
@click.pass_obj
def list_books(app: AppContext, author_id: Optional[int]):
    """List stored books"""
    with book_service(app) as service:
        if author_id is not None:
            books = service.find_books_by_author(author_id)
        else:
            books = service.get_all_books()
        print_books(books)

@book.command()
@click.argument('book_id', type=int)
@click.pass_obj
def show(app: AppContext, book_id: int):
    """Show one stored book and its authors"""
    with book_service(app) as service:
        found = unwrap_or_fail(service.find_book_by_id(book_id))
        authors = unwrap_or_fail(service.get_book_authors(book_id))

    click.echo(click.style(found.title, fg='green', bold=True))
    click.echo(f"  ID: {found.id}")
    click.echo(f"  Author(s): {', '.join(f'{a.name} {a.surname}'.strip() for a in authors) or '-'}")
    click.echo(f"  Published: {found.published_date or '-'}")
    click.echo(f"  Pages: {found.page_count or '-'}")
    click.echo(f"  Rating: {found.average_rating if found.average_rating is not None else '-'}")
    click.echo(f"  Language: {found.language or '-'}")
    if found.description:
        click.echo(f"\n{found.description}")

@book.command()
@click.argument('title')
@click.option('--author', 'author_surname', default=None, help='Narrow the search to an author surname')
@click.pass_obj
def search(app: AppContext, title: str, author_surname: Optional[str]):
    """Search the catalog without storing anything

    Example:
        bookshelf book search Dune --author Herbert
    """
    try:
        with book_service(app) as service:
            volumes = service.search_catalog(title, author_surname)
    except MetadataLookupError as e:
        fail(str(e))
        return

    if not volumes:
        click.echo(click.style(f"No catalog match for '{title}'", fg='yellow'))
        return
    for i, volume in enumerate(volumes, 1):
        print_volume(i, volume)

@book.command()
@click.argument('title')
@click.option('--user', 'user_id', required=True, type=int, help='Owner of the book')
@click.option('--author', 'author_surname', default=None, help='Narrow the search to an author surname')
@click.pass_obj
def add(app: AppContext, title: str, user_id: int, author_surname: Optional[str]):
    """Look a book up in the catalog and add the first match to a user

    Example:
        bookshelf book add Dune --user 1 --author Herbert
    """
    try:
        with book_service(app) as service:
            stored = unwrap_or_fail(service.add_book_for_user(title, user_id, author_surname))
    except MetadataLookupError as e:
        fail(str(e))
        return

    click.echo(click.style("Added ", fg='green') + f"[{stored.id}] {stored.title}" +
               click.style(f" to user {user_id}", fg='green'))

@book.command()
@click.argument('book_id', type=int)
@click.pass_obj
def remove(app: AppContext, book_id: int):
    """Delete a book from the library and from every user"""
    with book_service(app) as service:
        unwrap_or_fail(service.remove_book(book_id))
    click.echo(click.style(f"Removed book {book_id}", fg='green'))
