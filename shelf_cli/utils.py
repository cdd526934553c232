# shelf_cli/utils.py
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Iterator, List

import click

from shelf.sa.database import Database
from shelf.metadata.google_books import GoogleBooksClient
from shelf.services.book_service import BookService
from shelf.utils.locks import KeyedLock
from shelf.models.book import BookView, VolumeInfo
from shelf.result import Result


@dataclass
class AppContext:
    """Collaborators shared by every command of one CLI invocation"""
    database: Database
    catalog: GoogleBooksClient
    locks: KeyedLock = field(default_factory=KeyedLock)


@contextmanager
def book_service(app: AppContext) -> Iterator[BookService]:
    """Yield a BookService bound to a fresh session"""
    with app.database.get_db() as session:
        yield BookService(session, app.catalog, locks=app.locks)


def fail(message: str) -> None:
    """Print an error and exit with status 1"""
    click.echo(click.style(f"Error: {message}", fg='red'), err=True)
    sys.exit(1)


def unwrap_or_fail(result: Result):
    if not result.ok:
        fail(str(result.error))
    return result.value


def print_books(books: List[BookView], empty_message: str = "No books found") -> None:
    if not books:
        click.echo(click.style(empty_message, fg='yellow'))
        return
    for book in books:
        click.echo(click.style(f"[{book.id}] ", fg='cyan') + book.title +
                   click.style(f" ({book.published_date or 'n.d.'})", fg='blue'))


def print_volume(index: int, volume: VolumeInfo) -> None:
    authors = ', '.join(volume.authors) or 'Unknown author'
    click.echo(click.style(f"{index}. ", fg='cyan') + volume.title +
               click.style(f" by {authors}", fg='blue'))
    details = []
    if volume.published_date:
        details.append(f"published {volume.published_date}")
    if volume.page_count:
        details.append(f"{volume.page_count} pages")
    if volume.average_rating is not None:
        details.append(f"rated {volume.average_rating}")
    if volume.language:
        details.append(volume.language)
    if details:
        click.echo("   " + ", ".join(details))
