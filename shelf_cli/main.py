# shelf_cli/main.py
import logging
import click

from shelf.sa.database import Database
from shelf.metadata.google_books import GoogleBooksClient
from .utils import AppContext
from .commands.book import book
from .commands.user import user

@click.group()
@click.option('--db', 'db_url', default=None, envvar='DATABASE_URL', help='Database URL (default: sqlite:///books.db)')
@click.option('--verbose/--no-verbose', default=False, help='Log store and catalog activity')
@click.pass_context
def cli(ctx: click.Context, db_url: str, verbose: bool):
    """Personal book library"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s'
    )
    if ctx.obj is None:
        ctx.obj = AppContext(database=Database(db_url), catalog=GoogleBooksClient())

@cli.command('init-db')
@click.pass_obj
def init_db(app: AppContext):
    """Create the library tables"""
    app.database.init_db()
    click.echo(click.style("Database initialized", fg='green'))

cli.add_command(book)
cli.add_command(user)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
