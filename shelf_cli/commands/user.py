# shelf_cli/commands/user.py
import click

from shelf.sa.repositories import UserRepository
from ..utils import AppContext, book_service, fail, unwrap_or_fail, print_books

@click.group()
def user():
    """User management commands"""
    pass

@user.command()
@click.argument('name')
@click.pass_obj
def create(app: AppContext, name: str):
    """Create a user"""
    try:
        with app.database.get_db() as session:
            created = UserRepository(session).create_user(name)
            user_id = created.id
    except ValueError as e:
        fail(str(e))
        return
    click.echo(click.style("Created user ", fg='green') + f"[{user_id}] {name}")

@user.command()
@click.argument('user_id', type=int)
@click.pass_obj
def books(app: AppContext, user_id: int):
    """List the books a user owns"""
    with book_service(app) as service:
        owned = unwrap_or_fail(service.get_books_owned_by_user(user_id))
    print_books(owned, empty_message=f"User {user_id} owns no books")

@user.command('remove-book')
@click.argument('user_id', type=int)
@click.argument('book_id', type=int)
@click.pass_obj
def remove_book(app: AppContext, user_id: int, book_id: int):
    """Take a book out of a user's collection"""
    with book_service(app) as service:
        unwrap_or_fail(service.remove_book_from_user(book_id, user_id))
    click.echo(click.style(f"Removed book {book_id} from user {user_id}", fg='green'))
