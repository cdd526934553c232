# shelf/sa/repositories/author.py
from typing import Optional, List
from sqlalchemy import select, func, exists
from ..models import Author, BookAuthor
from .base import BaseRepository

class AuthorRepository(BaseRepository[Author]):
    model = Author

    def get_by_surname(self, surname: str) -> Optional[Author]:
        """Get an author by surname"""
        return self.get_by_field('surname', surname)

    def exists_by_surname(self, surname: str) -> bool:
        return self.exists_by_field('surname', surname)

    def count_books(self, author_id: int) -> int:
        """Number of books still linked to an author"""
        return self.session.scalar(
            select(func.count()).select_from(BookAuthor).where(BookAuthor.author_id == author_id)
        ) or 0

    def get_orphans(self) -> List[Author]:
        """Authors without any linked book"""
        linked = exists().where(BookAuthor.author_id == Author.id)
        return list(self.session.scalars(
            select(Author).where(~linked).order_by(Author.id)
        ))
