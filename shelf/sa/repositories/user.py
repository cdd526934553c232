# shelf/sa/repositories/user.py
from typing import Optional
from sqlalchemy.exc import IntegrityError
from ..models import User
from .base import BaseRepository

class UserRepository(BaseRepository[User]):
    """Repository for managing User entities."""

    model = User

    def create_user(self, name: str) -> User:
        """Create a new user.

        Args:
            name: The name of the user

        Returns:
            The created User object

        Raises:
            ValueError: If a user with the given name already exists
        """
        if self.exists_by_field('name', name):
            raise ValueError(f"User with name '{name}' already exists")

        user = User(name=name)
        self.session.add(user)
        try:
            self.session.flush()
        except IntegrityError:
            self.session.rollback()
            raise ValueError(f"User with name '{name}' already exists")
        return user

    def get_by_name(self, name: str) -> Optional[User]:
        return self.get_by_field('name', name)
