# shelf/errors.py

class ShelfError(Exception):
    """Base class for failures reported to callers of the book services"""
    pass

class BookNotFound(ShelfError):
    def __init__(self, book_id: int):
        self.book_id = book_id
        super().__init__(f"Book {book_id} does not exist")

class UserNotFound(ShelfError):
    def __init__(self, user_id: int):
        self.user_id = user_id
        super().__init__(f"User {user_id} does not exist")

class NoCatalogMatch(ShelfError):
    """The metadata catalog returned no volume for a query"""

    def __init__(self, query: str):
        self.query = query
        super().__init__(f"No catalog match for '{query}'")
