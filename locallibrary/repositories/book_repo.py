from sqlalchemy.orm import load_only

from locallibrary.models.book import Book
from locallibrary.extensions import db


class BookRepo:
    def find_all(self, fields=None):
        """All books ordered by title; ``fields`` limits the loaded columns (id is always loaded)."""
        query = Book.query
        if fields:
            query = query.options(load_only(*[getattr(Book, f) for f in fields]))
        return query.order_by(Book.title.asc()).all()

    def find_by_id(self, book_id: str):
        return db.session.get(Book, book_id)

    def count(self) -> int:
        return Book.query.count()
