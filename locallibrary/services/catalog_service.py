from flask import current_app

from locallibrary.models.bookinstance import STATUS_AVAILABLE
from locallibrary.utils.results import NotFound, Ok, View


class CatalogService:
    def __init__(self, instances, books):
        self.instances = instances
        self.books = books

    def index(self):
        return Ok(View("index.html", {
            "title": "Local Library Home",
            "book_count": self.books.count(),
            "book_instance_count": self.instances.count(),
            "book_instance_available_count": self.instances.count(status=STATUS_AVAILABLE),
        }))

    def book_list(self):
        return Ok(View("book_list.html", {
            "title": "Book List",
            "book_list": self.books.find_all(fields=("title", "author")),
        }))

    def book_detail(self, book_id):
        book = self.books.find_by_id(book_id)
        if book is None:
            current_app.logger.warning(f"[catalog] book {book_id} not found")
            return NotFound("Book not found")

        return Ok(View("book_detail.html", {
            "title": book.title,
            "book": book,
            "book_instances": self.instances.find_by_book(book_id),
        }))
