from dataclasses import dataclass
from datetime import timedelta

from flask import current_app

from locallibrary.models.bookinstance import BookInstance, STATUS_CHOICES
from locallibrary.utils.concurrency import fetch_concurrently
from locallibrary.utils.formatting import bookinstance_url
from locallibrary.utils.results import NotFound, Ok, Redirect, ValidationFailed, View
from locallibrary.utils.validators import (
    CREATE_MESSAGES,
    FieldError,
    UPDATE_MESSAGES,
    validate_bookinstance_form,
)

LIST_URL = "/catalog/bookinstances"
FORM_TEMPLATE = "bookinstance_form.html"

# Submitted dates come back one day early once parsed; every update shifts them forward by this.
DUE_BACK_OFFSET = timedelta(days=1)


@dataclass(frozen=True)
class BookOption:
    id: str
    title: str
    selected: bool = False


def book_options(books, selected_id=None):
    """Book select entries; at most the one whose id matches ``selected_id`` is selected."""
    selected = str(selected_id) if selected_id is not None else None
    return [
        BookOption(id=b.id, title=b.title, selected=(selected is not None and str(b.id) == selected))
        for b in books
    ]


class BookInstanceService:
    """
    Request handlers for book copies.
    Repositories are passed in; every handler returns Ok / NotFound / ValidationFailed.
    """

    def __init__(self, instances, books):
        self.instances = instances
        self.books = books

    # -----------------------------
    # Helpers
    # -----------------------------
    @staticmethod
    def _form_view(title, books, instance=None, selected_book=None, errors=None):
        return View(FORM_TEMPLATE, {
            "title": title,
            "book_list": book_options(books, selected_book),
            "selected_book": selected_book,
            "bookinstance": instance,
            "status_choices": STATUS_CHOICES,
            "errors": errors or [],
        })

    @staticmethod
    def _draft(values, instance_id=None):
        # transient object used only to re-render or to build the URL
        fields = {
            "book_id": values["book"],
            "imprint": values["imprint"],
        }
        if values["status"] is not None:
            fields["status"] = values["status"]
        if values["due_back"] is not None:
            fields["due_back"] = values["due_back"]
        if instance_id is not None:
            fields["id"] = instance_id
        return BookInstance(**fields)

    def _instance_and_books(self, instance_id):
        return fetch_concurrently(
            lambda: self.instances.find_by_id(instance_id, populate=True),
            lambda: self.books.find_all(),
        )

    # -----------------------------
    # Read
    # -----------------------------
    def list(self):
        all_instances = self.instances.find_all(populate=True)
        return Ok(View("bookinstance_list.html", {
            "title": "Book Instance List",
            "bookinstance_list": all_instances,
        }))

    def detail(self, instance_id):
        instance = self.instances.find_by_id(instance_id, populate=True)
        if instance is None:
            current_app.logger.warning(f"[bookinstance] detail: {instance_id} not found")
            return NotFound("Book copy not found")

        return Ok(View("bookinstance_detail.html", {
            "title": "Book:",
            "bookinstance": instance,
        }))

    # -----------------------------
    # Create
    # -----------------------------
    def create_form(self):
        books = self.books.find_all(fields=("title",))
        return Ok(self._form_view("Create BookInstance", books))

    def create(self, form):
        values, errors = validate_bookinstance_form(form, CREATE_MESSAGES)
        bookinstance = self._draft(values)

        if errors:
            current_app.logger.info(f"[bookinstance] create rejected: {len(errors)} error(s)")
            books = self.books.find_all(fields=("title",))
            return ValidationFailed(errors, self._form_view(
                "Create BookInstance",
                books,
                instance=bookinstance,
                selected_book=bookinstance.book_id,
                errors=errors,
            ))

        self.instances.save(bookinstance)
        current_app.logger.info(f"[bookinstance] created {bookinstance.id}")
        return Ok(Redirect(bookinstance_url(bookinstance)))

    # -----------------------------
    # Delete
    # -----------------------------
    def delete_form(self, instance_id):
        bookinstance = self.instances.find_by_id(instance_id, populate=True)
        if bookinstance is None:
            return Ok(Redirect(LIST_URL))

        return Ok(View("bookinstance_delete.html", {
            "title": "Delete book instance",
            "bookinstance": bookinstance,
        }))

    def delete(self, form):
        instance_id = form.get("bookinstanceid")
        removed = self.instances.delete(instance_id)
        current_app.logger.info(f"[bookinstance] delete {instance_id} removed={removed}")
        return Ok(Redirect(LIST_URL))

    # -----------------------------
    # Update
    # -----------------------------
    def update_form(self, instance_id):
        bookinstance, all_books = self._instance_and_books(instance_id)
        if bookinstance is None:
            current_app.logger.warning(f"[bookinstance] update form: {instance_id} not found")
            return NotFound("Book copy not found")

        return Ok(self._form_view(
            "Update book instance",
            all_books,
            instance=bookinstance,
            selected_book=bookinstance.book_id,
        ))

    def update(self, instance_id, form):
        values, errors = validate_bookinstance_form(form, UPDATE_MESSAGES)
        if values["due_back"] is not None:
            try:
                values["due_back"] = values["due_back"] + DUE_BACK_OFFSET
            except OverflowError:
                errors.append(FieldError("due_back", UPDATE_MESSAGES["due_back"], form.get("due_back") or ""))
                values["due_back"] = None

        bookinstance = self._draft(values, instance_id=instance_id)

        if errors:
            current_app.logger.info(f"[bookinstance] update {instance_id} rejected: {len(errors)} error(s)")
            # the form is re-rendered from the stored record, not from the rejected input
            stored, all_books = self._instance_and_books(instance_id)
            if stored is None:
                return NotFound("Book copy not found")
            return ValidationFailed(errors, self._form_view(
                "Update book instance",
                all_books,
                instance=stored,
                selected_book=stored.book_id,
                errors=errors,
            ))

        changes = {"book_id": bookinstance.book_id, "imprint": bookinstance.imprint}
        if values["status"] is not None:
            changes["status"] = values["status"]
        if values["due_back"] is not None:
            changes["due_back"] = values["due_back"]

        if not self.instances.update(instance_id, changes):
            current_app.logger.warning(f"[bookinstance] update: {instance_id} not found")
            return NotFound("Book copy not found")

        current_app.logger.info(f"[bookinstance] updated {instance_id}")
        return Ok(Redirect(bookinstance_url(bookinstance)))
