"""Derived display values for catalog records.

Plain functions over a stored record; nothing here is persisted.
"""


def bookinstance_url(instance) -> str:
    return f"/catalog/bookinstance/{instance.id}"


def book_url(book) -> str:
    return f"/catalog/book/{book.id}"


def due_back_formatted(instance) -> str:
    """Medium-length date for display, e.g. ``Jun 2, 2024``."""
    d = instance.due_back
    if d is None:
        return ""
    return f"{d:%b} {d.day}, {d.year}"


def due_back_formatted_update(instance) -> str:
    """ISO date used to pre-fill the ``due_back`` form input, e.g. ``2024-06-02``."""
    d = instance.due_back
    if d is None:
        return ""
    if hasattr(d, "date"):
        d = d.date()
    return d.isoformat()
