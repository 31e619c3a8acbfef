from datetime import datetime, timedelta

import click
from flask import current_app
from flask.cli import with_appcontext

from locallibrary.extensions import db
from locallibrary.models.book import Book
from locallibrary.models.bookinstance import BookInstance

DEMO_BOOKS = [
    ("The Name of the Wind (The Kingkiller Chronicle, #1)", "Patrick Rothfuss", "9781473211896"),
    ("The Wise Man's Fear (The Kingkiller Chronicle, #2)", "Patrick Rothfuss", "9788401352836"),
    ("The Slow Regard of Silent Things (Kingkiller Chronicle)", "Patrick Rothfuss", "9780756411336"),
    ("Apes and Angels", "Ben Bova", "9780765379528"),
    ("Death Wave", "Ben Bova", "9780765379504"),
]

# (book index, imprint, status)
DEMO_COPIES = [
    (0, "London Gollancz, 2014.", "Available"),
    (1, "Gollancz, 2011.", "Loaned"),
    (2, "Gollancz, 2015.", "Available"),
    (3, "New York Tom Doherty Associates, 2016.", "Available"),
    (3, "New York Tom Doherty Associates, 2016.", "Maintenance"),
    (4, "New York, NY Tom Doherty Associates, LLC, 2015.", "Loaned"),
]


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create all catalog tables."""
    db.create_all()
    current_app.logger.info("[cli] tables created")
    click.echo("Initialized the database.")


@click.command("seed-demo")
@with_appcontext
def seed_demo_command():
    """Insert a small demo catalog (books + copies)."""
    db.create_all()
    if Book.query.count():
        click.echo("Catalog already has books; nothing to do.")
        return

    books = [Book(title=t, author=a, isbn=i) for t, a, i in DEMO_BOOKS]
    db.session.add_all(books)
    db.session.flush()

    due = datetime.utcnow() + timedelta(days=14)
    for idx, imprint, status in DEMO_COPIES:
        db.session.add(BookInstance(book_id=books[idx].id, imprint=imprint, status=status, due_back=due))

    db.session.commit()
    current_app.logger.info(f"[cli] seeded {len(books)} books, {len(DEMO_COPIES)} copies")
    click.echo(f"Seeded {len(books)} books and {len(DEMO_COPIES)} copies.")
