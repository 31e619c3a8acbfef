from datetime import datetime

import pytest

from locallibrary import create_app
from locallibrary.config import TestConfig
from locallibrary.extensions import db
from locallibrary.models.book import Book
from locallibrary.models.bookinstance import BookInstance


@pytest.fixture
def app(tmp_path):
    # one sqlite file per test
    db_file = tmp_path / "catalog_test.db"
    app = create_app(TestConfig, SQLALCHEMY_DATABASE_URI=f"sqlite:///{db_file}")
    with app.app_context():
        db.create_all()
    yield app
    with app.app_context():
        db.drop_all()
        db.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def catalog(app):
    """Two books and one loaned copy of the first; returns their ids."""
    with app.app_context():
        wind = Book(title="The Name of the Wind", author="Patrick Rothfuss")
        wave = Book(title="Death Wave", author="Ben Bova")
        db.session.add_all([wind, wave])
        db.session.flush()

        copy = BookInstance(
            book_id=wind.id,
            imprint="Gollancz, 2011.",
            status="Loaned",
            due_back=datetime(2024, 6, 2),
        )
        db.session.add(copy)
        db.session.flush()

        ids = {"book": wind.id, "other_book": wave.id, "instance": copy.id}
        db.session.commit()
    return ids
