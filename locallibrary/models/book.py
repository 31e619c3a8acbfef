import uuid
from locallibrary.extensions import db


def new_id() -> str:
    return uuid.uuid4().hex


class Book(db.Model):
    __tablename__ = "books"

    id = db.Column(db.String(32), primary_key=True, default=new_id)
    title = db.Column(db.String(200), nullable=False, index=True)
    author = db.Column(db.String(200), nullable=False, default="")
    summary = db.Column(db.Text, nullable=True)
    isbn = db.Column(db.String(32), unique=True, nullable=True, index=True)
