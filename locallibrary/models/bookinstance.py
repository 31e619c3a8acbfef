from datetime import datetime
from locallibrary.extensions import db
from locallibrary.models.book import new_id

STATUS_AVAILABLE = "Available"
STATUS_MAINTENANCE = "Maintenance"
STATUS_LOANED = "Loaned"
STATUS_RESERVED = "Reserved"

STATUS_CHOICES = (STATUS_AVAILABLE, STATUS_MAINTENANCE, STATUS_LOANED, STATUS_RESERVED)
DEFAULT_STATUS = STATUS_MAINTENANCE


class BookInstance(db.Model):
    """A physical copy of a book that the library can lend out."""

    __tablename__ = "book_instances"

    id = db.Column(db.String(32), primary_key=True, default=new_id)

    book_id = db.Column(db.String(32), db.ForeignKey("books.id"), nullable=False, index=True)
    imprint = db.Column(db.String(500), nullable=False)

    # validate_strings: anything outside STATUS_CHOICES is rejected at flush time
    status = db.Column(
        db.Enum(
            *STATUS_CHOICES,
            name="bookinstance_status",
            native_enum=False,
            create_constraint=True,
            validate_strings=True,
        ),
        nullable=False,
        default=DEFAULT_STATUS,
    )
    due_back = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)

    book = db.relationship("Book", backref=db.backref("instances", lazy="select"))
