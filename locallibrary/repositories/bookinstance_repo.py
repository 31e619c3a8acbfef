from sqlalchemy.orm import joinedload

from locallibrary.models.bookinstance import BookInstance
from locallibrary.extensions import db


class BookInstanceRepo:
    @staticmethod
    def _query(populate: bool):
        query = BookInstance.query
        if populate:
            query = query.options(joinedload(BookInstance.book))
        return query

    def find_all(self, populate: bool = True):
        # storage order, no explicit sort
        return self._query(populate).all()

    def find_by_id(self, instance_id: str, populate: bool = False):
        return self._query(populate).filter(BookInstance.id == instance_id).first()

    def find_by_book(self, book_id: str):
        return BookInstance.query.filter_by(book_id=book_id).all()

    def save(self, instance: BookInstance):
        db.session.add(instance)
        db.session.commit()
        return instance

    def update(self, instance_id: str, values: dict) -> bool:
        instance = db.session.get(BookInstance, instance_id)
        if instance is None:
            return False
        for k, v in values.items():
            setattr(instance, k, v)
        db.session.commit()
        return True

    def delete(self, instance_id: str) -> bool:
        if not instance_id:
            return False
        instance = db.session.get(BookInstance, instance_id)
        if instance is None:
            return False
        db.session.delete(instance)
        db.session.commit()
        return True

    def count(self, status=None) -> int:
        query = BookInstance.query
        if status is not None:
            query = query.filter_by(status=status)
        return query.count()
