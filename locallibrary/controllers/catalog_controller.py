from flask import Blueprint, current_app, redirect, url_for

from locallibrary.utils.http import respond

catalog_bp = Blueprint("catalog", __name__)


def _service():
    return current_app.extensions["locallibrary.catalog"]


@catalog_bp.get("/")
def root():
    return redirect(url_for("catalog.index"))


@catalog_bp.get("/catalog/")
def index():
    return respond(_service().index())


@catalog_bp.get("/catalog/books")
def book_list():
    return respond(_service().book_list())


@catalog_bp.get("/catalog/book/<book_id>")
def book_detail(book_id: str):
    return respond(_service().book_detail(book_id))
