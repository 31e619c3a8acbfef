# locallibrary/controllers/bookinstance_controller.py

from flask import Blueprint, current_app, request

from locallibrary.utils.http import respond

bookinstance_bp = Blueprint("bookinstance", __name__, url_prefix="/catalog")


def _service():
    return current_app.extensions["locallibrary.bookinstances"]


@bookinstance_bp.get("/bookinstances")
def bookinstance_list():
    return respond(_service().list())


@bookinstance_bp.get("/bookinstance/create")
def bookinstance_create_get():
    return respond(_service().create_form())


@bookinstance_bp.post("/bookinstance/create")
def bookinstance_create_post():
    return respond(_service().create(request.form))


@bookinstance_bp.get("/bookinstance/<instance_id>/delete")
def bookinstance_delete_get(instance_id: str):
    return respond(_service().delete_form(instance_id))


@bookinstance_bp.post("/bookinstance/<instance_id>/delete")
def bookinstance_delete_post(instance_id: str):
    # the record to remove comes from the form body, not the path
    return respond(_service().delete(request.form))


@bookinstance_bp.get("/bookinstance/<instance_id>/update")
def bookinstance_update_get(instance_id: str):
    return respond(_service().update_form(instance_id))


@bookinstance_bp.post("/bookinstance/<instance_id>/update")
def bookinstance_update_post(instance_id: str):
    return respond(_service().update(instance_id, request.form))


@bookinstance_bp.get("/bookinstance/<instance_id>")
def bookinstance_detail(instance_id: str):
    return respond(_service().detail(instance_id))
