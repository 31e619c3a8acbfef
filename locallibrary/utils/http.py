from flask import abort, redirect, render_template

from locallibrary.utils.results import NotFound, Redirect, ValidationFailed


def respond(result):
    """Turn a handler result into a Flask response."""
    if isinstance(result, NotFound):
        abort(404, description=result.message)

    if isinstance(result, ValidationFailed):
        view = result.view
        return render_template(view.template, **view.context)

    value = result.value
    if isinstance(value, Redirect):
        return redirect(value.location)
    return render_template(value.template, **value.context)
