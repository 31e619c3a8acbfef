"""Outcomes returned by the catalog handlers.

A handler never touches the HTTP layer itself: it returns ``Ok`` wrapping a
``View`` (template + context) or a ``Redirect``, ``NotFound`` when the
requested record does not exist, or ``ValidationFailed`` carrying the field
errors together with the view that re-renders the submitted form.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class View:
    template: str
    context: dict = field(default_factory=dict)


@dataclass(frozen=True)
class Redirect:
    location: str


@dataclass(frozen=True)
class Ok:
    value: Union[View, Redirect]


@dataclass(frozen=True)
class NotFound:
    message: str = "Not found"


@dataclass(frozen=True)
class ValidationFailed:
    errors: list
    view: View


Result = Union[Ok, NotFound, ValidationFailed]
