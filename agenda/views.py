"""
Render-only view models for the contact book page.
"""

from dataclasses import dataclass
from typing import Awaitable, Callable, Dict, List

from pydantic import BaseModel

from agenda.models import ContactId

LOADING_MESSAGE = "Loading contacts..."
EMPTY_MESSAGE = (
    "You have no contacts yet. Add the first one using the form above."
)


@dataclass(frozen=True)
class ContactCard:
    """One list entry; ``on_delete`` is already bound to this contact's id."""

    id: ContactId
    name: str
    phone: str
    email: str
    tag: str
    on_delete: Callable[[], Awaitable[None]]


class ContactCardView(BaseModel):
    id: ContactId
    name: str
    phone: str
    email: str
    tag: str


class FormView(BaseModel):
    values: Dict[str, str]
    errors: Dict[str, str]
    submitting: bool
    submit_label: str


class PageView(BaseModel):
    title: str
    subtitle: str
    course_number: str
    loading: bool
    loading_message: str = ""
    error: str = ""
    contacts: List[ContactCardView] = []
    empty_message: str = ""
    form: FormView


def render_card(card: ContactCard) -> ContactCardView:
    return ContactCardView(
        id=card.id, name=card.name, phone=card.phone, email=card.email, tag=card.tag
    )


def render_form(form) -> FormView:
    return FormView(
        values=form.draft.model_dump(),
        errors=dict(form.errors),
        submitting=form.submitting,
        submit_label=form.submit_label,
    )


def render_page(settings, state, cards: List[ContactCard], form) -> PageView:
    """Build the whole page; while loading only the header and message show."""
    return PageView(
        title=settings.app_title,
        subtitle=settings.app_subtitle,
        course_number=settings.course_number,
        loading=state.loading,
        loading_message=LOADING_MESSAGE if state.loading else "",
        error=state.error,
        contacts=[] if state.loading else [render_card(c) for c in cards],
        empty_message=EMPTY_MESSAGE if not state.loading and not cards else "",
        form=render_form(form),
    )
