"""
Application controller: the canonical contact list and the page-wide flags.
"""

from dataclasses import dataclass, field
from functools import partial
from typing import List

from agenda.api import ContactsApiClient
from agenda.exceptions import TransportError
from agenda.logging import get_logger
from agenda.models import Contact, ContactId, DraftContact
from agenda.views import ContactCard

logger = get_logger(__name__)

LOAD_ERROR = (
    "Could not load contacts. Check that the server is running and try again."
)
CREATE_ERROR = (
    "Could not save the contact. Check your connection or the server status "
    "and try again."
)
DELETE_ERROR = "Could not delete the contact. Try again or check the server."


@dataclass
class ContactBookState:
    contacts: List[Contact] = field(default_factory=list)
    loading: bool = True
    error: str = ""


class ContactBookController:
    """Owns :class:`ContactBookState`; ``load``, ``add_contact`` and
    ``delete_contact`` are its only mutators.

    Local changes are applied only after the API confirms them. The list is
    re-read when each call resumes, so concurrent deletes of distinct ids
    never clobber each other.
    """

    def __init__(self, api: ContactsApiClient) -> None:
        self._api = api
        self._load_started = False
        self.state = ContactBookState()

    async def load(self) -> None:
        if self._load_started:
            logger.warning("Initial contact load already ran; ignoring")
            return
        self._load_started = True

        self.state.loading = True
        self.state.error = ""
        try:
            self.state.contacts = list(await self._api.list_contacts())
        except TransportError as exc:
            logger.error(
                "Error loading contacts",
                extra={"url": exc.url, "status_code": exc.status_code},
                exc_info=exc,
            )
            self.state.error = LOAD_ERROR
        finally:
            self.state.loading = False

    async def add_contact(self, draft: DraftContact) -> Contact:
        """Create ``draft`` remotely and append the stored record.

        Raises:
            TransportError: after surfacing the failure, so the caller can keep
                its draft.
        """
        self.state.error = ""
        try:
            created = await self._api.create_contact(draft)
        except TransportError as exc:
            logger.error(
                "Error creating contact",
                extra={"url": exc.url, "status_code": exc.status_code},
                exc_info=exc,
            )
            self.state.error = CREATE_ERROR
            raise

        self.state.contacts = [*self.state.contacts, created]
        logger.info("Contact created", extra={"contact_id": created.id})
        return created

    async def delete_contact(self, contact_id: ContactId) -> None:
        self.state.error = ""
        try:
            await self._api.delete_contact(contact_id)
        except TransportError as exc:
            logger.error(
                "Error deleting contact",
                extra={
                    "contact_id": contact_id,
                    "url": exc.url,
                    "status_code": exc.status_code,
                },
                exc_info=exc,
            )
            self.state.error = DELETE_ERROR
            return

        self.state.contacts = [c for c in self.state.contacts if c.id != contact_id]
        logger.info("Contact deleted", extra={"contact_id": contact_id})

    def cards(self) -> List[ContactCard]:
        return [
            ContactCard(
                id=c.id,
                name=c.name,
                phone=c.phone,
                email=c.email,
                tag=c.tag or "",
                on_delete=partial(self.delete_contact, c.id),
            )
            for c in self.state.contacts
        ]
