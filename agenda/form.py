from enum import Enum
from typing import Any, Awaitable, Callable, Dict

from agenda.exceptions import TransportError
from agenda.logging import get_logger
from agenda.models import DraftContact
from agenda.validation import empty_errors, is_valid, validate_contact

logger = get_logger(__name__)

SubmitHandler = Callable[[DraftContact], Awaitable[Any]]

FORM_FIELDS = ("name", "phone", "email", "tag")


class SubmitResult(str, Enum):
    SAVED = "saved"
    INVALID = "invalid"
    FAILED = "failed"
    BUSY = "busy"


class FormController:
    """State of the "new contact" form.

    ``on_submit`` receives the validated draft and signals failure by raising
    :class:`TransportError`; any other return means the contact was stored.
    """

    def __init__(self, on_submit: SubmitHandler) -> None:
        self._on_submit = on_submit
        self.draft = DraftContact()
        self.errors: Dict[str, str] = empty_errors()
        self.submitting = False

    @property
    def submit_label(self) -> str:
        return "Saving..." if self.submitting else "Add contact"

    def set_field(self, field: str, value: str) -> None:
        # Errors stay visible until the next submit.
        if field not in FORM_FIELDS:
            raise KeyError(field)
        self.draft = self.draft.model_copy(update={field: value})

    def reset(self) -> None:
        self.draft = DraftContact()
        self.errors = empty_errors()

    async def submit(self) -> SubmitResult:
        if self.submitting:
            return SubmitResult.BUSY

        self.errors = validate_contact(self.draft)
        if not is_valid(self.errors):
            return SubmitResult.INVALID

        self.submitting = True
        try:
            await self._on_submit(self.draft)
        except TransportError:
            logger.info("Contact submission failed; keeping draft")
            return SubmitResult.FAILED
        finally:
            self.submitting = False

        self.reset()
        return SubmitResult.SAVED
