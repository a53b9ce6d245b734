"""
mastermind/services/registration.py
-----------------------------------
Registration form controller: the only behaviour on the landing page.

Responsibility
--------------
1. Hold the two editable fields (name, email)
2. On submit, tag the entry with a fresh anonymous id and insert it
   into the record store (one call, no retries)
3. Report the outcome through the notification sink and, on success,
   clear the form

Neither the record store nor the notifier know about each other; the
controller is what connects them.
"""
from __future__ import annotations

import logging
import uuid
from dataclasses import asdict, dataclass
from typing import Any, Callable, Optional

from database.models import RegistrationRecord
from mastermind.services.errors import UnknownFieldError
from mastermind.services.notifications import DESTRUCTIVE, NORMAL, Notification

logger = logging.getLogger(__name__)

DEFAULT_TABLE = "Form_Applicants"
FIELDS = ("name", "email")

SUCCESS = Notification(
    "Registration Successful!",
    "You're signed up for the Emergency Mastermind. Prepare to initiate the better you!",
    NORMAL,
)
STORE_FAILURE = Notification(
    "Registration Failed",
    "There was an error submitting your registration. Please try again.",
    DESTRUCTIVE,
)
UNEXPECTED_FAILURE = Notification(
    "Registration Failed",
    "There was an unexpected error. Please try again.",
    DESTRUCTIVE,
)


@dataclass
class RegistrationFormState:
    name: str = ""
    email: str = ""

    @classmethod
    def from_dict(cls, data: Optional[dict]) -> "RegistrationFormState":
        data = data or {}
        return cls(**{f: data[f] if isinstance(data.get(f), str) else "" for f in FIELDS})

    def to_dict(self) -> dict:
        return asdict(self)


def new_anonymous_id() -> str:
    return str(uuid.uuid4())


class RegistrationController:
    """
    Owns one registration form for its lifetime.

    Parameters
    ----------
    store : object
        Anything with ``insert(table, record) -> InsertResult``.
    notifier : object
        Anything with ``notify(title, description, variant)``.
    table : str
        Table the applicant rows go into.
    state : RegistrationFormState, optional
        Starting field values (restored from the session by the web layer).
    id_factory : callable, optional
        Produces the anonymous id for each submission.
    """

    def __init__(
        self,
        store: Any,
        notifier: Any,
        table: str = DEFAULT_TABLE,
        state: Optional[RegistrationFormState] = None,
        id_factory: Callable[[], str] = new_anonymous_id,
    ):
        self.store = store
        self.notifier = notifier
        self.table = table
        self.state = state or RegistrationFormState()
        self.id_factory = id_factory
        self.is_submitting = False

    def update_field(self, field_name: str, value: str) -> None:
        """Replace one field's value. No validation happens here."""
        if field_name not in FIELDS:
            raise UnknownFieldError(field_name)
        setattr(self.state, field_name, value)

    def submit(self) -> Optional[Notification]:
        """
        Send the current form as one new applicant record.

        Returns the notification that was shown, or None when a submission
        is already in flight and this call was ignored.
        """
        if self.is_submitting:
            logger.warning("submit ignored: a registration is already in flight")
            return None

        self.is_submitting = True
        try:
            record = RegistrationRecord(
                user_id=self.id_factory(),
                name=self.state.name,
                email=self.state.email,
            )
            try:
                result = self.store.insert(self.table, record.to_row())
            except Exception:
                logger.exception("Unexpected error submitting registration %s", record.user_id)
                return self._notify(UNEXPECTED_FAILURE)

            if not result.ok:
                logger.error("Error submitting registration %s: %s", record.user_id, result.error)
                return self._notify(STORE_FAILURE)

            logger.info("Registration %s stored in %s", record.user_id, self.table)
            self.state = RegistrationFormState()
            return self._notify(SUCCESS)
        finally:
            self.is_submitting = False

    def _notify(self, notification: Notification) -> Notification:
        self.notifier.notify(notification.title, notification.description, notification.variant)
        return notification
