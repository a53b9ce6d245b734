from dataclasses import dataclass, field
from typing import Optional


@dataclass
class RegistrationRecord:
    """
    One row of the Form_Applicants table.

    Fields
    ------
    user_id : anonymous identifier generated for the submission (UUID4 string)
    name    : full name exactly as typed into the form
    email   : email address exactly as typed into the form
    """
    user_id: str
    name: str
    email: str

    def to_row(self) -> dict:
        return {"user_id": self.user_id, "name": self.name, "email": self.email}

    def __str__(self):
        return f"RegistrationRecord({self.user_id})"


@dataclass
class InsertResult:
    """Outcome of a single insert: ``error`` is None when the store accepted the row."""
    error: Optional[str] = None
    details: dict = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.error is None
