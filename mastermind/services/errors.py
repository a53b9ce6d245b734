"""
Exceptions raised by the registration services.
"""


class RegistrationError(Exception):
    """Base class for registration errors."""


class UnknownFieldError(RegistrationError, ValueError):
    """Raised when a form update names a field the registration form does not have."""

    def __init__(self, field_name: str):
        super().__init__(f"Unknown registration field: {field_name!r}")
        self.field_name = field_name


class RecordStoreConfigError(RegistrationError):
    """Raised at startup when the configured record store cannot be built."""
