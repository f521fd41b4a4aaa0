# invoicing/errors.py


class InvoicingError(Exception):
    """Base exception for invoicing failures."""


class RecordValidationError(InvoicingError):
    """Raised when a record is well-formed but semantically invalid."""

    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message
