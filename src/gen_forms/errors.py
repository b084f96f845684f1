"""
Error taxonomy for Gen-Forms.

Every error carries a stable ``code`` so transports can report it
without knowing the concrete class.
"""


class GenFormsError(Exception):
    """Base class for all Gen-Forms errors."""

    code = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class InvalidInputError(GenFormsError):
    """Input rejected before any storage access."""

    code = "invalid_input"

    def __init__(self, message: str, issues: list[str] | None = None):
        super().__init__(message)
        self.issues = issues or []


class NotFoundError(GenFormsError):
    """The targeted form does not exist."""

    code = "not_found"


class ConstraintViolationError(NotFoundError):
    """A submission references a form that does not exist."""


class StorageError(GenFormsError):
    """The backing store failed; the original exception is chained."""

    code = "storage_error"
