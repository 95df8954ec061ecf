"""Exception hierarchy for editsim."""


class EditSimError(Exception):
    """Base exception for all editsim errors."""


class ValidationError(EditSimError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values).

    Subclasses ``ValueError`` so callers that already guard argument errors
    generically keep working.
    """


__all__ = ["EditSimError", "ValidationError"]
