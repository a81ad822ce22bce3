"""Errors raised at the file/CLI boundary (the resolution core never raises)."""


class OwnerInputError(Exception):
    """Raised when an owner source document cannot be read."""
