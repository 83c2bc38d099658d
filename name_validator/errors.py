class NameValidationError(Exception):
    """Base error for the name validation service."""


class NameSourceError(NameValidationError):
    """The list of names to validate could not be loaded."""
