"""
Custom domain exceptions for the library.

Malformed header content is never an error: offending entries are dropped.
These exceptions only report caller bugs, such as passing a value of the
wrong type where header text or a language tag is expected.

Type-related exceptions also derive from the builtin TypeError so callers
can handle them without importing this module.
"""


class DomainException(Exception):
    """
    Base class for all domain exceptions.

    Attributes:
        message: Human-readable error message.
    """

    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class ValidationException(DomainException):
    """Raised when an argument fails validation."""

    pass


class InvalidHeaderTypeException(ValidationException, TypeError):
    """Header value is neither text nor None."""

    pass


class InvalidLanguageTagException(ValidationException, TypeError):
    """Available tags are not a sequence of text values."""

    pass
