
class DBError(Exception):
    """Base error class"""

class InvalidArgumentError(DBError, ValueError):
    """An argument has a value that is not allowed. """

class NullArgumentError(InvalidArgumentError, TypeError):
    """A required argument is None."""
