"""Exception types raised by the board, lexicon and search operations."""


class BoggleError(Exception):
    """Base class for engine failures."""


class InvalidInput(BoggleError, ValueError):
    """Raised when an argument is missing or malformed."""


class NotReady(BoggleError, RuntimeError):
    """Raised when a lexicon query runs before a word list was loaded."""
