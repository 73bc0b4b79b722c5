"""
Exceptions raised by lkchecker.

Every exception carries the ErrorKind it reports, so callers that need the
numeric contract (the lookup engine, the CLI) can translate without a table.
"""

from lkchecker.constants import ErrorKind


class LkError(Exception):
    """Base class for all lkchecker errors."""
    kind = ErrorKind.INVALID_ARG


class BufferTooSmall(LkError):
    """A result would not fit in MAX_WORD_LENGTH."""
    kind = ErrorKind.BUFFER_SMALL


class InvalidString(LkError):
    """Input is not a valid UTF-8 string or a lexicon line is malformed."""
    kind = ErrorKind.INVALID_STRING


class InvalidArgument(LkError):
    kind = ErrorKind.INVALID_ARG


class OutOfMemory(LkError):
    kind = ErrorKind.OUT_OF_MEMORY


class InvalidFile(LkError):
    kind = ErrorKind.INVALID_FILE


class ReadError(LkError):
    kind = ErrorKind.READ_ERROR


class LineTooLong(LkError):
    kind = ErrorKind.LINE_TOO_LONG


class InvalidConjugation(LkError):
    """Unknown ablaut grade letter in an article header."""
    kind = ErrorKind.INVALID_CONJ


class IncompleteVerb(LkError):
    """Verb article with a contraction but no base form."""
    kind = ErrorKind.INCOMPLETE_VERB
