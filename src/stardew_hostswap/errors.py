"""Exceptions raised while reading, migrating and writing save documents."""


class SaveEditError(Exception):
    """Base class for save-document errors.

    Every error records the operation that raised it; the message is prefixed with it.
    """

    def __init__(self, message: str, *, operation: str) -> None:
        self.operation = operation
        self.detail = message
        super().__init__(f"{operation}: {message}")


class CodecError(SaveEditError):
    """Input text is not well-formed markup."""


class NoSecondaryPlayersError(SaveEditError):
    """The save has no farmhand that could become the host."""


class IndexOutOfRangeError(SaveEditError, IndexError):
    """No farmhand record exists at the requested position."""


class MissingDataError(SaveEditError, LookupError):
    """An expected part of the save document (or save folder) is absent."""
