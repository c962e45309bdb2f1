"""Core exception types for collection-fetch."""
from typing import Iterable


class CollectionFetchError(Exception):
    """Base exception for all collection-fetch errors."""
    pass


class ValidationError(CollectionFetchError):
    """Raised when one or more configuration inputs are missing or invalid.

    All problems are collected before raising, so ``messages`` holds every
    one of them in the order they were found.
    """

    def __init__(self, messages: Iterable[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class TransportError(CollectionFetchError):
    """Raised when an HTTP request cannot complete or returns an error status."""
    pass


class DecodeError(CollectionFetchError):
    """Raised when a listing response cannot be parsed."""
    pass


class ResolutionError(CollectionFetchError):
    """Raised when neither the requested fork nor a staging fork exists."""
    pass


class WriteError(CollectionFetchError):
    """Raised when the collection document cannot be written to disk."""
    pass
