"""Custom exceptions for feedloader.

Provides the classified errors surfaced by feed loaders and the
transport-level errors produced by HTTP client adapters.
"""


class FeedLoaderError(Exception):
    """Base exception class for all feedloader errors."""

    pass


class ConnectivityError(FeedLoaderError):
    """Raised when the request could not reach the server.

    Covers network and DNS failures, transport-reported errors of any kind
    and responses that are not HTTP responses.
    """

    def __init__(self, message: str = "Connectivity failure"):
        super().__init__(message)


class UnexpectedRepresentationError(ConnectivityError):
    """Raised when the transport produced neither an error nor an HTTP response."""

    def __init__(self, message: str = "Unexpected values representation"):
        super().__init__(message)


class InvalidDataError(FeedLoaderError):
    """Raised when the server answered with unusable data.

    Either the status code was not 200 or the payload failed validation.
    """

    def __init__(self, message: str = "Invalid data"):
        super().__init__(message)
