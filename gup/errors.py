"""
Errors raised by the upload workflow.

Every failure aborts the run; ``gup.cli`` is the only place that catches
them, prints ``message`` and exits with status 1.
"""

from typing import Optional


class UploadError(Exception):
    """Base class for every failure of an upload run."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedURL(UploadError):
    pass


class FileNotFound(UploadError):
    pass


class FileTooLarge(UploadError):
    def __init__(self, message: str, size_bytes: int, limit_bytes: int):
        super().__init__(message)
        self.size_bytes = size_bytes
        self.limit_bytes = limit_bytes


class ReadError(UploadError):
    pass


class RemoteAPIError(UploadError):
    """The content API answered with a status the workflow does not accept."""

    def __init__(self, message: str, status_code: int, body: Optional[str] = None):
        super().__init__(message)
        self.status_code = status_code
        self.body = body or ""


class ResponseParseError(UploadError):
    pass


class RequestConstructionError(UploadError):
    pass


class TransportError(UploadError):
    """The request never got an HTTP response (DNS, connection, TLS, timeout)."""
