"""Custom exception classes for the chunked upload engine."""


class UploadError(Exception):
    """
    Base exception class for all errors that abort an upload run.
    """
    pass


class SourceIoError(UploadError):
    """
    Raised when seeking or reading the input source fails.
    """
    pass


class TransportError(UploadError):
    """
    Raised when a chunk request cannot be delivered (connection, DNS, timeout).
    """
    pass


class HttpStatusError(UploadError):
    """
    Raised when the destination answers a chunk with anything other than 200.
    """

    def __init__(self, status_code: int, body: str):
        super().__init__(f"Http Error uploading chunk: {body}")
        self.status_code = status_code
        self.body = body
