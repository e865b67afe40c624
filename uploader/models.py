"""Data types for the chunked upload engine."""

from dataclasses import dataclass
from enum import Enum
from typing import BinaryIO, Optional

from uploader.exceptions import HttpStatusError, SourceIoError, TransportError, UploadError


class HttpMethod(str, Enum):
    """Standard HTTP verbs a chunk can be sent with."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"

    @classmethod
    def parse(cls, text: str) -> "HttpMethod":
        """
        Look up a method by name, ignoring case.

        Raises:
            ValueError: If the name is not a standard HTTP verb
        """
        try:
            return cls(text.strip().upper())
        except ValueError:
            raise ValueError(f"Invalid HTTP method '{text}'") from None


@dataclass(frozen=True)
class UploadRequest:
    """
    Validated configuration for a single upload run.

    The caller guarantees range_start <= range_end <= source length
    and chunk_size > 0.
    """

    source: BinaryIO
    range_start: int
    range_end: int
    chunk_size: int
    destination_url: str
    http_method: HttpMethod = HttpMethod.PUT

    @property
    def range_length(self) -> int:
        return self.range_end - self.range_start


@dataclass(frozen=True)
class ChunkBounds:
    """Half-open byte interval [start, end) of one chunk."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class ChunkResult:
    """What happened to one chunk that the destination accepted."""

    bounds: ChunkBounds
    bytes_read: int
    status_code: int

    @property
    def is_short(self) -> bool:
        return self.bytes_read < self.bounds.length


class FailureKind(str, Enum):
    SOURCE_IO = "source_io"
    TRANSPORT = "transport"
    HTTP_STATUS = "http_status"


_FAILURE_KINDS = (
    (SourceIoError, FailureKind.SOURCE_IO),
    (TransportError, FailureKind.TRANSPORT),
    (HttpStatusError, FailureKind.HTTP_STATUS),
)


@dataclass(frozen=True)
class TransferOutcome:
    """Terminal result of an upload run."""

    success: bool
    message: str
    failure_kind: Optional[FailureKind] = None
    chunks_sent: int = 0
    bytes_sent: int = 0

    @classmethod
    def succeeded(cls, chunks_sent: int, bytes_sent: int) -> "TransferOutcome":
        return cls(
            success=True,
            message="Request completed successfully",
            chunks_sent=chunks_sent,
            bytes_sent=bytes_sent,
        )

    @classmethod
    def failed(cls, error: UploadError, chunks_sent: int, bytes_sent: int) -> "TransferOutcome":
        kind = next(k for exc_type, k in _FAILURE_KINDS if isinstance(error, exc_type))
        return cls(
            success=False,
            message=str(error),
            failure_kind=kind,
            chunks_sent=chunks_sent,
            bytes_sent=bytes_sent,
        )
