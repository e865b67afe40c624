"""Transfer driver: uploads a byte range of a file one HTTP request per chunk."""

from typing import Callable, Optional

import httpx

from common.constants import DEFAULT_TIMEOUT_SECONDS, EMPTY_BODY_PLACEHOLDER, SUCCESS_STATUS_CODE
from common.logging_config import get_logger
from uploader.exceptions import HttpStatusError, TransportError, UploadError
from uploader.models import ChunkBounds, ChunkResult, TransferOutcome, UploadRequest
from uploader.planner import count_chunks, format_content_range, plan_chunks
from uploader.reader import read_chunk, seek_to_start

logger = get_logger(__name__)

ChunkCallback = Callable[[ChunkResult], None]


class ChunkUploader:
    """Sequential chunked uploader owning a single HTTP client."""

    def __init__(
        self,
        timeout: Optional[float] = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[httpx.Client] = None,
    ):
        """
        Initialize the uploader.

        Args:
            timeout: Per-request timeout in seconds (None waits forever)
            session: Pre-built client to use instead of creating one (testing)
        """
        self._owns_session = session is None
        self.session = session if session is not None else httpx.Client(timeout=timeout)
        logger.debug(f"Initialized ChunkUploader [timeout={timeout}]")

    def close(self) -> None:
        """Close the HTTP client if this uploader created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> 'ChunkUploader':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def upload(
        self,
        request: UploadRequest,
        on_chunk: Optional[ChunkCallback] = None,
    ) -> TransferOutcome:
        """
        Upload request.range_start..request.range_end of the source.

        Chunks are read and sent strictly one after another. The run stops
        after the first chunk that reads fewer than chunk_size bytes, and
        aborts on the first seek/read error, transport error or non-200
        response without sending anything further.

        Args:
            request: Validated upload configuration
            on_chunk: Optional hook called after each accepted chunk

        Returns:
            TransferOutcome describing success or the failure that ended the run
        """
        planned = count_chunks(request.range_start, request.range_end, request.chunk_size)
        logger.info(
            f"Starting upload: {request.http_method.value} {request.destination_url} "
            f"range={request.range_start}-{request.range_end} chunk_size={request.chunk_size} "
            f"planned_chunks={planned}"
        )

        chunks_sent = 0
        bytes_sent = 0
        try:
            seek_to_start(request.source, request.range_start)

            for bounds in plan_chunks(request.range_start, request.range_end, request.chunk_size):
                buffer, n = read_chunk(request.source, bounds)
                status_code = self._send_chunk(request, bounds, buffer)
                chunks_sent += 1
                bytes_sent += len(buffer)

                result = ChunkResult(bounds=bounds, bytes_read=n, status_code=status_code)
                if on_chunk is not None:
                    on_chunk(result)

                if n == 0 or n < request.chunk_size:
                    if result.is_short:
                        logger.warning(
                            f"Source ended early at offset {bounds.start + n}, "
                            f"expected data up to {bounds.end}; stopping"
                        )
                    break

        except UploadError as e:
            logger.error(f"Upload failed after {chunks_sent} chunk(s): {e}")
            return TransferOutcome.failed(e, chunks_sent=chunks_sent, bytes_sent=bytes_sent)

        logger.info(f"Upload completed: {chunks_sent} chunk(s), {bytes_sent} bytes")
        return TransferOutcome.succeeded(chunks_sent=chunks_sent, bytes_sent=bytes_sent)

    def _send_chunk(self, request: UploadRequest, bounds: ChunkBounds, buffer: bytes) -> int:
        """
        Send one chunk and check the response.

        The whole buffer is sent, including any zero-filled tail left by a
        short read.

        Returns:
            Response status code (always 200)

        Raises:
            TransportError: If the URL is malformed or the request could not be completed
            HttpStatusError: If the response status is not 200
        """
        content_range = format_content_range(bounds, request.range_end)
        logger.debug(f"Sending chunk: {request.http_method.value} Content-Range: {content_range}")

        try:
            response = self.session.request(
                request.http_method.value,
                request.destination_url,
                headers={'Content-Range': content_range},
                content=buffer,
            )
        except (httpx.RequestError, httpx.InvalidURL) as e:
            raise TransportError(f"Error uploading chunk: {str(e) or type(e).__name__}") from e

        logger.debug(f"Response received: status={response.status_code} [{content_range}]")

        if response.status_code != SUCCESS_STATUS_CODE:
            raise HttpStatusError(response.status_code, self._response_body(response))
        return response.status_code

    def _response_body(self, response: httpx.Response) -> str:
        """Response text, or a placeholder when there is none to show."""
        try:
            text = response.text
        except (httpx.StreamError, httpx.DecodingError, UnicodeDecodeError):
            return EMPTY_BODY_PLACEHOLDER
        return text if text else EMPTY_BODY_PLACEHOLDER
