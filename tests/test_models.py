"""Tests for engine data types."""

import io

import pytest
from uploader.exceptions import HttpStatusError, SourceIoError, TransportError
from uploader.models import ChunkBounds, ChunkResult, FailureKind, HttpMethod, TransferOutcome, UploadRequest


@pytest.mark.parametrize("text,expected", [("PUT", HttpMethod.PUT), ("post", HttpMethod.POST), (" Patch ", HttpMethod.PATCH)])
def test_http_method_parse(text, expected):
    assert HttpMethod.parse(text) is expected


def test_http_method_parse_rejects_unknown():
    with pytest.raises(ValueError, match="Invalid HTTP method 'BREW'"):
        HttpMethod.parse('BREW')


def test_upload_request_defaults_to_put():
    request = UploadRequest(
        source=io.BytesIO(b''),
        range_start=10,
        range_end=60,
        chunk_size=5,
        destination_url='http://host/up',
    )

    assert request.http_method is HttpMethod.PUT
    assert request.range_length == 50


def test_chunk_result_is_short():
    bounds = ChunkBounds(0, 100)

    assert ChunkResult(bounds=bounds, bytes_read=40, status_code=200).is_short
    assert not ChunkResult(bounds=bounds, bytes_read=100, status_code=200).is_short


@pytest.mark.parametrize(
    "error,kind",
    [
        (SourceIoError("Error reading file: boom"), FailureKind.SOURCE_IO),
        (TransportError("Error uploading chunk: refused"), FailureKind.TRANSPORT),
        (HttpStatusError(503, "busy"), FailureKind.HTTP_STATUS),
    ],
)
def test_failed_outcome_is_tagged(error, kind):
    outcome = TransferOutcome.failed(error, chunks_sent=3, bytes_sent=300)

    assert not outcome.success
    assert outcome.failure_kind is kind
    assert outcome.message == str(error)
    assert outcome.chunks_sent == 3


def test_http_status_error_keeps_status_and_body():
    error = HttpStatusError(404, "no such bucket")

    assert error.status_code == 404
    assert error.body == "no such bucket"
    assert str(error) == "Http Error uploading chunk: no such bucket"
