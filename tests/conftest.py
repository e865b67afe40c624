"""Shared pytest fixtures for all tests."""

import httpx
import pytest
from cli.config import Config
from uploader.driver import ChunkUploader


class RecordingHandler:
    """MockTransport handler that records every request and replies with scripted statuses."""

    def __init__(self, statuses=None, body=b''):
        self.requests = []
        self.statuses = list(statuses or [])
        self.body = body

    def __call__(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        status = self.statuses.pop(0) if self.statuses else 200
        return httpx.Response(status, content=self.body)

    @property
    def content_ranges(self):
        return [r.headers['Content-Range'] for r in self.requests]

    @property
    def body_lengths(self):
        return [len(r.content) for r in self.requests]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep CHUNKUP_* variables from the developer's shell out of the tests."""
    for name in ('CHUNKUP_CHUNK_SIZE', 'CHUNKUP_METHOD', 'CHUNKUP_TIMEOUT', 'CHUNKUP_URL'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def temp_config_dir(tmp_path):
    """
    Create temporary config directory.

    Args:
        tmp_path: pytest tmp_path fixture

    Returns:
        Path to temporary .chunkup directory
    """
    config_dir = tmp_path / '.chunkup'
    config_dir.mkdir()
    return config_dir


@pytest.fixture
def temp_config(temp_config_dir):
    """
    Create temporary config instance.

    Args:
        temp_config_dir: Temporary config directory fixture

    Returns:
        Config instance with temp config file
    """
    return Config(temp_config_dir / 'config.json')


@pytest.fixture
def sample_file(tmp_path):
    """
    Create a 1000-byte file whose byte at offset i is i % 256.

    Returns:
        Path to sample binary file
    """
    file_path = tmp_path / 'sample.bin'
    file_path.write_bytes(bytes(i % 256 for i in range(1000)))
    return file_path


@pytest.fixture
def recorder():
    """Recording handler that accepts every chunk."""
    return RecordingHandler()


@pytest.fixture
def make_uploader():
    """Factory building a ChunkUploader whose HTTP session is backed by a handler."""
    sessions = []

    def factory(handler):
        session = httpx.Client(transport=httpx.MockTransport(handler))
        sessions.append(session)
        return ChunkUploader(session=session)

    yield factory

    for session in sessions:
        session.close()


@pytest.fixture
def make_recorder():
    """Factory for recording handlers with scripted statuses and body."""
    return RecordingHandler
