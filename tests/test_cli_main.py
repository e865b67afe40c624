"""End-to-end tests for the CLI entry point with a mocked HTTP transport."""

import logging

import pytest
from cli.main import main
from common.constants import VERSION


@pytest.fixture(autouse=True)
def isolated_cli(tmp_path, monkeypatch, make_uploader, recorder):
    """Point the config at tmp_path and route uploads to the recorder."""
    monkeypatch.setenv('HOME', str(tmp_path))
    monkeypatch.setattr('cli.commands.ChunkUploader', lambda timeout=None: make_uploader(recorder))
    yield
    for name in ('cli', 'uploader'):
        logging.getLogger(name).handlers.clear()


def test_main_success(sample_file, recorder, capsys):
    code = main(['-f', str(sample_file), '-u', 'http://host/up', '-r', '100-250', '-c', '100'])

    assert code == 0
    assert 'Request completed successfully' in capsys.readouterr().out
    assert recorder.content_ranges == ['bytes 100-200/250', 'bytes 200-250/250']


def test_main_http_failure(sample_file, recorder, capsys):
    recorder.statuses = [503]
    recorder.body = b'try later'

    code = main(['-f', str(sample_file), '-u', 'http://host/up', '-c', '100'])

    assert code == 1
    assert 'Http Error uploading chunk: try later' in capsys.readouterr().out
    assert len(recorder.requests) == 1


def test_main_help(capsys):
    assert main(['--help']) == 0
    assert 'Chunk Uploader - Help' in capsys.readouterr().out


def test_main_version(capsys):
    assert main(['-v']) == 0
    assert capsys.readouterr().out.strip() == VERSION


def test_main_parse_error(capsys):
    assert main(['--nope']) == 1
    assert "Error: Unknown argument '--nope'" in capsys.readouterr().out


def test_main_validation_error(sample_file, recorder, capsys):
    code = main(['-f', str(sample_file), '-u', 'http://host/up', '-r', '0-5000'])

    assert code == 1
    assert "Byte range of 5000 is larger than the file's size of 1000" in capsys.readouterr().out
    assert recorder.requests == []


def test_main_missing_file(tmp_path, capsys):
    code = main(['-f', str(tmp_path / 'nope.bin'), '-u', 'http://host/up'])

    assert code == 1
    assert 'does not exist' in capsys.readouterr().out


def test_main_writes_no_files(tmp_path, sample_file):
    """Only HTTP requests leave the process; HOME stays untouched."""
    before = sorted(p.name for p in tmp_path.iterdir())

    assert main(['-f', str(sample_file), '-u', 'http://host/up']) == 0

    assert sorted(p.name for p in tmp_path.iterdir()) == before
    assert not (tmp_path / '.chunkup').exists()


def test_main_malformed_url(sample_file, recorder, capsys):
    code = main(['-f', str(sample_file), '-u', 'http://[::1'])

    assert code == 1
    assert 'Error uploading chunk: ' in capsys.readouterr().out
    assert recorder.requests == []


def test_main_bad_chunk_size_env(sample_file, recorder, monkeypatch, capsys):
    monkeypatch.setenv('CHUNKUP_CHUNK_SIZE', 'abc')

    code = main(['-f', str(sample_file), '-u', 'http://host/up'])

    assert code == 1
    assert "Error: Invalid chunk_size setting 'abc'" in capsys.readouterr().out
    assert recorder.requests == []


def test_main_bad_timeout_env(sample_file, monkeypatch, capsys):
    monkeypatch.setenv('CHUNKUP_TIMEOUT', 'later')

    code = main(['-f', str(sample_file), '-u', 'http://host/up'])

    assert code == 1
    assert "Error: Invalid timeout setting 'later'" in capsys.readouterr().out


def test_main_prints_file_size_before_missing_url(sample_file, capsys):
    code = main(['-f', str(sample_file), '-fb'])

    out = capsys.readouterr().out
    assert code == 1
    assert out.index('File size: 1000 bytes') < out.index('No URL was given')
