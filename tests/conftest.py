"""Pytest configuration and shared fixtures."""

import pytest
from click.testing import CliRunner

from csvout.cli import cli
from csvout.events import EventEmitter
from csvout.pipeline import Pipeline


class RecordingStream(EventEmitter):
    """Writable stream double that records chunks.

    With ``auto_close=False`` the ``close`` event is held back until the test
    calls ``close()``, like a destination still flushing buffered bytes.
    """

    def __init__(self, auto_close=True):
        super().__init__()
        self.chunks = []
        self.ended = False
        self.auto_close = auto_close

    def write(self, chunk):
        self.chunks.append(chunk)
        return True

    def end(self):
        self.ended = True
        if self.auto_close:
            self.close()

    def close(self):
        self.emit("close")

    def fail(self, exc):
        self.emit("error", exc)

    @property
    def data(self):
        return "".join(self.chunks)


@pytest.fixture
def make_stream():
    """Factory for ``RecordingStream`` instances."""
    return RecordingStream


@pytest.fixture
def stream():
    return RecordingStream()


@pytest.fixture
def pipeline():
    return Pipeline()


@pytest.fixture
def errors(pipeline):
    """Errors reported on ``pipeline``'s error channel, in order."""
    collected = []
    pipeline.on("error", collected.append)
    return collected


@pytest.fixture
def closes(pipeline):
    """Counts carried by ``pipeline``'s close events."""
    collected = []
    pipeline.on("close", collected.append)
    return collected


@pytest.fixture
def cli_runner():
    """Provide Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def invoke(cli_runner):
    """Helper to invoke the CLI with args and optional input.

    Usage:
        result = invoke(["write", "out.csv"], input_data="a,b\\n")
    """

    def _invoke(args, input_data=None, env=None):
        return cli_runner.invoke(cli, args, input=input_data, env=env)

    return _invoke


@pytest.fixture
def sample_csv():
    return "name,age\nAlice,30\nBob,25\n"
