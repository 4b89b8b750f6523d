"""Unit tests for KubectlLogStream line-aligned reading."""

from __future__ import annotations

import asyncio

import pytest

from kubeoptic.controllers.base import LogStreamReadError
from kubeoptic.controllers.cluster import KubectlLogStream


class FakeProcess:
    """Stands in for an ``asyncio.subprocess.Process``."""

    def __init__(self, returncode: int = 0, stderr: bytes = b"") -> None:
        self.stdout = asyncio.StreamReader()
        self.stderr = asyncio.StreamReader()
        self.stderr.feed_data(stderr)
        self.stderr.feed_eof()
        self._exit_code = returncode
        self.returncode: int | None = None
        self.terminated = False

    def finish(self) -> None:
        self.stdout.feed_eof()
        self.returncode = self._exit_code

    async def wait(self) -> int:
        while self.returncode is None:
            await asyncio.sleep(0)
        return self.returncode

    def terminate(self) -> None:
        self.terminated = True
        self.returncode = -15

    def kill(self) -> None:
        self.returncode = -9


@pytest.mark.unit
@pytest.mark.asyncio
class TestKubectlLogStream:
    """Test KubectlLogStream.read_chunk and close."""

    async def test_complete_lines(self) -> None:
        """Test that whole lines are returned as received."""
        process = FakeProcess()
        stream = KubectlLogStream(process, "default/api")
        process.stdout.feed_data(b"one\ntwo\n")
        assert await stream.read_chunk(1.0) == "one\ntwo\n"

    async def test_partial_line_held_back(self) -> None:
        """Test that a trailing partial line waits for its newline."""
        process = FakeProcess()
        stream = KubectlLogStream(process, "default/api")
        process.stdout.feed_data(b"one\ntw")
        assert await stream.read_chunk(1.0) == "one\n"
        process.stdout.feed_data(b"o\n")
        assert await stream.read_chunk(1.0) == "two\n"

    async def test_split_multibyte_character(self) -> None:
        """Test that UTF-8 split across reads is decoded intact."""
        process = FakeProcess()
        stream = KubectlLogStream(process, "default/api")
        encoded = "café\n".encode()
        process.stdout.feed_data(encoded[:4])
        pending = asyncio.create_task(stream.read_chunk(1.0))
        await asyncio.sleep(0)
        process.stdout.feed_data(encoded[4:])
        assert await pending == "café\n"

    async def test_timeout(self) -> None:
        """Test that a quiet stream raises TimeoutError."""
        stream = KubectlLogStream(FakeProcess(), "default/api")
        with pytest.raises(asyncio.TimeoutError):
            await stream.read_chunk(0.01)

    async def test_end_of_stream_flushes_tail(self) -> None:
        """Test that the held line is returned before end of stream."""
        process = FakeProcess()
        stream = KubectlLogStream(process, "default/api")
        process.stdout.feed_data(b"last")
        process.finish()
        assert await stream.read_chunk(1.0) == "last"
        assert await stream.read_chunk(1.0) is None

    async def test_failed_exit(self) -> None:
        """Test that a non-zero exit surfaces kubectl's stderr."""
        process = FakeProcess(returncode=1, stderr=b"error: container not found\n")
        stream = KubectlLogStream(process, "default/api")
        process.finish()
        with pytest.raises(LogStreamReadError, match="container not found"):
            await stream.read_chunk(1.0)

    async def test_close_terminates(self) -> None:
        """Test that close stops the process and is idempotent."""
        process = FakeProcess()
        stream = KubectlLogStream(process, "default/api")
        await stream.close()
        await stream.close()
        assert process.terminated is True
        assert await stream.read_chunk(1.0) is None
