"""Follow-mode log stream backed by a ``kubectl logs -f`` subprocess."""

from __future__ import annotations

import asyncio
import codecs
import logging
from contextlib import suppress

from kubeoptic.constants.limits import LOG_READ_BYTES
from kubeoptic.constants.timeouts import STREAM_CLOSE_TIMEOUT
from kubeoptic.controllers.base import LogStream, LogStreamOpenError, LogStreamReadError

logger = logging.getLogger(__name__)


class KubectlLogStream(LogStream):
    """Reads a running ``kubectl logs -f`` process in line-aligned chunks.

    A read returns only complete lines; a trailing partial line is held back
    until its newline arrives or the stream ends.
    """

    def __init__(self, process: asyncio.subprocess.Process, identity: str) -> None:
        self._process = process
        self._identity = identity
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending = ""
        self._eof = False
        self._closed = False

    @classmethod
    async def spawn(cls, command: list[str], identity: str) -> KubectlLogStream:
        """Start ``command`` and wrap its stdout.

        Raises:
            LogStreamOpenError: kubectl could not be started.
        """
        logger.debug("Opening log stream for %s: %s", identity, " ".join(command))
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise LogStreamOpenError(f"cannot start kubectl: {exc}") from exc
        return cls(process, identity)

    @property
    def identity(self) -> str:
        return self._identity

    async def read_chunk(self, timeout: float) -> str | None:
        if self._closed or self._eof:
            return None
        stdout = self._process.stdout
        if stdout is None:
            raise LogStreamReadError(f"{self._identity}: stream has no output pipe")

        while True:
            data = await asyncio.wait_for(stdout.read(LOG_READ_BYTES), timeout)
            if not data:
                return await self._finish()
            text = self._pending + self._decoder.decode(data)
            complete, newline, self._pending = text.rpartition("\n")
            if newline:
                return complete + newline

    async def _finish(self) -> str | None:
        """Handle end of output: flush the held line, then report exit status."""
        self._eof = True
        tail = self._pending + self._decoder.decode(b"", final=True)
        self._pending = ""
        returncode = await self._process.wait()
        if returncode != 0:
            stderr = b""
            if self._process.stderr is not None:
                stderr = await self._process.stderr.read()
            message = stderr.decode("utf-8", errors="replace").strip()
            logger.warning("kubectl logs for %s exited with %s", self._identity, returncode)
            raise LogStreamReadError(
                f"{self._identity}: {message or f'kubectl exited with {returncode}'}"
            )
        return tail or None

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._process.returncode is None:
            with suppress(ProcessLookupError):
                self._process.terminate()
            try:
                await asyncio.wait_for(self._process.wait(), STREAM_CLOSE_TIMEOUT)
            except asyncio.TimeoutError:
                with suppress(ProcessLookupError):
                    self._process.kill()
                await self._process.wait()
        logger.debug("Closed log stream for %s", self._identity)
