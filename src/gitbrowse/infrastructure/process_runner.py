"""Async runner for the version-control binary.

stdout is read chunk by chunk while the child runs and stderr is drained
alongside it. The caller only sees one result, once the child has exited.
"""

from __future__ import annotations

import asyncio
import codecs
import logging
from collections.abc import Callable, Sequence

from gitbrowse.domain.errors import SubprocessFailure

logger = logging.getLogger(__name__)

CHUNK_SIZE = 64 * 1024


class ProcessRunner:
    def __init__(self, binary: str = "git", encoding: str = "utf-8") -> None:
        self.binary = binary
        self.encoding = encoding

    async def run_text(self, args: Sequence[str], cwd: str) -> str:
        """Run the binary and return its stdout decoded as text."""
        decoder = codecs.getincrementaldecoder(self.encoding)(errors="replace")
        parts: list[str] = []

        def consume(chunk: bytes) -> None:
            parts.append(decoder.decode(chunk))

        await self._run(args, cwd, consume)
        parts.append(decoder.decode(b"", final=True))
        return "".join(parts)

    async def run_bytes(self, args: Sequence[str], cwd: str) -> bytes:
        """Run the binary and return its stdout untouched."""
        buffer = bytearray()
        await self._run(args, cwd, buffer.extend)
        return bytes(buffer)

    async def _run(
        self, args: Sequence[str], cwd: str, consume: Callable[[bytes], None]
    ) -> None:
        logger.info("Running %s %s in %s", self.binary, " ".join(args), cwd)
        try:
            proc = await asyncio.create_subprocess_exec(
                self.binary,
                *args,
                cwd=cwd,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise SubprocessFailure(str(e))

        try:
            _, stderr = await asyncio.gather(
                _pump(proc.stdout, consume),
                proc.stderr.read(),
            )
        except BaseException:
            if proc.returncode is None:
                proc.kill()
            raise
        finally:
            # The child is always reaped, even when reading its output failed.
            returncode = await proc.wait()
        logger.debug("%s %s exited with %s", self.binary, args[0] if args else "", returncode)

        # Any diagnostic output counts as failure; the exit code is not consulted.
        if stderr:
            raise SubprocessFailure(stderr.decode(self.encoding, errors="replace"))


async def _pump(stream: asyncio.StreamReader, consume: Callable[[bytes], None]) -> None:
    while True:
        chunk = await stream.read(CHUNK_SIZE)
        if not chunk:
            return
        consume(chunk)
