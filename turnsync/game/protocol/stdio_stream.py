"""Player stream over the process's standard input and output."""

import asyncio
import sys
from typing import List, Optional, TextIO

from absl import logging

# Upper bound on a single protocol line; request payloads can exceed the
# StreamReader default of 64 KiB.
READ_LIMIT = 16 * 1024 * 1024


class StdioPlayerStream:
    """Reads protocol chunks from a byte reader and writes choices as lines.

    A chunk is a run of non-empty lines terminated by a blank line or by end
    of input. Each choice is written on its own line and flushed immediately.
    """

    def __init__(self, reader: asyncio.StreamReader, output: TextIO) -> None:
        """Initialize the stream.

        Args:
            reader: Source of protocol bytes (UTF-8)
            output: Text sink that receives one choice per line
        """
        self._reader = reader
        self._output = output
        self._closed = False

    @classmethod
    async def from_stdio(cls) -> "StdioPlayerStream":
        """Create a stream bound to sys.stdin and sys.stdout."""
        loop = asyncio.get_running_loop()
        reader = asyncio.StreamReader(limit=READ_LIMIT)
        protocol = asyncio.StreamReaderProtocol(reader)
        await loop.connect_read_pipe(lambda: protocol, sys.stdin)
        return cls(reader, sys.stdout)

    @property
    def is_closed(self) -> bool:
        return self._closed

    async def read(self) -> Optional[str]:
        """Return the next chunk, or None once input is exhausted."""
        if self._closed:
            return None

        lines: List[str] = []
        while True:
            raw = await self._reader.readline()
            if not raw:
                self._closed = True
                logging.info("[StdioPlayerStream] End of input")
                return "\n".join(lines) if lines else None

            line = raw.decode("utf-8").rstrip("\r\n")
            if line:
                lines.append(line)
            elif lines:
                return "\n".join(lines)

    async def write(self, choice: str) -> None:
        """Write one choice followed by a newline."""
        self._output.write(f"{choice}\n")
        self._output.flush()
