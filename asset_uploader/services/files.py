"""Local file access: size lookup and streamed reads."""
from __future__ import annotations

import asyncio
import os
from typing import BinaryIO

CHUNK_SIZE = 64 * 1024  # 64KB chunks


class FileStream:
    """
    Async byte iterator over an open file.

    Reads run in the thread pool so the event loop is never blocked. The
    file is closed once exhausted or on ``aclose()``.
    """

    def __init__(self, handle: BinaryIO, chunk_size: int = CHUNK_SIZE):
        self._handle = handle
        self._chunk_size = chunk_size

    @property
    def closed(self) -> bool:
        return self._handle.closed

    def __aiter__(self):
        return self

    async def __anext__(self) -> bytes:
        if self._handle.closed:
            raise StopAsyncIteration
        chunk = await asyncio.to_thread(self._handle.read, self._chunk_size)
        if not chunk:
            await self.aclose()
            raise StopAsyncIteration
        return chunk

    async def aclose(self) -> None:
        if not self._handle.closed:
            await asyncio.to_thread(self._handle.close)


class LocalFileSystem:
    """Implements IFileSystem protocol on the local disk."""

    def __init__(self, chunk_size: int = CHUNK_SIZE):
        self._chunk_size = chunk_size

    async def size(self, path: str) -> int:
        stat = await asyncio.to_thread(os.stat, path)
        return stat.st_size

    async def open(self, path: str) -> FileStream:
        handle = await asyncio.to_thread(open, path, "rb")
        return FileStream(handle, self._chunk_size)
