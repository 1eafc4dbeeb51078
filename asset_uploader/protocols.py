"""
Protocols (Interfaces) for Dependency Inversion.

The orchestrator only sees these small capabilities, so each one can be
replaced by a fake in tests.
"""
from typing import Any, AsyncIterator, List, Protocol, Union, runtime_checkable

from .models import UploadRequest


@runtime_checkable
class IInputSource(Protocol):
    """Interface for named input lookup."""

    def get(self, name: str) -> str:
        """Return the input value, or an empty string when unset."""
        ...


@runtime_checkable
class IFileMatcher(Protocol):
    """Interface for pattern resolution."""

    async def glob(self, pattern: str) -> List[str]:
        """Resolve a pattern to an ordered list of file paths."""
        ...


@runtime_checkable
class IByteStream(Protocol):
    """Interface for a readable byte stream used as a request body."""

    def __aiter__(self) -> AsyncIterator[bytes]:
        ...

    async def aclose(self) -> None:
        ...


@runtime_checkable
class IFileSystem(Protocol):
    """Interface for file metadata and streaming reads."""

    async def size(self, path: str) -> int:
        """Return byte length of the file."""
        ...

    async def open(self, path: str) -> IByteStream:
        """Open the file as a readable byte stream."""
        ...


@runtime_checkable
class IHTTPClient(Protocol):
    """Interface for the authenticated HTTP client."""

    async def __aenter__(self) -> "IHTTPClient":
        ...

    async def __aexit__(self, *args) -> None:
        ...

    async def request(self, upload: UploadRequest) -> Any:
        """Send the request, raising on failure."""
        ...


@runtime_checkable
class IReporter(Protocol):
    """Interface for progress logging and terminal failure reporting."""

    def info(self, message: str) -> None:
        ...

    def debug(self, message: str) -> None:
        ...

    def set_failed(self, error: Union[str, BaseException]) -> None:
        ...
