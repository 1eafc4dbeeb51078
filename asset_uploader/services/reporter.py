"""Progress and failure reporting as workflow commands."""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

logger = logging.getLogger(__name__)


def escape_data(message: str) -> str:
    """Escape a message for use in a workflow command."""
    return message.replace("%", "%25").replace("\r", "%0D").replace("\n", "%0A")


def describe_error(error: Union[str, BaseException]) -> str:
    if not isinstance(error, BaseException):
        return str(error)
    message = str(error).strip()
    if message:
        return message
    return f"{type(error).__name__}: {repr(error)}"


class ActionReporter:
    """
    Implements IReporter protocol.

    ``info`` lines are printed as-is, ``debug`` and failures as ``::debug::``
    and ``::error::`` commands. Only failing exceptions reach logging, as a
    debug traceback; the stdout line is the one copy of each message.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self._stream = stream
        self.exit_code = 0
        self.failure: Optional[Union[str, BaseException]] = None

    @property
    def failed(self) -> bool:
        return self.exit_code != 0

    def info(self, message: str) -> None:
        self._write(message)

    def debug(self, message: str) -> None:
        self._write(f"::debug::{escape_data(message)}")

    def set_failed(self, error: Union[str, BaseException]) -> None:
        self.exit_code = 1
        self.failure = error
        message = describe_error(error)
        if isinstance(error, BaseException):
            logger.debug("Run failed", exc_info=error)
        self._write(f"::error::{escape_data(message)}")

    def _write(self, line: str) -> None:
        stream = self._stream or sys.stdout
        stream.write(line + "\n")
        stream.flush()
