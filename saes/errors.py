"""Error codes and error reporting for the AES tool."""

from __future__ import annotations

import sys
from enum import IntEnum
from typing import TextIO

ERROR_PREFIX = "ERROR: "


class ErrorCode(IntEnum):
    """Exit codes used by the tool."""

    OK = 0
    FILE_NOT_OPEN = -1
    FILE_NOT_WRITE = -2
    KEY_INVALID_LEN = -3


_DESCRIPTIONS = {
    ErrorCode.FILE_NOT_OPEN: "File could not be opened, or does not exist.",
    ErrorCode.FILE_NOT_WRITE: "Could not overwrite file.",
    ErrorCode.KEY_INVALID_LEN: "Key file must be 128/192/256 bits.",
}


class AESError(Exception):
    """A failure that carries one of the tool's error codes."""

    def __init__(self, code: ErrorCode, message: str | None = None) -> None:
        self.code = ErrorCode(code)
        self.message = message if message is not None else describe_error(self.code) or ""
        super().__init__(self.message)


def describe_error(code: ErrorCode | int) -> str | None:
    """Return the generic description of an error code, or None for OK."""
    return _DESCRIPTIONS.get(ErrorCode(code))


def report_error(message: str, stream: TextIO | None = None) -> None:
    """Write a prefixed error message line to the stream (stderr by default)."""
    out = stream if stream is not None else sys.stderr
    out.write(f"{ERROR_PREFIX}{message}\n")