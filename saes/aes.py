"""Key inspection and the ECB processing entry point."""

from __future__ import annotations

import os
import sys
from typing import TextIO

from saes.errors import AESError, ErrorCode

_ROUNDS_BY_KEY_SIZE = {16: 10, 24: 12, 32: 14}


def find_round_count(key_path: str) -> int:
    """Return the AES round count implied by the key file's size."""
    try:
        with open(key_path, "rb") as key_file:
            key_file.seek(0, os.SEEK_END)
            size = key_file.tell()
    except FileNotFoundError:
        raise AESError(ErrorCode.FILE_NOT_OPEN, f"Key file {key_path} does not exist.") from None
    except OSError:
        raise AESError(ErrorCode.FILE_NOT_OPEN, f"Key file {key_path} could not be opened.") from None

    try:
        return _ROUNDS_BY_KEY_SIZE[size]
    except KeyError:
        raise AESError(
            ErrorCode.KEY_INVALID_LEN,
            f"Key file must be 16/24/32 bytes long, but is actually {size} bytes.",
        ) from None


def do_aes_ecb(input_path: str, output_path: str, key_path: str, stream: TextIO | None = None) -> int:
    """Run the ECB process for the given files and return the round count."""
    out = stream if stream is not None else sys.stderr
    out.write(
        "Doing AES process in ECB mode with..\n"
        f"Input: {input_path}\nOutput: {output_path}\nKey: {key_path}\n"
    )
    round_count = find_round_count(key_path)
    out.write(f"Round count: {round_count}\n")
    return round_count