"""Command-line interface of the Simple AES Tool."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Callable, Sequence, TextIO

from saes.aes import do_aes_ecb
from saes.errors import AESError, ErrorCode, report_error

ENCRYPT_POSTFIX = "-encrypted"
DECRYPT_POSTFIX = "-decrypted"

_HELP = ("-h", "--help")
_VERSION = ("-v", "--version")
_PATH_OPTIONS = {
    "-i": ("input_path", "input"),
    "--input": ("input_path", "input"),
    "-o": ("output_path", "output"),
    "--output": ("output_path", "output"),
    "-k": ("key_path", "key"),
    "--key": ("key_path", "key"),
}
_FLAG_OPTIONS = {
    "-e": "encrypt",
    "--encrypt": "encrypt",
    "-d": "decrypt",
    "--decrypt": "decrypt",
    "-f": "force",
    "--force": "force",
    "-b": "verbose",
    "--verbose": "verbose",
    "-q": "quiet",
    "--quiet": "quiet",
}


class UsageError(Exception):
    """Raised when the command line is malformed."""


@dataclass
class Flags:
    """Mode and behaviour switches given on the command line."""

    encrypt: bool = False
    decrypt: bool = False
    verbose: bool = False
    quiet: bool = False
    force: bool = False

    def has_single_mode(self) -> bool:
        """True when exactly one of encrypt and decrypt is set."""
        return self.encrypt != self.decrypt


@dataclass
class Options:
    """The parsed command line."""

    input_path: str | None = None
    output_path: str | None = None
    key_path: str | None = None
    flags: Flags = field(default_factory=Flags)
    show_help: bool = False
    show_version: bool = False


def default_output_path(input_path: str, encrypt: bool) -> str:
    """Insert the mode postfix before the first '.' of the input path."""
    postfix = ENCRYPT_POSTFIX if encrypt else DECRYPT_POSTFIX
    stem, dot, rest = input_path.partition(".")
    return f"{stem}{postfix}{dot}{rest}"


def parse_args(argv: Sequence[str]) -> Options:
    """Parse and validate the arguments (without the program name)."""
    for arg in argv:
        if arg in _HELP:
            return Options(show_help=True)
        if arg in _VERSION:
            return Options(show_version=True)

    options = Options()
    args = iter(argv)
    for arg in args:
        if arg in _PATH_OPTIONS:
            attr, label = _PATH_OPTIONS[arg]
            value = next(args, None)
            if value is None:
                raise UsageError(f"Expected {label} file path.")
            setattr(options, attr, value)
        elif arg in _FLAG_OPTIONS:
            setattr(options.flags, _FLAG_OPTIONS[arg], True)
        else:
            raise UsageError(f'Unexpected flag "{arg}".')

    if options.flags.quiet:
        options.flags.verbose = False

    if not options.flags.has_single_mode():
        raise UsageError("Must specify either encryption (-e) or decryption (-d), but not both.")
    if options.input_path is None:
        raise UsageError("Must specify input path (-i).")
    if options.key_path is None:
        raise UsageError("Must specify key path (-k).")
    if options.output_path is not None:
        if options.output_path == options.input_path:
            raise UsageError("Output file cannot be same as input file.")
        if options.output_path == options.key_path:
            raise UsageError("Output file cannot be same as key file.")
    else:
        options.output_path = default_output_path(options.input_path, options.flags.encrypt)
    return options


def print_help(stream: TextIO | None = None) -> None:
    """Point the user at the full usage text."""
    out = stream if stream is not None else sys.stderr
    out.write("For detailed usage, use -h or --help.\n")


def print_usage(stream: TextIO | None = None) -> None:
    """Print the full usage text."""
    out = stream if stream is not None else sys.stdout
    out.write(
        "saes: Simple AES Tool\n\n"
        "A simple AES program that runs in EBC mode. Write more stuff here later.\n\n"
        "\t-v, --version\t\t\tPrint version\n"
        "\t-h, --help\t\t\tPrint this help message\n"
        "\n"
        "\t-d, --decrypt\t\t\tDecryption mode\n"
        "\t-e, --encrypt\t\t\tEncryption mode\n"
        "\t-i, --input INPUT_FILE\t\tInput file path\n"
        "\t-o, --output OUTPUT_FILE\tOutput file path\n"
        "\t-k, --key KEY_FILE\t\tKey file path\n"
        "\n"
        "\t-f, --force\t\t\tForce output file overwrite\n"
        "\t-b, --verbose\t\t\tUse verbose message printing\n"
        "\t-q, --quiet\t\t\tSuppress messsage printing, overwrites --verbose\n"
        "\n"
        "Example usage:\n"
        "\tsaes [-d/-e] -i input_file [-o output_file] -k key_file [-f]\n"
    )


def print_version(stream: TextIO | None = None) -> None:
    """Print the version line."""
    out = stream if stream is not None else sys.stdout
    out.write("Simple AES Tool version 1.0\n")


def _stdin_tokens() -> str | None:
    while True:
        line = sys.stdin.readline()
        if not line:
            return None
        tokens = line.split()
        if tokens:
            return tokens[0]


def confirm_overwrite(
    output_path: str,
    prompt_input: Callable[[], str | None] | None = None,
    stream: TextIO | None = None,
) -> bool:
    """Ask whether an existing output file may be overwritten."""
    read = prompt_input if prompt_input is not None else _stdin_tokens
    out = stream if stream is not None else sys.stderr
    out.write(f"Output file {output_path} already exists. ")
    while True:
        out.write("Overwrite? [y/n] ")
        out.flush()
        answer = read()
        if answer is None:
            out.write("Exiting program...\n")
            return False
        answer = answer.strip()
        if answer == "y":
            return True
        if answer == "n":
            out.write("Exiting program...\n")
            return False
        out.write("Unrecognized input.\n")


def _check_readable(path: str, label: str) -> None:
    try:
        with open(path, "r"):
            pass
    except FileNotFoundError:
        raise AESError(ErrorCode.FILE_NOT_OPEN, f"{label} file {path} does not exist.") from None
    except OSError:
        raise AESError(ErrorCode.FILE_NOT_OPEN, f"{label} file {path} could not be opened.") from None


def _exists(path: str) -> bool:
    try:
        with open(path, "r"):
            return True
    except OSError:
        return False


def main(argv: Sequence[str] | None = None) -> int:
    """Run the tool and return its exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print_help()
        return ErrorCode.OK

    try:
        options = parse_args(args)
    except UsageError as err:
        report_error(str(err))
        return ErrorCode.OK

    if options.show_help:
        print_usage()
        return ErrorCode.OK
    if options.show_version:
        print_version()
        return ErrorCode.OK

    assert options.input_path and options.key_path and options.output_path
    try:
        _check_readable(options.input_path, "Input")
        _check_readable(options.key_path, "Key")

        if _exists(options.output_path) and not options.flags.force:
            if not confirm_overwrite(options.output_path):
                return ErrorCode.OK
        try:
            with open(options.output_path, "w"):
                pass
        except OSError:
            raise AESError(
                ErrorCode.FILE_NOT_OPEN,
                f"Output file {options.output_path} could not be overwritten.",
            ) from None

        do_aes_ecb(options.input_path, options.output_path, options.key_path)
    except AESError as err:
        report_error(err.message)
        return err.code
    return ErrorCode.OK