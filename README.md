# saes

Simple AES Tool: a small command-line program that checks the files for an AES
run in ECB mode. It parses the command line, checks that the input and key
files can be opened, works out the round count from the key file's size, and
prepares the output file.

## Installation

```
pip install .
```

## Usage

```
saes [-d/-e] -i input_file [-o output_file] -k key_file [-f]
```

Options:

| Flag | Meaning |
| --- | --- |
| `-v`, `--version` | Print version |
| `-h`, `--help` | Print the help message |
| `-d`, `--decrypt` | Decryption mode |
| `-e`, `--encrypt` | Encryption mode |
| `-i`, `--input INPUT_FILE` | Input file path |
| `-o`, `--output OUTPUT_FILE` | Output file path |
| `-k`, `--key KEY_FILE` | Key file path |
| `-f`, `--force` | Overwrite an existing output file without asking |
| `-b`, `--verbose` | Verbose flag (accepted and recorded) |
| `-q`, `--quiet` | Quiet flag; clears `--verbose` |

Running `saes` with no arguments prints a hint to use `--help`. If `-h` or
`-v` appears anywhere on the command line, the usage text or the version line
is printed and nothing else happens.

Exactly one of `-e` and `-d` must be given, along with `-i` and `-k`. The
output path may not be the same as the input or key path. The key file must be
16, 24 or 32 bytes long, which selects 10, 12 or 14 rounds.

If no output path is given, one is built from the input path by inserting
`-encrypted` or `-decrypted` before the first `.`:

```
saes -e -i notes.txt -k key.bin      # output path notes-encrypted.txt
saes -d -i notes-encrypted.txt -k key.bin -o plain.txt
```

If the output file already exists, `saes` asks `Overwrite? [y/n]` on standard
error unless `-f` is given; answering `n` (or reaching end of input) stops the
program.

Messages go to standard error, prefixed with `ERROR: ` for failures. Command
line mistakes exit with status 0; file failures exit with the negative code of
`saes.errors.ErrorCode` (`FILE_NOT_OPEN` is -1, `KEY_INVALID_LEN` is -3).

## Library use

```python
from saes.aes import find_round_count
from saes.cli import default_output_path, parse_args

find_round_count("key.bin")                     # 10, 12 or 14
default_output_path("notes.txt", encrypt=True)  # "notes-encrypted.txt"
options = parse_args(["-e", "-i", "notes.txt", "-k", "key.bin"])
options.output_path                             # "notes-encrypted.txt"
```

`parse_args` raises `saes.cli.UsageError` for a malformed command line. File
and key failures are raised as `saes.errors.AESError`, which carries an
`ErrorCode` in `code` and the text in `message`; `saes.errors.describe_error`
gives the generic text for a code.

## What it does not do

`saes` does not encrypt or decrypt anything. The AES step
(`saes.aes.do_aes_ecb`) only reports the paths and the round count on standard
error; the output file is created, or truncated to empty, and nothing is
written to it. The `--verbose` and `--quiet` flags are parsed but change no
output.

## Running the tests

```
pip install .[test]
pytest
```