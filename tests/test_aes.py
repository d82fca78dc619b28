import io

import pytest

from saes.aes import do_aes_ecb, find_round_count
from saes.errors import AESError, ErrorCode


def _key(tmp_path, size):
    path = tmp_path / "key.bin"
    path.write_bytes(b"\x00" * size)
    return str(path)


@pytest.mark.parametrize("size, rounds", [(16, 10), (24, 12), (32, 14)])
def test_round_count_by_key_size(tmp_path, size, rounds):
    assert find_round_count(_key(tmp_path, size)) == rounds


@pytest.mark.parametrize("size", [0, 5, 17, 31, 33])
def test_invalid_key_length(tmp_path, size):
    with pytest.raises(AESError) as info:
        find_round_count(_key(tmp_path, size))
    assert info.value.code is ErrorCode.KEY_INVALID_LEN
    assert f"actually {size} bytes" in info.value.message


def test_missing_key_file(tmp_path):
    missing = str(tmp_path / "nothing.bin")
    with pytest.raises(AESError) as info:
        find_round_count(missing)
    assert info.value.code is ErrorCode.FILE_NOT_OPEN
    assert info.value.message == f"Key file {missing} does not exist."


def test_key_path_is_directory(tmp_path):
    with pytest.raises(AESError) as info:
        find_round_count(str(tmp_path))
    assert info.value.code is ErrorCode.FILE_NOT_OPEN


def test_do_aes_ecb_reports_rounds(tmp_path):
    key = _key(tmp_path, 32)
    stream = io.StringIO()
    rounds = do_aes_ecb("in.txt", "out.txt", key, stream)
    text = stream.getvalue()
    assert rounds == 14
    assert "Input: in.txt\nOutput: out.txt\n" in text
    assert text.endswith("Round count: 14\n")


def test_do_aes_ecb_propagates_key_error(tmp_path):
    key = _key(tmp_path, 3)
    stream = io.StringIO()
    with pytest.raises(AESError) as info:
        do_aes_ecb("in.txt", "out.txt", key, stream)
    assert info.value.code is ErrorCode.KEY_INVALID_LEN
    assert "Round count" not in stream.getvalue()