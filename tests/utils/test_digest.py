import hashlib

import pytest

from visiprint.utils.digest import ALGORITHMS, digest, parse_hex_fingerprint


def test_digest_defaults_to_sha256() -> None:
    assert digest(b"abc") == hashlib.sha256(b"abc").digest()


def test_digest_encodes_text_as_utf8() -> None:
    assert digest("héllo", "md5") == hashlib.md5("héllo".encode("utf-8")).digest()


@pytest.mark.parametrize("algorithm", ALGORITHMS)
def test_offered_algorithms_exist(algorithm: str) -> None:
    assert digest(b"", algorithm) == hashlib.new(algorithm, b"").digest()


def test_unknown_algorithm() -> None:
    with pytest.raises(ValueError):
        digest(b"abc", "not-a-hash")


@pytest.mark.parametrize(
    "text",
    ["16:27:ac:a5", "16 27 AC a5", "1627aca5", "  16-27-ac-a5\n"],
)
def test_parse_hex_fingerprint(text: str) -> None:
    assert parse_hex_fingerprint(text) == b"\x16\x27\xac\xa5"


def test_parse_empty_hex_fingerprint() -> None:
    assert parse_hex_fingerprint("") == b""


@pytest.mark.parametrize("text", ["zz", "16:2", "0x16"])
def test_parse_hex_fingerprint_invalid(text: str) -> None:
    with pytest.raises(ValueError):
        parse_hex_fingerprint(text)
