"""Caller side helpers for obtaining the bytes to fingerprint.

The walk itself never hashes anything; these helpers exist for the CLI and
the viewer app, which start from user text, files or printed fingerprints.
"""

import hashlib
import re
from typing import List, Union

DEFAULT_ALGORITHM = "sha256"

# Digests offered to users; hashlib may support more
ALGORITHMS: List[str] = ["md5", "sha1", "sha256", "sha512", "blake2b", "blake2s"]

_HEX_SEPARATORS = re.compile(r"[\s:\-]")
_HEX_DIGITS = re.compile(r"^[0-9a-fA-F]*$")


def digest(data: Union[str, bytes], algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Hash ``data`` (text is UTF-8 encoded) with a ``hashlib`` algorithm.

    Raises:
        ValueError: If ``algorithm`` is unknown to ``hashlib``.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    try:
        hasher = hashlib.new(algorithm)
    except ValueError as e:
        raise ValueError(f"Unknown digest algorithm: {algorithm}") from e
    hasher.update(data)
    return hasher.digest()


def parse_hex_fingerprint(text: str) -> bytes:
    """Decode ``aa:bb:cc``, ``aa bb cc`` or ``aabbcc`` style fingerprints.

    Raises:
        ValueError: On non-hex characters or an odd number of digits.
    """
    digits = _HEX_SEPARATORS.sub("", text)
    if not _HEX_DIGITS.match(digits):
        raise ValueError(f"Not a hex fingerprint: {text!r}")
    if len(digits) % 2:
        raise ValueError(f"Hex fingerprint has an odd number of digits: {text!r}")
    return bytes.fromhex(digits)
