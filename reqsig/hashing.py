"""
SHA-256 and HMAC-SHA256 helpers.

Raw digests feed the signing-key chain; hex forms are what ends up on the
wire (payload hash, canonical request hash, final signature).
"""
import hashlib
import hmac
from typing import Iterable, Union

Bytes = Union[bytes, bytearray, str]


def _to_bytes(value: Bytes) -> bytes:
    if isinstance(value, str):
        return value.encode('utf-8')
    return bytes(value)


def bytes_to_hex(data: Iterable[int]) -> str:
    """
    Hex-encode a byte sequence, two lower-case characters per byte.

    Accepts signed byte values (-128..-1) as produced by some runtimes and
    folds them to their unsigned 0..255 form first.
    """
    out = []
    for b in data:
        b = int(b)
        if not -128 <= b <= 255:
            raise ValueError(f"Not a byte value: {b}")
        out.append(format(b & 0xFF, '02x'))
    return ''.join(out)


def sha256_hex(content: Bytes) -> str:
    return hashlib.sha256(_to_bytes(content)).hexdigest()


def hmac_sha256(message: Bytes, key: Bytes) -> bytes:
    """HMAC-SHA256 of ``message`` under ``key``, as raw bytes."""
    return hmac.new(_to_bytes(key), _to_bytes(message), hashlib.sha256).digest()


def hmac_sha256_hex(message: Bytes, key: Bytes) -> str:
    return bytes_to_hex(hmac_sha256(message, key))
