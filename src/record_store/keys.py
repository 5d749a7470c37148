"""Record key handling: namespace classification, base32 encoding, query names."""

from __future__ import annotations

import base64
import binascii
import enum

import dns.exception
import dns.name

from record_store.errors import EncodingError

PUBLIC_KEY_PREFIX = b"/pk/"

# DNS label length limit (RFC 1035 §2.3.4)
_MAX_LABEL_LEN = 63


class KeyKind(enum.Enum):
    """Namespace a record key belongs to."""

    PUBLIC_KEY = "pk"
    NAMED = "named"


def is_buffer(data: object) -> bool:
    """Return True if ``data`` is a non-empty byte buffer."""
    return isinstance(data, (bytes, bytearray, memoryview)) and len(data) > 0


def classify_key(key: bytes) -> KeyKind:
    """Classify a key by its namespace prefix."""
    if bytes(key).startswith(PUBLIC_KEY_PREFIX):
        return KeyKind.PUBLIC_KEY
    return KeyKind.NAMED


def encode_key(key: bytes) -> str:
    """Encode key bytes as lowercase, unpadded RFC 4648 base32."""
    return base64.b32encode(bytes(key)).decode("ascii").rstrip("=").lower()


def decode_key(encoded: str) -> bytes:
    """Invert :func:`encode_key`. Accepts either letter case."""
    padding = "=" * (-len(encoded) % 8)
    try:
        return base64.b32decode(encoded.upper() + padding)
    except (binascii.Error, ValueError) as exc:
        raise EncodingError(f"Not a base32 record key: {encoded!r}") from exc


def split_labels(encoded: str, max_label_len: int = _MAX_LABEL_LEN) -> list[str]:
    """Split an encoded key into DNS-sized labels."""
    return [encoded[i : i + max_label_len] for i in range(0, len(encoded), max_label_len)]


def query_name(encoded: str, domain: str) -> dns.name.Name:
    """Build the absolute DNS name a record is resolved at.

    Raises:
        EncodingError: If the resulting name exceeds DNS length limits.
    """
    if not encoded:
        raise EncodingError("Encoded key is empty")
    text = ".".join([*split_labels(encoded), domain.strip(".")])
    try:
        return dns.name.from_text(text)
    except dns.exception.DNSException as exc:
        raise EncodingError(f"Cannot build query name for key '{encoded}' under '{domain}'") from exc
