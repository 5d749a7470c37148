"""Error types raised by the record store and its backends.

Every error carries a stable ``code`` so callers can branch on the failure
kind without matching on message text. Transport errors are chained as
``__cause__``.
"""

from __future__ import annotations


class RecordStoreError(Exception):
    """Base class for all record store failures."""

    code = "ERR_RECORD_STORE"


class InvalidKeyError(RecordStoreError, TypeError):
    """The key is not a non-empty byte buffer. Nothing was sent."""

    code = "ERR_INVALID_KEY"


class InvalidValueError(RecordStoreError, TypeError):
    """The value is not a non-empty byte buffer. Nothing was sent."""

    code = "ERR_INVALID_VALUE"


class EncodingError(RecordStoreError, ValueError):
    """The key could not be encoded to its transport form. Nothing was sent."""

    code = "ERR_ENCODING"


class PublishFailedError(RecordStoreError):
    """The write transport failed.

    The remote may or may not have received the request.
    """

    code = "ERR_PUBLISH_FAILED"


class ResolveFailedError(RecordStoreError):
    """The read transport failed or returned an unusable response."""

    code = "ERR_RESOLVE_FAILED"


class NotFoundError(RecordStoreError):
    """The lookup succeeded but no record exists for the key."""

    code = "ERR_NOT_FOUND"
