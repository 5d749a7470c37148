"""Record store: validate, encode and dispatch record reads and writes.

Writes go to a :class:`Publisher` (e.g. an HTTP publish API) and reads to a
:class:`Resolver` (e.g. public DNS over HTTPS).
"""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Self

from record_store.backends import Publisher, Resolver, get_publisher, get_resolver
from record_store.config import StoreConfig
from record_store.errors import EncodingError, InvalidKeyError, InvalidValueError
from record_store.keys import KeyKind, classify_key, encode_key, is_buffer, query_name
from record_store.models import PublishRequest

logger = logging.getLogger(__name__)


class RecordStore:
    """Uniform put/get over a publisher and a resolver.

    Holds no mutable state of its own, so one instance can serve concurrent
    callers. Every call makes at most one backend request and nothing is
    retried.
    """

    def __init__(self, publisher: Publisher, resolver: Resolver, domain: str | None = None) -> None:
        self._publisher = publisher
        self._resolver = resolver
        self._domain = domain

    def put(self, key: bytes, value: bytes) -> None:
        """Publish ``value`` under ``key``.

        Public-key records (``/pk/...``) are self-contained and are accepted
        without contacting any backend.

        Raises:
            InvalidKeyError: ``key`` is not a non-empty byte buffer.
            InvalidValueError: ``value`` is not a non-empty byte buffer.
            EncodingError: ``key`` could not be encoded, or its query name is too long for the domain.
            PublishFailedError: The publisher rejected or never acknowledged the record.
        """
        if not is_buffer(key):
            raise InvalidKeyError("Record key must be a non-empty byte buffer")
        if classify_key(key) is KeyKind.PUBLIC_KEY:
            logger.debug("Skipping publish of public key record")
            return
        if not is_buffer(value):
            raise InvalidValueError("Record value must be a non-empty byte buffer")

        encoded = _encode(key)
        if self._domain:
            # Refuse records that could never be resolved under the domain
            query_name(encoded, self._domain)
        self._publisher.publish(PublishRequest.build(encoded, value))
        logger.info("Published record %s", encoded)

    def get(self, key: bytes) -> bytes:
        """Return the record stored under ``key``.

        Raises:
            InvalidKeyError: ``key`` is not a non-empty byte buffer.
            EncodingError: ``key`` could not be encoded, or its query name is too long for the domain.
            NotFoundError: No record exists for ``key``.
            ResolveFailedError: The lookup failed.
        """
        if not is_buffer(key):
            raise InvalidKeyError("Record key must be a non-empty byte buffer")

        encoded = _encode(key)
        start = time.monotonic()
        record = self._resolver.resolve(encoded)
        logger.debug("Resolved %s in %.0fms", encoded, (time.monotonic() - start) * 1000)
        return record

    async def put_async(self, key: bytes, value: bytes) -> None:
        """Run :meth:`put` on a worker thread."""
        await asyncio.to_thread(self.put, key, value)

    async def get_async(self, key: bytes) -> bytes:
        """Run :meth:`get` on a worker thread."""
        return await asyncio.to_thread(self.get, key)

    def close(self) -> None:
        """Close the publisher and resolver."""
        self._publisher.close()
        if self._resolver is not self._publisher:
            self._resolver.close()

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


def _encode(key: bytes) -> str:
    try:
        return encode_key(key)
    except Exception as exc:
        logger.error("Encoding record key failed: %s", exc)
        raise EncodingError(f"Cannot encode record key: {exc}") from exc


def open_store(config: StoreConfig) -> RecordStore:
    """Build a RecordStore from the backends named in ``config``."""
    publisher = get_publisher(config)
    try:
        resolver = get_resolver(config)
    except Exception:
        publisher.close()
        raise
    return RecordStore(publisher, resolver, domain=config.domain)
