"""Abstract base classes for record backends."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Self

from record_store.models import PublishRequest


class Backend(ABC):
    """Common lifecycle for publishers and resolvers."""

    def close(self) -> None:
        """Release resources. Override in subclasses that hold open connections."""

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


class Publisher(Backend):
    """Interface for backends that make records resolvable."""

    @abstractmethod
    def publish(self, request: PublishRequest) -> None:
        """Publish a single record.

        Args:
            request: Encoded key and base64 record to publish.

        Raises:
            PublishFailedError: If the backend did not accept the record.
        """


class Resolver(Backend):
    """Interface for backends that look records up by encoded key."""

    @abstractmethod
    def resolve(self, encoded_key: str) -> bytes:
        """Return the record bytes stored under ``encoded_key``.

        Args:
            encoded_key: Base32 record key (see ``record_store.keys.encode_key``).

        Raises:
            NotFoundError: If no record exists for the key.
            ResolveFailedError: If the lookup itself failed.
        """
