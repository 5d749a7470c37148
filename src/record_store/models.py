"""Data classes sent to record publishing backends."""

from __future__ import annotations

from base64 import b64decode, b64encode
from dataclasses import dataclass


@dataclass(frozen=True)
class PublishRequest:
    """Body of a record publish call.

    ``key`` is the base32 record key and ``record`` the base64 record bytes.
    ``subdomain`` asks the publish service to serve the record under
    ``<key>.<domain>``.
    """

    key: str
    record: str
    subdomain: bool = True

    @classmethod
    def build(cls, encoded_key: str, value: bytes) -> PublishRequest:
        return cls(key=encoded_key, record=b64encode(bytes(value)).decode("ascii"))

    @property
    def record_bytes(self) -> bytes:
        return b64decode(self.record)

    def to_dict(self) -> dict:
        return {
            "key": self.key,
            "record": self.record,
            "subdomain": self.subdomain,
        }

    @classmethod
    def from_dict(cls, data: dict) -> PublishRequest:
        return cls(
            key=data["key"],
            record=data["record"],
            subdomain=data.get("subdomain", True),
        )
