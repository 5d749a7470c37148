"""Configuration loading and validation from environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

_DEFAULT_PUBLISH_URL = "https://ipns.dev"
_DEFAULT_RESOLVER_URL = "https://cloudflare-dns.com/dns-query"
_DEFAULT_DOMAIN = "dns.ipns.dev"
_DEFAULT_TIMEOUT = 30.0


@dataclass(frozen=True)
class StoreConfig:
    """Record store configuration loaded from environment variables."""

    publisher: str = "http"
    resolver: str = "doh"
    publish_url: str = _DEFAULT_PUBLISH_URL
    resolver_url: str = _DEFAULT_RESOLVER_URL
    domain: str = _DEFAULT_DOMAIN
    timeout: float = _DEFAULT_TIMEOUT
    data_dir: str | None = None
    azure_subscription_id: str | None = None
    azure_dns_resource_group: str | None = None
    azure_dns_zone: str | None = None
    azure_client_id: str | None = None


def _parse_timeout(raw: str) -> float:
    try:
        timeout = float(raw)
    except ValueError:
        raise ValueError(f"RECORD_STORE_TIMEOUT must be a number of seconds, got: {raw!r}")
    if timeout <= 0:
        raise ValueError(f"RECORD_STORE_TIMEOUT must be positive, got: {timeout}")
    return timeout


def load_config() -> StoreConfig:
    """Load and validate record store configuration from environment variables."""
    domain = os.environ.get("RECORD_STORE_DOMAIN", _DEFAULT_DOMAIN).strip(".")
    if not domain:
        raise ValueError("RECORD_STORE_DOMAIN must not be empty")

    return StoreConfig(
        publisher=os.environ.get("RECORD_STORE_PUBLISHER", "http"),
        resolver=os.environ.get("RECORD_STORE_RESOLVER", "doh"),
        publish_url=os.environ.get("RECORD_STORE_PUBLISH_URL", _DEFAULT_PUBLISH_URL),
        resolver_url=os.environ.get("RECORD_STORE_RESOLVER_URL", _DEFAULT_RESOLVER_URL),
        domain=domain,
        timeout=_parse_timeout(os.environ.get("RECORD_STORE_TIMEOUT", str(_DEFAULT_TIMEOUT))),
        data_dir=os.environ.get("RECORD_STORE_DATA_DIR") or None,
        azure_subscription_id=os.environ.get("AZURE_SUBSCRIPTION_ID"),
        azure_dns_resource_group=os.environ.get("AZURE_DNS_RESOURCE_GROUP"),
        azure_dns_zone=os.environ.get("AZURE_DNS_ZONE"),
        azure_client_id=os.environ.get("AZURE_CLIENT_ID"),
    )
