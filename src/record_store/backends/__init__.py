"""Backend factories: resolve backend names to concrete implementations."""

from __future__ import annotations

from record_store.auth import get_credential as _get_credential
from record_store.backends.azure_dns import AzureDnsPublisher
from record_store.backends.base import Backend, Publisher, Resolver
from record_store.backends.disk import FileSystemBackend
from record_store.backends.doh_resolver import DohResolver
from record_store.backends.http_publisher import HttpPublisher
from record_store.config import StoreConfig

__all__ = [
    "AzureDnsPublisher",
    "Backend",
    "DohResolver",
    "FileSystemBackend",
    "HttpPublisher",
    "Publisher",
    "Resolver",
    "get_publisher",
    "get_resolver",
]


def _disk_backend(config: StoreConfig, setting: str) -> FileSystemBackend:
    if not config.data_dir:
        raise ValueError(f"RECORD_STORE_DATA_DIR is required when {setting}=disk")
    return FileSystemBackend(config.data_dir)


def get_publisher(config: StoreConfig, name: str | None = None) -> Publisher:
    """Instantiate a publisher by name.

    Args:
        config: Store configuration.
        name: Override the publisher selected in config.

    Returns:
        A configured Publisher instance.
    """
    name = (name or config.publisher).lower()

    if name == "http":
        return HttpPublisher(url=config.publish_url, timeout=config.timeout)

    if name == "azure":
        if not config.azure_subscription_id:
            raise ValueError("AZURE_SUBSCRIPTION_ID is required when RECORD_STORE_PUBLISHER=azure")
        if not config.azure_dns_resource_group:
            raise ValueError("AZURE_DNS_RESOURCE_GROUP is required when RECORD_STORE_PUBLISHER=azure")
        zone = (config.azure_dns_zone or config.domain).rstrip(".").lower()
        domain = config.domain.rstrip(".").lower()
        if domain != zone and not domain.endswith(f".{zone}"):
            raise ValueError(f"AZURE_DNS_ZONE '{zone}' does not contain RECORD_STORE_DOMAIN '{domain}'")
        return AzureDnsPublisher(
            credential=_get_credential(config.azure_client_id),
            subscription_id=config.azure_subscription_id,
            resource_group=config.azure_dns_resource_group,
            zone=zone,
            domain=config.domain,
        )

    if name == "disk":
        return _disk_backend(config, "RECORD_STORE_PUBLISHER")

    raise ValueError(f"Unknown publisher: '{name}'")


def get_resolver(config: StoreConfig, name: str | None = None) -> Resolver:
    """Instantiate a resolver by name.

    Args:
        config: Store configuration.
        name: Override the resolver selected in config.

    Returns:
        A configured Resolver instance.
    """
    name = (name or config.resolver).lower()

    if name == "doh":
        return DohResolver(url=config.resolver_url, domain=config.domain, timeout=config.timeout)

    if name == "disk":
        return _disk_backend(config, "RECORD_STORE_RESOLVER")

    raise ValueError(f"Unknown resolver: '{name}'")
