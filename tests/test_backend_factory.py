"""Tests for backend factories."""

from unittest.mock import patch

import pytest

from record_store.backends import FileSystemBackend, get_publisher, get_resolver
from record_store.config import StoreConfig


def _make_config(**overrides) -> StoreConfig:
    defaults = {
        "azure_subscription_id": "sub-1",
        "azure_dns_resource_group": "rg-1",
    }
    defaults.update(overrides)
    return StoreConfig(**defaults)


class TestGetPublisher:
    @patch("record_store.backends.HttpPublisher")
    def test_returns_http_publisher(self, mock_http_cls):
        config = _make_config(publish_url="https://publish.example.com", timeout=5)
        publisher = get_publisher(config)

        mock_http_cls.assert_called_once_with(url="https://publish.example.com", timeout=5)
        assert publisher is mock_http_cls.return_value

    @patch("record_store.backends.AzureDnsPublisher")
    @patch("record_store.backends._get_credential")
    def test_returns_azure_publisher(self, mock_cred, mock_azure_cls):
        config = _make_config(publisher="azure", azure_dns_zone="ipns.dev", azure_client_id="cid")
        publisher = get_publisher(config)

        mock_cred.assert_called_once_with("cid")
        mock_azure_cls.assert_called_once_with(
            credential=mock_cred.return_value,
            subscription_id="sub-1",
            resource_group="rg-1",
            zone="ipns.dev",
            domain="dns.ipns.dev",
        )
        assert publisher is mock_azure_cls.return_value

    @patch("record_store.backends.AzureDnsPublisher")
    @patch("record_store.backends._get_credential")
    def test_azure_zone_defaults_to_domain(self, mock_cred, mock_azure_cls):
        get_publisher(_make_config(publisher="azure"))

        assert mock_azure_cls.call_args.kwargs["zone"] == "dns.ipns.dev"

    def test_returns_disk_publisher(self, tmp_path):
        publisher = get_publisher(_make_config(publisher="disk", data_dir=str(tmp_path)))

        assert isinstance(publisher, FileSystemBackend)

    def test_raises_on_unknown_publisher(self):
        with pytest.raises(ValueError, match="Unknown publisher: 'ftp'"):
            get_publisher(_make_config(publisher="ftp"))

    def test_raises_when_azure_missing_subscription_id(self):
        config = _make_config(publisher="azure", azure_subscription_id=None)
        with pytest.raises(ValueError, match="AZURE_SUBSCRIPTION_ID"):
            get_publisher(config)

    def test_raises_when_azure_missing_resource_group(self):
        config = _make_config(publisher="azure", azure_dns_resource_group=None)
        with pytest.raises(ValueError, match="AZURE_DNS_RESOURCE_GROUP"):
            get_publisher(config)

    @patch("record_store.backends.AzureDnsPublisher")
    @patch("record_store.backends._get_credential")
    def test_raises_when_azure_zone_outside_domain(self, mock_cred, mock_azure_cls):
        config = _make_config(publisher="azure", azure_dns_zone="other.dev")
        with pytest.raises(ValueError, match="AZURE_DNS_ZONE 'other.dev' does not contain RECORD_STORE_DOMAIN"):
            get_publisher(config)

        mock_azure_cls.assert_not_called()

    @patch("record_store.backends.AzureDnsPublisher")
    @patch("record_store.backends._get_credential")
    def test_azure_zone_suffix_must_match_whole_labels(self, mock_cred, mock_azure_cls):
        config = _make_config(publisher="azure", domain="dns.myipns.dev", azure_dns_zone="ipns.dev")
        with pytest.raises(ValueError, match="AZURE_DNS_ZONE"):
            get_publisher(config)

    def test_raises_when_disk_missing_data_dir(self):
        with pytest.raises(ValueError, match="RECORD_STORE_DATA_DIR is required when RECORD_STORE_PUBLISHER=disk"):
            get_publisher(_make_config(publisher="disk"))

    @patch("record_store.backends.HttpPublisher")
    def test_name_override_is_case_insensitive(self, mock_http_cls):
        publisher = get_publisher(_make_config(publisher="azure"), name="HTTP")

        assert publisher is mock_http_cls.return_value


class TestGetResolver:
    @patch("record_store.backends.DohResolver")
    def test_returns_doh_resolver(self, mock_doh_cls):
        config = _make_config(resolver_url="https://dns.google/dns-query", domain="records.example.com")
        resolver = get_resolver(config)

        mock_doh_cls.assert_called_once_with(
            url="https://dns.google/dns-query",
            domain="records.example.com",
            timeout=30.0,
        )
        assert resolver is mock_doh_cls.return_value

    def test_returns_disk_resolver(self, tmp_path):
        resolver = get_resolver(_make_config(resolver="disk", data_dir=str(tmp_path)))

        assert isinstance(resolver, FileSystemBackend)

    def test_raises_on_unknown_resolver(self):
        with pytest.raises(ValueError, match="Unknown resolver: 'udp'"):
            get_resolver(_make_config(resolver="udp"))

    def test_raises_when_disk_missing_data_dir(self):
        with pytest.raises(ValueError, match="RECORD_STORE_RESOLVER=disk"):
            get_resolver(_make_config(resolver="disk"))
