"""Azure DNS publisher: write records as TXT record sets via azure-mgmt-dns."""

from __future__ import annotations

import logging

from azure.core.exceptions import AzureError
from azure.mgmt.dns import DnsManagementClient
from azure.mgmt.dns.models import RecordSet, TxtRecord

from record_store.backends.base import Publisher
from record_store.backends.util import relative_record_name, split_txt_value
from record_store.errors import PublishFailedError
from record_store.keys import query_name
from record_store.models import PublishRequest

logger = logging.getLogger(__name__)

_RECORD_TTL = 60


class AzureDnsPublisher(Publisher):
    """Publisher that serves records straight from an Azure DNS zone."""

    def __init__(
        self,
        credential,
        subscription_id: str,
        resource_group: str,
        zone: str,
        domain: str,
        _dns_client: DnsManagementClient | None = None,
    ) -> None:
        self._resource_group = resource_group
        self._zone = zone
        self._domain = domain
        self._dns_client = _dns_client or DnsManagementClient(credential, subscription_id)

    def publish(self, request: PublishRequest) -> None:
        fqdn = query_name(request.key, self._domain).to_text(omit_final_dot=True)
        relative = relative_record_name(fqdn, self._zone)
        record_set = RecordSet(
            ttl=_RECORD_TTL,
            txt_records=[TxtRecord(value=split_txt_value(request.record))],
        )
        try:
            self._dns_client.record_sets.create_or_update(
                resource_group_name=self._resource_group,
                zone_name=self._zone,
                relative_record_set_name=relative,
                record_type="TXT",
                parameters=record_set,
            )
        except AzureError as exc:
            logger.error("Publishing %s to Azure DNS zone %s failed: %s", relative, self._zone, exc)
            raise PublishFailedError(f"Publishing key '{request.key}' to Azure DNS failed: {exc}") from exc
        logger.info("Upserted TXT record %s in Azure DNS zone %s", relative, self._zone)

    def close(self) -> None:
        self._dns_client.close()
