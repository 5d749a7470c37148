"""DNS-over-HTTPS resolver: look records up as TXT answers (RFC 8484)."""

from __future__ import annotations

import base64
import binascii
import logging

import dns.exception
import dns.message
import dns.rcode
import dns.rdatatype
import httpx

from record_store.backends.base import Resolver
from record_store.errors import NotFoundError, ResolveFailedError
from record_store.keys import query_name

logger = logging.getLogger(__name__)

_DNS_MESSAGE = "application/dns-message"


def build_query(encoded_key: str, domain: str) -> dns.message.QueryMessage:
    """Build the TXT query for a record key, recursion desired."""
    query = dns.message.make_query(query_name(encoded_key, domain), dns.rdatatype.TXT)
    # RFC 8484 §4.1: ID 0 keeps GET requests cache friendly
    query.id = 0
    return query


def extract_record(response: dns.message.Message) -> bytes:
    """Return the record carried by the first TXT answer in ``response``.

    TXT records longer than 255 bytes are split into several character
    strings; they are joined before decoding.
    """
    rcode = response.rcode()
    if rcode == dns.rcode.NXDOMAIN:
        raise NotFoundError("Record not found (NXDOMAIN)")
    if rcode != dns.rcode.NOERROR:
        raise ResolveFailedError(f"Resolver answered {dns.rcode.to_text(rcode)}")

    for rrset in response.answer:
        if rrset.rdtype != dns.rdatatype.TXT or not rrset:
            continue
        payload = b"".join(next(iter(rrset)).strings)
        try:
            record = base64.b64decode(payload, validate=True)
        except binascii.Error as exc:
            raise ResolveFailedError("TXT answer is not a base64 record") from exc
        if not record:
            raise NotFoundError("Record not found (empty TXT answer)")
        return record

    raise NotFoundError("Record not found (no TXT answer)")


class DohResolver(Resolver):
    """Resolver that queries a DNS-over-HTTPS endpoint in wire format."""

    def __init__(
        self,
        url: str,
        domain: str,
        timeout: float = 30,
        _http_client: httpx.Client | None = None,
    ) -> None:
        self._url = url
        self._domain = domain
        self._client = _http_client or httpx.Client(
            headers={"Accept": _DNS_MESSAGE},
            timeout=timeout,
        )

    def resolve(self, encoded_key: str) -> bytes:
        query = build_query(encoded_key, self._domain)
        param = base64.urlsafe_b64encode(query.to_wire()).rstrip(b"=").decode("ascii")

        try:
            resp = self._client.get(
                self._url,
                params={"dns": param},
                headers={"Accept": _DNS_MESSAGE},
            )
            resp.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error("DoH query for %s via %s failed: %s", query.question[0].name, self._url, exc)
            raise ResolveFailedError(f"DoH query for key '{encoded_key}' failed: {exc}") from exc

        try:
            response = dns.message.from_wire(resp.content)
        except dns.exception.DNSException as exc:
            logger.error("Malformed DoH response from %s: %s", self._url, exc)
            raise ResolveFailedError(f"Malformed DNS response for key '{encoded_key}'") from exc

        try:
            return extract_record(response)
        except NotFoundError:
            logger.warning("No record for %s at %s", encoded_key, self._url)
            raise

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()
