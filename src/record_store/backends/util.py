"""Helpers shared by DNS-backed record backends."""

from __future__ import annotations

# Maximum length of a single TXT character-string (RFC 1035 §3.3)
_MAX_TXT_STRING = 255


def relative_record_name(fqdn: str, zone: str) -> str:
    """Strip the zone suffix from a fully qualified record name.

    Args:
        fqdn: Fully qualified record name (e.g. "abc.dns.example.com").
        zone: DNS zone the record lives in (e.g. "example.com").

    Returns:
        The name relative to the zone (e.g. "abc.dns").
    """
    fqdn = fqdn.rstrip(".").lower()
    zone = zone.rstrip(".").lower()
    suffix = f".{zone}"
    if not fqdn.endswith(suffix):
        raise ValueError(f"Record '{fqdn}' is not under zone '{zone}'")
    return fqdn.removesuffix(suffix)


def split_txt_value(value: str, size: int = _MAX_TXT_STRING) -> list[str]:
    """Split a TXT payload into character-strings no longer than ``size``."""
    return [value[i : i + size] for i in range(0, len(value), size)] or [""]
