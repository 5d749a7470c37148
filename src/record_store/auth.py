"""Azure credential used by the Azure DNS publisher."""

from __future__ import annotations

from azure.identity import DefaultAzureCredential

_credential: DefaultAzureCredential | None = None


def get_credential(client_id: str | None = None) -> DefaultAzureCredential:
    """Return a process-wide DefaultAzureCredential.

    ``client_id`` selects a user-assigned managed identity. It only takes
    effect on the first call, which creates the cached credential.
    """
    global _credential
    if _credential is None:
        if client_id:
            _credential = DefaultAzureCredential(managed_identity_client_id=client_id)
        else:
            _credential = DefaultAzureCredential()
    return _credential
