"""Shared test fixtures for dns-record-store."""

import record_store.auth as _auth


def pytest_runtest_setup(item):
    """Reset module-level caches between tests."""
    _auth._credential = None
