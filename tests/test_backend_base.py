"""Tests for backend ABCs."""

import pytest

from record_store.backends.base import Publisher, Resolver


def test_cannot_instantiate_publisher_abc():
    with pytest.raises(TypeError, match="abstract"):
        Publisher()


def test_cannot_instantiate_resolver_abc():
    with pytest.raises(TypeError, match="abstract"):
        Resolver()


def test_context_manager_closes_backend():
    class FakeResolver(Resolver):
        closed = False

        def resolve(self, encoded_key):
            return b""

        def close(self):
            self.closed = True

    with FakeResolver() as resolver:
        assert isinstance(resolver, Resolver)

    assert resolver.closed
