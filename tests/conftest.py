"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from contentreg import ContentRegistry, InvocationContext, RegistrySettings


@pytest.fixture
def registry():
    """Fresh ContentRegistry with default in-memory storage."""
    return ContentRegistry(settings=RegistrySettings(_env_file=None))


@pytest.fixture
def alice():
    return InvocationContext(acting_principal="alice", ordering_index=100)


@pytest.fixture
def bob():
    return InvocationContext(acting_principal="bob", ordering_index=101)


@pytest.fixture
def doc_fields():
    """Valid (name, size, description, labels) tuple."""
    return ("doc.pdf", 1024, "desc", ["a", "b"])


@pytest.fixture
def registered(registry, alice, doc_fields):
    """Id of a record registered by alice."""
    return registry.register(alice, *doc_fields).unwrap()
