"""Shared pytest fixtures and configuration for the zkcli test suite.

Guidelines
----------
* No network access in any test.
* kazoo must be mocked at the infra boundary.
* Core tests run against :class:`MemoryStore`, an in-memory fake that
  honours the :class:`~zkcli.core.protocols.StoreClient` contract.
"""

from __future__ import annotations

import pytest

from memory_store import MemoryStore
from zkcli.core.node_operations import NodeOperations


@pytest.fixture()
def store() -> MemoryStore:
    return MemoryStore()


@pytest.fixture()
def ops(store: MemoryStore) -> NodeOperations:
    return NodeOperations(store)
