"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols — never on concrete
implementations — preserving the dependency inversion principle.
"""

from __future__ import annotations

from typing import Protocol

from zkcli.core.models import NodeSnapshot


class StoreClient(Protocol):
    """Contract for single-node primitives of a coordination store.

    Any object that implements these methods with the correct
    signatures satisfies this protocol structurally (no explicit
    inheritance required).  Implementations must map all
    backend-specific exceptions to
    :class:`~zkcli.exceptions.ZkCliError` subclasses, and any of them
    may raise :class:`~zkcli.exceptions.ConnectivityError` or
    :class:`~zkcli.exceptions.AccessDeniedError`.
    """

    def exists(self, path: str) -> bool:
        """Return whether a node exists at *path*."""
        ...  # pragma: no cover

    def read(self, path: str) -> NodeSnapshot:
        """Return the data and current version of *path*.

        Raises
        ------
        NodeNotFoundError
            When the node does not exist.
        """
        ...  # pragma: no cover

    def write(self, path: str, data: bytes, expected_version: int) -> int:
        """Replace the data of *path* and return the node's new version.

        *expected_version* of :data:`~zkcli.core.models.ANY_VERSION`
        skips the version check.

        Raises
        ------
        VersionConflictError
            When *expected_version* does not match the node.
        NodeNotFoundError
            When the node does not exist.
        """
        ...  # pragma: no cover

    def create_node(self, path: str, data: bytes) -> str:
        """Create *path* holding *data* and return the created path.

        Raises
        ------
        NodeExistsError
            When a node already exists at *path*.
        NoParentError
            When the parent of *path* does not exist.
        """
        ...  # pragma: no cover

    def list_children(self, path: str) -> list[str]:
        """Return the names of the immediate children of *path*.

        Raises
        ------
        NodeNotFoundError
            When the node does not exist.
        """
        ...  # pragma: no cover

    def delete_node(self, path: str) -> None:
        """Delete the node at *path*.

        Raises
        ------
        NodeNotFoundError
            When the node does not exist.
        NotEmptyError
            When the node still has children.
        """
        ...  # pragma: no cover
