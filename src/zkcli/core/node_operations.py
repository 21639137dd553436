"""Core node-operations service — path-oriented operations over a store.

This is the central service class consumed by the CLI layer.  It
depends on a :class:`~zkcli.core.protocols.StoreClient` injected at
construction time (dependency inversion), keeping the core free of
any kazoo imports.

Most operations are a single store round-trip.  Three carry real logic:

* :meth:`NodeOperations.children_recursive` — pre-order subtree walk.
* :meth:`NodeOperations.create` with ``force=True`` — creates missing
  ancestors top-down before the target.
* :meth:`NodeOperations.set_with_version_upgrade` — optimistic
  read-then-write loop that retries on version conflicts.

Guarantees
----------
* No ``print()``, no logging, no formatting.
* No state is kept between calls.
* Only :class:`~zkcli.exceptions.ZkCliError` subclasses escape.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterator
from typing import Any, TypeVar

from zkcli.core.models import ANY_VERSION, RetryPolicy
from zkcli.core.paths import ancestor_paths, join_path, join_relative, validate_path
from zkcli.core.protocols import StoreClient
from zkcli.exceptions import (
    NodeExistsError,
    StoreError,
    VersionConflictError,
    ZkCliError,
)

T = TypeVar("T")


class NodeOperations:
    """Stateless service composing store primitives into node operations.

    Parameters
    ----------
    store:
        Any object satisfying the :class:`StoreClient` protocol.
    sleep:
        Called with the backoff delay between version-conflict retries.
    """

    def __init__(
        self,
        store: StoreClient,
        *,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._store: StoreClient = store
        self._sleep = sleep

    # ------------------------------------------------------------------
    # Pass-through operations
    # ------------------------------------------------------------------

    def exists(self, path: str) -> bool:
        """Return whether a node exists at *path*."""
        validate_path(path)
        return self._call(self._store.exists, path)

    def get(self, path: str) -> bytes:
        """Return the data held by *path*.

        Raises
        ------
        NodeNotFoundError
            If the node does not exist.
        """
        validate_path(path)
        return self._call(self._store.read, path).data

    def children(self, path: str) -> list[str]:
        """Return the sorted names of the immediate children of *path*."""
        validate_path(path)
        return sorted(self._call(self._store.list_children, path))

    def delete(self, path: str) -> None:
        """Delete the node at *path*.

        Raises
        ------
        NodeNotFoundError
            If the node does not exist.
        NotEmptyError
            If the node still has children.
        """
        validate_path(path)
        self._call(self._store.delete_node, path)

    # ------------------------------------------------------------------
    # Recursive listing
    # ------------------------------------------------------------------

    def children_recursive(self, path: str) -> list[str]:
        """Return every descendant of *path* relative to *path*, pre-order.

        Siblings are visited in sorted order and each entry precedes its
        own descendants.  A failure anywhere in the walk fails the whole
        call; no partial listing is returned.
        """
        validate_path(path)
        return list(self._walk(path, ""))

    def _walk(self, path: str, prefix: str) -> Iterator[str]:
        for name in sorted(self._call(self._store.list_children, path)):
            relative = join_relative(prefix, name)
            yield relative
            yield from self._walk(join_path(path, name), relative)

    # ------------------------------------------------------------------
    # Creation
    # ------------------------------------------------------------------

    def create(self, path: str, data: bytes, force: bool = False) -> str:
        """Create *path* holding *data* and return the created path.

        With *force*, missing ancestors are created first with empty
        data.  An ancestor that appears concurrently is accepted; the
        target itself is never overwritten.

        Raises
        ------
        NoParentError
            Without *force*, if the parent of *path* does not exist.
        NodeExistsError
            If *path* already exists.
        """
        validate_path(path)
        if force:
            self._ensure_ancestors(path)
        return self._call(self._store.create_node, path, data)

    def _ensure_ancestors(self, path: str) -> None:
        """Create each missing ancestor of *path*, top-down.

        Created ancestors are left in place if a later step fails.
        """
        for ancestor in ancestor_paths(path):
            if self._call(self._store.exists, ancestor):
                continue
            try:
                self._call(self._store.create_node, ancestor, b"")
            except NodeExistsError:
                # Created by a concurrent writer between exists() and now.
                continue

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def set(self, path: str, data: bytes, version: int = ANY_VERSION) -> int:
        """Write *data* to *path* once and return the new version.

        Raises
        ------
        VersionConflictError
            If *version* is given and no longer matches the node.
        NodeNotFoundError
            If the node does not exist.
        """
        validate_path(path)
        return self._call(self._store.write, path, data, version)

    def set_with_version_upgrade(
        self,
        path: str,
        data: bytes,
        retry_policy: RetryPolicy | None = None,
    ) -> int:
        """Write *data* against the node's current version, retrying on conflict.

        Each attempt reads the current version and then writes against
        it.  Only :class:`VersionConflictError` is retried; every other
        error aborts immediately.  The default policy never gives up.

        Raises
        ------
        VersionConflictError
            If *retry_policy* caps the attempts and all of them conflicted.
        NodeNotFoundError
            If the node does not exist.
        """
        validate_path(path)
        policy = retry_policy or RetryPolicy()
        attempt = 0
        while True:
            attempt += 1
            snapshot = self._call(self._store.read, path)
            try:
                return self._call(self._store.write, path, data, snapshot.version)
            except VersionConflictError as exc:
                if not policy.allows(attempt + 1):
                    raise VersionConflictError(
                        f"Version conflict on {path} persisted after "
                        f"{attempt} attempts.",
                        hint="Other writers keep modifying this node.",
                        path=path,
                    ) from exc
            if policy.backoff_seconds:
                self._sleep(policy.backoff_seconds)

    # ------------------------------------------------------------------
    # Store delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _call(func: Callable[..., T], path: str, *args: Any) -> T:
        """Call a store primitive and ensure only our exceptions escape."""
        try:
            return func(path, *args)
        except ZkCliError:
            # Already one of ours — let it propagate unchanged.
            raise
        except Exception as exc:
            raise StoreError(
                f"Unexpected store client error on {path}: {exc}",
                path=path,
            ) from exc
