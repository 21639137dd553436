"""kazoo backed implementation of :class:`~zkcli.core.protocols.StoreClient`.

This module is the **only** place in the codebase that imports ``kazoo``.
All kazoo exceptions are caught here and re-raised as typed
:class:`~zkcli.exceptions.ZkCliError` subclasses — nothing raw
escapes the infrastructure boundary.
"""

from __future__ import annotations

from collections.abc import Callable
from types import ModuleType, TracebackType
from typing import Any, NoReturn, TypeVar

from zkcli.config import ClientConfig
from zkcli.core.models import NodeSnapshot
from zkcli.exceptions import (
    AccessDeniedError,
    ConnectivityError,
    EnvironmentError,
    NodeExistsError,
    NodeNotFoundError,
    NoParentError,
    NotEmptyError,
    StoreError,
    VersionConflictError,
    ZkCliError,
    append_servers_suggestion,
)
from zkcli.logging_config import get_logger

T = TypeVar("T")

logger = get_logger(__name__)

_INSTALL_HINT = "kazoo is not installed. Install with: pip install kazoo"


def _load_kazoo_client_class() -> type[Any]:
    """Return ``kazoo.client.KazooClient`` or raise ``EnvironmentError``."""
    try:
        from kazoo.client import KazooClient
    except ModuleNotFoundError as exc:
        raise EnvironmentError(_INSTALL_HINT) from exc
    return KazooClient


def _load_kazoo_exceptions() -> ModuleType:
    """Return the ``kazoo.exceptions`` module or raise ``EnvironmentError``."""
    try:
        import kazoo.exceptions
    except ModuleNotFoundError as exc:
        raise EnvironmentError(_INSTALL_HINT) from exc
    return kazoo.exceptions


def _load_kazoo_timeout_class() -> type[BaseException]:
    try:
        from kazoo.handlers.threading import KazooTimeoutError
    except ModuleNotFoundError as exc:
        raise EnvironmentError(_INSTALL_HINT) from exc
    return KazooTimeoutError


class KazooStoreClient:
    """Concrete :class:`StoreClient` backed by the kazoo Python client.

    Usage::

        with KazooStoreClient(ClientConfig.resolve("zk1:2181")) as store:
            store.read("/config")

    This class satisfies the :class:`~zkcli.core.protocols.StoreClient`
    protocol structurally — no explicit inheritance required.

    Parameters
    ----------
    config:
        Ensemble address list and timeout for this client only.
    client:
        An already constructed ``KazooClient``-compatible object.  When
        omitted, one is built from *config* on :meth:`start`.
    """

    def __init__(self, config: ClientConfig, *, client: Any | None = None) -> None:
        self._config = config
        self._client: Any | None = client

    # ------------------------------------------------------------------
    # Session lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Connect to the ensemble, waiting at most the configured timeout.

        Raises
        ------
        ConnectivityError
            When no server could be reached in time.
        """
        if self._client is None:
            client_class = _load_kazoo_client_class()
            self._client = client_class(
                hosts=self._config.hosts,
                timeout=self._config.timeout,
            )
        logger.info("connecting", hosts=self._config.hosts)
        try:
            self._client.start(timeout=self._config.timeout)
        except Exception as exc:
            self._raise_mapped(exc, "/")
        logger.info("connected", hosts=self._config.hosts)

    def stop(self) -> None:
        """Close the session; safe to call more than once."""
        if self._client is None:
            return
        client, self._client = self._client, None
        client.stop()
        client.close()
        logger.info("disconnected", hosts=self._config.hosts)

    def __enter__(self) -> KazooStoreClient:
        self.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.stop()

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def exists(self, path: str) -> bool:
        """Return whether a node exists at *path*."""
        stat = self._run("exists", path, lambda client: client.exists(path))
        return stat is not None

    def read(self, path: str) -> NodeSnapshot:
        """Return the data and version of *path*."""
        data, stat = self._run("get", path, lambda client: client.get(path))
        return NodeSnapshot(data=data or b"", version=stat.version)

    def write(self, path: str, data: bytes, expected_version: int) -> int:
        """Write *data* to *path* against *expected_version*."""
        stat = self._run(
            "set",
            path,
            lambda client: client.set(path, data, version=expected_version),
        )
        return stat.version

    def create_node(self, path: str, data: bytes) -> str:
        """Create *path*; a missing parent is reported as :class:`NoParentError`."""
        return self._run(
            "create",
            path,
            lambda client: client.create(path, data),
            missing=NoParentError,
        )

    def list_children(self, path: str) -> list[str]:
        """Return the immediate child names of *path*."""
        return list(
            self._run("get_children", path, lambda client: client.get_children(path))
        )

    def delete_node(self, path: str) -> None:
        """Delete the node at *path*."""
        self._run("delete", path, lambda client: client.delete(path))

    # ------------------------------------------------------------------
    # Call wrapper
    # ------------------------------------------------------------------

    def _run(
        self,
        op: str,
        path: str,
        action: Callable[[Any], T],
        *,
        missing: type[NodeNotFoundError] = NodeNotFoundError,
    ) -> T:
        if self._client is None:
            raise StoreError(
                "Store client is not connected.",
                hint="Call start() or use the client as a context manager.",
                path=path,
            )
        logger.debug("store_call", op=op, path=path)
        try:
            return action(self._client)
        except Exception as exc:
            self._raise_mapped(exc, path, missing=missing)

    # ------------------------------------------------------------------
    # Exception mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _raise_mapped(
        exc: Exception,
        path: str,
        *,
        missing: type[NodeNotFoundError] = NodeNotFoundError,
    ) -> NoReturn:
        """Translate a kazoo exception into a domain exception.

        Always raises.
        """
        if isinstance(exc, ZkCliError):
            raise exc
        errors = _load_kazoo_exceptions()
        connectivity = (
            errors.ConnectionLoss,
            errors.SessionExpiredError,
            errors.ConnectionClosedError,
            errors.OperationTimeoutError,
            _load_kazoo_timeout_class(),
        )
        if isinstance(exc, errors.NoNodeError):
            if missing is NoParentError:
                raise NoParentError(
                    f"Parent node does not exist: {path}",
                    hint="Use --force (or 'creater') to create missing parents.",
                    path=path,
                ) from exc
            raise missing(f"Node does not exist: {path}", path=path) from exc
        if isinstance(exc, errors.NodeExistsError):
            raise NodeExistsError(f"Node already exists: {path}", path=path) from exc
        if isinstance(exc, errors.BadVersionError):
            raise VersionConflictError(
                f"Version conflict on {path}",
                hint="The node was modified concurrently; re-read and retry.",
                path=path,
            ) from exc
        if isinstance(exc, errors.NotEmptyError):
            raise NotEmptyError(
                f"Node has children: {path}",
                hint="Delete the children first.",
                path=path,
            ) from exc
        if isinstance(exc, errors.NoAuthError):
            raise AccessDeniedError(f"Not authorised to access {path}", path=path) from exc
        if isinstance(exc, connectivity):
            raise ConnectivityError(
                f"Lost contact with the ensemble while accessing {path}: "
                f"{type(exc).__name__}",
                hint=append_servers_suggestion("The ensemble may be down or unreachable."),
                path=path,
            ) from exc
        raise StoreError(
            f"Unexpected kazoo error on {path}: {type(exc).__name__}: {exc}",
            path=path,
        ) from exc
