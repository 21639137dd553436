"""Custom exception hierarchy for zkcli.

All exceptions that cross layer boundaries must inherit from
:class:`ZkCliError`.  Raw third-party exceptions (e.g. from kazoo)
must NEVER propagate beyond the infrastructure layer — they must be
caught and re-raised as a typed subclass defined here.

Hierarchy
---------
ZkCliError
├── InvalidPathError
├── NodeNotFoundError
│   └── NoParentError
├── NodeExistsError
├── VersionConflictError
├── NotEmptyError
├── AccessDeniedError
├── ConnectivityError
├── StoreError
├── InputError
├── ConfigurationError
└── EnvironmentError
"""

from __future__ import annotations


class ZkCliError(Exception):
    """Base exception for all zkcli errors.

    Every user-visible error condition must map to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""
        self.path: str | None = path
        """Node path the failing operation was addressing, if any."""


# --- Input validation ------------------------------------------------------

class InvalidPathError(ZkCliError):
    """Raised when a node path is malformed (empty, relative, trailing ``/``)."""


# --- Node state ------------------------------------------------------------

class NodeNotFoundError(ZkCliError):
    """Raised when the addressed node does not exist."""


class NoParentError(NodeNotFoundError):
    """Raised when a node cannot be created because its parent is missing."""


class NodeExistsError(ZkCliError):
    """Raised when creating a node that already exists."""


class VersionConflictError(ZkCliError):
    """Raised when a write names a version that no longer matches the node."""


class NotEmptyError(ZkCliError):
    """Raised when deleting a node that still has children."""


class AccessDeniedError(ZkCliError):
    """Raised when the session is not authorised for the operation."""


# --- Transport / store -----------------------------------------------------

class ConnectivityError(ZkCliError):
    """Raised on connection loss, session expiry or timeouts."""


class StoreError(ZkCliError):
    """Raised for unexpected coordination-store failures."""


# --- Environment / configuration -------------------------------------------

class InputError(ZkCliError):
    """Raised when command input (data argument or input file) is unusable."""


class ConfigurationError(ZkCliError):
    """Raised when runtime configuration is missing or invalid."""


class EnvironmentError(ZkCliError):
    """Raised when a required runtime dependency is not available."""


def append_servers_suggestion(hint: str) -> str:
    """Append ensemble-address guidance to an existing hint text.

    The suggestion is appended only once and preserves the original
    hint content verbatim.
    """
    marker = "Check the ensemble address:"
    if marker in hint:
        return hint
    return "\n".join(
        (
            hint,
            marker,
            "    zkcli --servers host1:2181,host2:2181 ...",
        )
    )
