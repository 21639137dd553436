"""Core / service layer — node operations and pure path logic.

Rules
-----
* No ``print()`` calls and no logging.
* No direct network I/O — the store is reached only through
  :class:`~zkcli.core.protocols.StoreClient`.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed.
"""

from zkcli.core.models import ANY_VERSION, NodeSnapshot, RetryPolicy
from zkcli.core.node_operations import NodeOperations
from zkcli.core.protocols import StoreClient

__all__: list[str] = [
    "ANY_VERSION",
    "NodeOperations",
    "NodeSnapshot",
    "RetryPolicy",
    "StoreClient",
]
