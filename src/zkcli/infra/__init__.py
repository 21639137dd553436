"""Infrastructure layer — external system integration.

This layer wraps all interaction with kazoo and the ZooKeeper
ensemble.  Every raw third-party exception must be caught here and
re-raised as a :class:`~zkcli.exceptions.ZkCliError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
* Must expose clean, typed interfaces consumed by the core layer.
"""

from zkcli.infra.kazoo_store import KazooStoreClient

__all__: list[str] = [
    "KazooStoreClient",
]
