"""zkcli — command-line client for ZooKeeper node operations.

Built on the kazoo Python client with a strict layered architecture.
"""

from zkcli.version import __version__

__all__: list[str] = ["__version__"]
