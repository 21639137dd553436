"""Runtime configuration model for zkcli.

This module owns all environment variable parsing and validation of
the ensemble address list.  Other modules consume a typed config
object instead of raw env reads or process-wide state.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from zkcli.exceptions import ConfigurationError, append_servers_suggestion

DEFAULT_PORT: int = 2181
DEFAULT_TIMEOUT: float = 10.0

SERVERS_ENV: str = "ZKCLI_SERVERS"
TIMEOUT_ENV: str = "ZKCLI_TIMEOUT"


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Validated connection settings for one ensemble.

    Attributes
    ----------
    servers : tuple[str, ...]
        ``host:port`` entries; a missing port defaults to 2181.
    timeout : float
        Connection and request timeout in seconds.
    """

    servers: tuple[str, ...]
    timeout: float = DEFAULT_TIMEOUT

    @property
    def hosts(self) -> str:
        """Connection string in the ``host1:port1,host2:port2`` form."""
        return ",".join(self.servers)

    @classmethod
    def from_env(cls) -> ClientConfig:
        """Build config from ``ZKCLI_SERVERS`` and ``ZKCLI_TIMEOUT``.

        Raises
        ------
        ConfigurationError
            If the variables are missing or invalid.
        """
        return cls.resolve()

    @classmethod
    def resolve(
        cls,
        servers: str | None = None,
        timeout: str | float | None = None,
    ) -> ClientConfig:
        """Build config, preferring explicit values over the environment."""
        raw_servers = servers if servers else os.getenv(SERVERS_ENV, "")
        raw_timeout = timeout if timeout is not None else os.getenv(TIMEOUT_ENV)
        return cls(
            servers=parse_servers(raw_servers),
            timeout=_parse_timeout(raw_timeout),
        )


def parse_servers(raw_value: str) -> tuple[str, ...]:
    """Parse a comma-delimited ``srv1[:port1][,srv2[:port2]...]`` list.

    Raises
    ------
    ConfigurationError
        If the list is empty, has an empty entry, or a bad port.
    """
    if not raw_value.strip():
        raise ConfigurationError(
            "Expected comma delimited list of servers via --servers "
            f"or {SERVERS_ENV}.",
            hint=append_servers_suggestion("No ensemble address was given."),
        )
    return tuple(_normalize_server(entry) for entry in raw_value.split(","))


def _normalize_server(entry: str) -> str:
    """Return ``host:port`` for *entry*; IPv6 hosts must be bracketed."""
    item = entry.strip()
    if item.startswith("["):
        address, bracket, rest = item[1:].partition("]")
        if not bracket or not address or (rest and not rest.startswith(":")):
            raise ConfigurationError(
                f"Invalid server entry: '{entry}'.",
                hint="Write IPv6 addresses as [addr] or [addr]:port.",
            )
        host, sep, port = f"[{address}]", rest[:1], rest[1:]
    else:
        host, sep, port = item.rpartition(":")
        if not sep:
            host = item
        elif ":" in host:
            raise ConfigurationError(
                f"Invalid server entry: '{entry}'.",
                hint="Write IPv6 addresses as [addr] or [addr]:port.",
            )
    if not host:
        raise ConfigurationError(f"Invalid server entry: '{entry}'.")
    if not sep:
        return f"{host}:{DEFAULT_PORT}"
    if not port.isdigit() or not 0 < int(port) < 65536:
        raise ConfigurationError(
            f"Invalid port in server entry '{entry}': expected 1-65535.",
        )
    return f"{host}:{int(port)}"


def _parse_timeout(raw_value: str | float | None) -> float:
    if raw_value is None or raw_value == "":
        return DEFAULT_TIMEOUT
    try:
        value = float(raw_value)
    except ValueError as error:
        raise ConfigurationError(
            f"Invalid timeout value: expected seconds, got '{raw_value}'.",
        ) from error
    if value <= 0:
        raise ConfigurationError(
            f"Invalid timeout value: must be positive, got '{raw_value}'.",
        )
    return value
