"""Domain models for zkcli.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access.  They carry zero I/O, zero dependencies on
external packages, and must remain pure across the entire lifecycle.
"""

from __future__ import annotations

from dataclasses import dataclass

ANY_VERSION: int = -1
"""Expected-version sentinel that disables the optimistic version check."""


# ---------------------------------------------------------------------------
# Node snapshot
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class NodeSnapshot:
    """Data and version of a single node, as observed by one read."""

    data: bytes
    """Opaque node payload (possibly empty)."""

    version: int
    """Per-node write counter at the time of the read."""


# ---------------------------------------------------------------------------
# Retry policy
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """Bounds for the read-then-write loop of a version-upgrading set.

    The default policy retries forever without sleeping.
    """

    max_attempts: int | None = None
    """Maximum number of write attempts, or ``None`` for no limit."""

    backoff_seconds: float = 0.0
    """Fixed delay between a version conflict and the next attempt."""

    def __post_init__(self) -> None:
        if self.max_attempts is not None and self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.backoff_seconds < 0:
            raise ValueError("backoff_seconds must not be negative")

    def allows(self, attempt: int) -> bool:
        """Return whether a 1-based *attempt* may still be made."""
        return self.max_attempts is None or attempt <= self.max_attempts
