"""Exit-code constants used by the CLI layer.

Every exit path of ``zkcli`` returns one of these values so that shell
scripts can branch on them reliably.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Command completed; for ``exists`` the node is present."""

GENERAL_ERROR: int = 1
"""A ZkCliError was reported, or ``exists`` found no node."""

UNEXPECTED_ERROR: int = 2
"""An exception outside the ZkCliError hierarchy reached the boundary."""

KEYBOARD_INTERRUPT: int = 130
"""Interrupted with Ctrl+C (128 + SIGINT)."""
