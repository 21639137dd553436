"""Smoke tests for package wiring.

These tests prove that:
* The CLI entry point is importable and callable.
* The exception hierarchy is correctly structured.
* Version is accessible.
* Exit codes are defined.
"""

from __future__ import annotations

import pytest

from zkcli import __version__
from zkcli.cli import exit_codes
from zkcli.exceptions import (
    AccessDeniedError,
    ConfigurationError,
    ConnectivityError,
    EnvironmentError,
    InputError,
    InvalidPathError,
    NodeExistsError,
    NodeNotFoundError,
    NoParentError,
    NotEmptyError,
    StoreError,
    VersionConflictError,
    ZkCliError,
    append_servers_suggestion,
)


# ---------------------------------------------------------------------------
# Version
# ---------------------------------------------------------------------------

class TestVersion:
    def test_version_is_semver_like(self) -> None:
        parts = __version__.split(".")
        assert len(parts) == 3
        assert all(part.isdigit() for part in parts)


# ---------------------------------------------------------------------------
# Exception hierarchy
# ---------------------------------------------------------------------------

class TestExceptions:
    @pytest.mark.parametrize(
        "exc_class",
        [
            InvalidPathError,
            NodeNotFoundError,
            NoParentError,
            NodeExistsError,
            VersionConflictError,
            NotEmptyError,
            AccessDeniedError,
            ConnectivityError,
            StoreError,
            InputError,
            ConfigurationError,
            EnvironmentError,
        ],
    )
    def test_all_exceptions_inherit_from_base(
        self, exc_class: type[ZkCliError]
    ) -> None:
        assert issubclass(exc_class, ZkCliError)

    def test_no_parent_is_a_not_found(self) -> None:
        assert issubclass(NoParentError, NodeNotFoundError)

    def test_hint_and_path_are_stored(self) -> None:
        err = ZkCliError("boom", hint="try this", path="/a")
        assert str(err) == "boom"
        assert err.hint == "try this"
        assert err.path == "/a"

    def test_hint_and_path_default_to_none(self) -> None:
        err = ZkCliError("boom")
        assert err.hint is None
        assert err.path is None

    def test_servers_suggestion_appended_once(self) -> None:
        once = append_servers_suggestion("Unreachable.")
        assert once.startswith("Unreachable.\n")
        assert append_servers_suggestion(once) == once


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------

class TestExitCodes:
    def test_values(self) -> None:
        assert exit_codes.SUCCESS == 0
        assert exit_codes.GENERAL_ERROR == 1
        assert exit_codes.UNEXPECTED_ERROR == 2
        assert exit_codes.KEYBOARD_INTERRUPT == 130
