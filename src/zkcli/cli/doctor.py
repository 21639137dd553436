"""``zkcli -c doctor`` — environment and ensemble diagnostics.

Gathers runtime information and renders a Rich table summarising
whether zkcli can run and reach its configured ensemble.

This module lives in the CLI layer — it may import from ``infra``
and ``core``, and it renders via Rich.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from zkcli.cli import exit_codes
from zkcli.cli.console import console
from zkcli.config import ClientConfig
from zkcli.exceptions import ZkCliError
from zkcli.infra.kazoo_store import KazooStoreClient
from zkcli.version import __version__

Check = tuple[str, str, str]


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> Check:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= (3, 10)
    status = "[green]OK[/green]" if ok else "[red]FAIL (>=3.10 required)[/red]"
    return "Python", version, status


def _kazoo_version_check() -> Check:
    """Return (label, value, status) for the kazoo row."""
    try:
        return "kazoo", metadata.version("kazoo"), "[green]OK[/green]"
    except metadata.PackageNotFoundError:
        return "kazoo", "NOT INSTALLED", "[red]FAIL[/red]"


def _zkcli_version_check() -> Check:
    return "zkcli", __version__, "[green]OK[/green]"


def _ensemble_check(config: ClientConfig | None) -> Check:
    """Return (label, value, status) for the ensemble reachability row.

    Without a configuration the row is a warning, not a failure.
    """
    if config is None:
        return "Ensemble", "not configured", "[yellow]WARN[/yellow]"
    try:
        with KazooStoreClient(config) as store:
            store.exists("/")
    except ZkCliError as exc:
        return "Ensemble", f"{config.hosts} ({exc})", "[red]FAIL[/red]"
    return "Ensemble", config.hosts, "[green]OK[/green]"


def _status_plain(status: str) -> str:
    """Convert rich-markup status to plain text."""
    for word in ("FAIL", "WARN", "OK"):
        if word in status:
            return word
    return status


def _print_plain_doctor_table(checks: list[Check]) -> None:
    """Render doctor output without Rich."""
    print("\nzkcli doctor", file=sys.stderr)
    print("=" * 56, file=sys.stderr)
    print(f"{'Component':<12} {'Value':<32} {'Status':<8}", file=sys.stderr)
    print("-" * 56, file=sys.stderr)
    for label, value, status in checks:
        print(f"{label:<12} {value:<32} {_status_plain(status):<8}", file=sys.stderr)
    print(file=sys.stderr)


# ---------------------------------------------------------------------------
# Public entry point
# ---------------------------------------------------------------------------

def run_doctor(config: ClientConfig | None = None) -> int:
    """Execute all diagnostic checks and render a summary table.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` when no check failed,
        :data:`exit_codes.GENERAL_ERROR` otherwise.
    """
    checks = [
        _zkcli_version_check(),
        _python_version_check(),
        _kazoo_version_check(),
    ]
    kazoo_ok = "FAIL" not in checks[-1][2]
    if kazoo_ok:
        checks.append(_ensemble_check(config))

    has_failure = any("FAIL" in status for _, _, status in checks)

    try:
        from rich.table import Table
    except ModuleNotFoundError:
        _print_plain_doctor_table(checks)
        print("Some checks failed." if has_failure else "All checks passed.", file=sys.stderr)
        return exit_codes.GENERAL_ERROR if has_failure else exit_codes.SUCCESS

    table = Table(
        title="zkcli doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)

    console.print()
    console.print(table)
    console.print()

    if has_failure:
        console.print("[bold red]Some checks failed.[/bold red]")
        return exit_codes.GENERAL_ERROR
    console.print("[bold green]All checks passed.[/bold green]")
    return exit_codes.SUCCESS
