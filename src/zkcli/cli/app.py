"""CLI application entry point and command routing for zkcli.

This module is the **sole error boundary** for the entire application.
It catches :class:`~zkcli.exceptions.ZkCliError`, ``KeyboardInterrupt``,
and any unexpected ``Exception``, rendering messages via Rich on stderr
and returning well-defined exit codes.

Architecture notes
------------------
* No node logic lives here — all work is delegated to
  :class:`~zkcli.core.node_operations.NodeOperations`.
* Command results are written to stdout through :mod:`zkcli.cli.output`;
  diagnostics go to stderr.
* This module is the only place that translates between the domain world
  and the OS process exit code.
"""

from __future__ import annotations

import argparse
import os
import sys
import traceback
from collections.abc import Callable
from pathlib import Path

from zkcli.cli import exit_codes, output
from zkcli.cli.console import console
from zkcli.config import ClientConfig
from zkcli.core.node_operations import NodeOperations
from zkcli.core.paths import validate_path
from zkcli.exceptions import ConfigurationError, InputError, InvalidPathError, ZkCliError
from zkcli.logging_config import configure_logging, get_logger, level_for
from zkcli.version import __version__

logger = get_logger(__name__)

NODE_COMMANDS: tuple[str, ...] = (
    "exists",
    "get",
    "ls",
    "lsr",
    "create",
    "creater",
    "set",
    "delete",
)
COMMANDS: tuple[str, ...] = (*NODE_COMMANDS, "doctor")


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI follows the ``-c COMMAND path [data]`` form::

        zkcli --servers zk1,zk2 -c get /config/service
        zkcli --servers zk1 -c creater /a/b/c "payload"
        zkcli -c doctor
    """
    parser = argparse.ArgumentParser(
        prog="zkcli",
        description="Read, write, list and delete ZooKeeper nodes.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--servers",
        default=None,
        help="srv1[:port1][,srv2[:port2]...] (default: $ZKCLI_SERVERS).",
    )
    parser.add_argument(
        "--timeout",
        default=None,
        help="Connection timeout in seconds (default: $ZKCLI_TIMEOUT or 10).",
    )
    parser.add_argument(
        "-c",
        "--command",
        choices=COMMANDS,
        default=None,
        help="Command to run.",
    )
    parser.add_argument(
        "-f",
        "--file",
        default=None,
        help="Read node data for create/set from this file.",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="create: also create missing parents; set: ignore the node version.",
    )
    parser.add_argument(
        "--format",
        choices=output.FORMATS,
        default=output.TXT,
        help="Output format.",
    )
    parser.add_argument("--verbose", action="store_true", help="Log progress.")
    parser.add_argument("--debug", action="store_true", help="Log every store call.")
    parser.add_argument(
        "--stack",
        action="store_true",
        help="Print a stack trace when an error is reported.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Node path.")
    parser.add_argument("data", nargs="?", default=None, help="Node data.")
    return parser


# ---------------------------------------------------------------------------
# Input helpers
# ---------------------------------------------------------------------------

def _read_input(args: argparse.Namespace) -> bytes:
    """Return node data from ``-f FILE`` or the positional data argument."""
    if args.file:
        logger.info("reading_input_file", file=args.file)
        try:
            return Path(args.file).read_bytes()
        except OSError as exc:
            raise InputError(f"Cannot read input file {args.file}: {exc}") from exc
    if args.data is None:
        raise InputError(
            "Expected data argument.",
            hint="Pass data after the path, or use -f FILE.",
        )
    return os.fsencode(args.data)


# ---------------------------------------------------------------------------
# Command handlers
# ---------------------------------------------------------------------------

def _handle_exists(ops: NodeOperations, args: argparse.Namespace) -> int:
    found = ops.exists(args.path)
    output.emit(output.render_data(b"true" if found else b"false", args.format))
    return exit_codes.SUCCESS if found else exit_codes.GENERAL_ERROR


def _handle_get(ops: NodeOperations, args: argparse.Namespace) -> int:
    output.emit(output.render_data(ops.get(args.path), args.format))
    return exit_codes.SUCCESS


def _handle_ls(ops: NodeOperations, args: argparse.Namespace) -> int:
    output.emit(output.render_names(ops.children(args.path), args.format))
    return exit_codes.SUCCESS


def _handle_lsr(ops: NodeOperations, args: argparse.Namespace) -> int:
    output.emit(output.render_names(ops.children_recursive(args.path), args.format))
    return exit_codes.SUCCESS


def _handle_create(ops: NodeOperations, args: argparse.Namespace) -> int:
    created = ops.create(args.path, _read_input(args), force=args.force)
    logger.info("created", path=created, force=args.force)
    return exit_codes.SUCCESS


def _handle_set(ops: NodeOperations, args: argparse.Namespace) -> int:
    data = _read_input(args)
    if args.force:
        version = ops.set_with_version_upgrade(args.path, data)
    else:
        version = ops.set(args.path, data)
    logger.info("set", path=args.path, version=version, force=args.force)
    return exit_codes.SUCCESS


def _handle_delete(ops: NodeOperations, args: argparse.Namespace) -> int:
    ops.delete(args.path)
    logger.info("deleted", path=args.path)
    return exit_codes.SUCCESS


_HANDLERS: dict[str, Callable[[NodeOperations, argparse.Namespace], int]] = {
    "exists": _handle_exists,
    "get": _handle_get,
    "ls": _handle_ls,
    "lsr": _handle_lsr,
    "create": _handle_create,
    "set": _handle_set,
    "delete": _handle_delete,
}


def _handle_node_command(command: str, args: argparse.Namespace) -> int:
    """Connect to the configured ensemble and run one node command."""
    from zkcli.infra.kazoo_store import KazooStoreClient

    config = ClientConfig.resolve(args.servers, args.timeout)
    with KazooStoreClient(config) as store:
        return _HANDLERS[command](NodeOperations(store), args)


def _handle_doctor(args: argparse.Namespace) -> int:
    """Dispatch the ``doctor`` diagnostics command."""
    from zkcli.cli.doctor import run_doctor

    try:
        config: ClientConfig | None = ClientConfig.resolve(args.servers, args.timeout)
    except ConfigurationError:
        config = None
    return run_doctor(config)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the zkcli CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    configure_logging(level_for(verbose=args.verbose, debug=args.debug))

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    command: str = args.command
    logger.info("starting", command=command, path=args.path)

    if command == "doctor":
        return _handle_doctor(args)

    if command == "creater":
        command = "create"
        args.force = True

    if args.path is None:
        raise InvalidPathError("Expected path argument.")
    validate_path(args.path)

    return _handle_node_command(command, args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace unless ``--stack`` was requested.
    """
    show_stack = "--stack" in sys.argv[1:]
    try:
        code = main()
        sys.exit(code)
    except ZkCliError as exc:
        if show_stack:
            console.print_plain(traceback.format_exc())
        console.print(f"[bold red]Error:[/bold red] {exc}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {exc.hint}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        if show_stack:
            console.print_plain(traceback.format_exc())
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {exc}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
