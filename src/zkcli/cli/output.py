"""Result rendering for the ``txt`` and ``json`` output formats.

Results go to stdout (as opposed to diagnostics, which go to stderr via
:mod:`zkcli.cli.console`) so they can be piped into other tools.  Rendering
works on bytes: ``txt`` passes node payloads through untouched, so binary
data survives ``get`` byte-for-byte.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Sequence
from typing import BinaryIO

TXT: str = "txt"
JSON: str = "json"
FORMATS: tuple[str, ...] = (TXT, JSON)


def render_data(data: bytes, fmt: str) -> bytes:
    """Render a node payload.

    ``txt`` yields the payload unchanged; ``json`` yields it as a JSON
    string (undecodable bytes are replaced, since JSON has no raw bytes).
    """
    if fmt == JSON:
        return json.dumps(data.decode("utf-8", errors="replace")).encode("utf-8")
    return data


def render_names(names: Sequence[str], fmt: str) -> bytes:
    """Render a list of names, one per line or as a JSON array."""
    if fmt == JSON:
        return json.dumps(list(names)).encode("utf-8")
    return "\n".join(names).encode("utf-8")


def emit(rendered: bytes, stream: BinaryIO | None = None) -> None:
    """Write *rendered* followed by a newline.

    Empty output still writes the newline, so ``get`` on an empty node and
    ``ls`` on a leaf print a blank line.
    """
    if stream is None:
        sys.stdout.flush()
        stream = sys.stdout.buffer
    stream.write(rendered + b"\n")
    stream.flush()
