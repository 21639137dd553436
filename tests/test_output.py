"""Tests for txt/json result rendering (cli/output.py)."""

from __future__ import annotations

import io
import json

import pytest

from zkcli.cli import output


class TestRenderData:
    def test_txt_passes_utf8_through(self) -> None:
        assert output.render_data("héllo".encode(), output.TXT) == "héllo".encode()

    def test_txt_keeps_binary_bytes_exact(self) -> None:
        payload = b"\x89PNG\xff\x00\xfe"
        assert output.render_data(payload, output.TXT) == payload

    def test_json_is_string(self) -> None:
        assert json.loads(output.render_data(b'{"k": 1}', output.JSON)) == '{"k": 1}'

    def test_json_replaces_invalid_bytes(self) -> None:
        assert json.loads(output.render_data(b"a\xffb", output.JSON)) == "a�b"


class TestRenderNames:
    def test_txt_one_per_line(self) -> None:
        assert output.render_names(["a", "a/b"], output.TXT) == b"a\na/b"

    def test_json_array(self) -> None:
        assert json.loads(output.render_names(["a", "a/b"], output.JSON)) == ["a", "a/b"]

    def test_json_empty_array(self) -> None:
        assert output.render_names([], output.JSON) == b"[]"


class TestEmit:
    def test_writes_line(self) -> None:
        stream = io.BytesIO()
        output.emit(b"value", stream)
        assert stream.getvalue() == b"value\n"

    def test_empty_writes_bare_newline(self) -> None:
        stream = io.BytesIO()
        output.emit(b"", stream)
        assert stream.getvalue() == b"\n"

    def test_binary_round_trip_to_stdout(
        self, capsysbinary: pytest.CaptureFixture[bytes],
    ) -> None:
        payload = b"\x89PNG\xff\x00"
        output.emit(output.render_data(payload, output.TXT))
        assert capsysbinary.readouterr().out == payload + b"\n"
