"""Unit tests for ensemble configuration parsing (config.py)."""

from __future__ import annotations

import pytest

from zkcli.config import DEFAULT_TIMEOUT, ClientConfig, parse_servers
from zkcli.exceptions import ConfigurationError


class TestParseServers:
    def test_default_port_added(self) -> None:
        assert parse_servers("zk1,zk2:2182") == ("zk1:2181", "zk2:2182")

    def test_whitespace_trimmed(self) -> None:
        assert parse_servers(" zk1 , zk2 ") == ("zk1:2181", "zk2:2181")

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_empty_list_rejected(self, raw: str) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            parse_servers(raw)
        assert exc_info.value.hint is not None

    def test_bracketed_ipv6(self) -> None:
        assert parse_servers("[::1]:2182,[fe80::2]") == ("[::1]:2182", "[fe80::2]:2181")

    @pytest.mark.parametrize(
        "raw",
        [
            "zk1,,zk2",
            ":2181",
            "zk1:abc",
            "zk1:0",
            "zk1:70000",
            "::1",
            "[::1",
            "[]:2181",
            "[::1]2181",
        ],
    )
    def test_bad_entries_rejected(self, raw: str) -> None:
        with pytest.raises(ConfigurationError):
            parse_servers(raw)


class TestClientConfig:
    def test_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZKCLI_SERVERS", "a:1,b")
        monkeypatch.setenv("ZKCLI_TIMEOUT", "2.5")

        config = ClientConfig.from_env()

        assert config.servers == ("a:1", "b:2181")
        assert config.timeout == 2.5
        assert config.hosts == "a:1,b:2181"

    def test_from_env_requires_servers(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ZKCLI_SERVERS", raising=False)
        with pytest.raises(ConfigurationError):
            ClientConfig.from_env()

    def test_explicit_values_override_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ZKCLI_SERVERS", "env-host")
        monkeypatch.setenv("ZKCLI_TIMEOUT", "99")

        config = ClientConfig.resolve("cli-host:2000", "4")

        assert config.servers == ("cli-host:2000",)
        assert config.timeout == 4.0

    def test_default_timeout(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("ZKCLI_TIMEOUT", raising=False)
        assert ClientConfig.resolve("zk1").timeout == DEFAULT_TIMEOUT

    @pytest.mark.parametrize("raw", ["soon", "0", "-1"])
    def test_invalid_timeout(self, raw: str) -> None:
        with pytest.raises(ConfigurationError):
            ClientConfig.resolve("zk1", raw)

    def test_independent_instances(self) -> None:
        first = ClientConfig.resolve("zk-a")
        second = ClientConfig.resolve("zk-b")
        assert first.hosts != second.hosts
