"""Tests for mockroute.config — ServerConfig frozen dataclass."""

import pytest

from mockroute.config import DEFAULT_ADDRESS, ServerConfig
from mockroute.errors import ConfigurationError


class TestServerConfig:
    def test_defaults(self) -> None:
        cfg = ServerConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 9527
        assert cfg.log_level == "info"
        assert cfg.access_log is True
        assert cfg.address == DEFAULT_ADDRESS

    def test_frozen(self) -> None:
        cfg = ServerConfig()
        with pytest.raises(AttributeError):
            cfg.port = 1  # type: ignore[misc]


class TestFromAddress:
    def test_host_and_port(self) -> None:
        cfg = ServerConfig.from_address("0.0.0.0:8080")
        assert (cfg.host, cfg.port) == ("0.0.0.0", 8080)

    def test_empty_host_binds_all(self) -> None:
        assert ServerConfig.from_address(":8080").host == "0.0.0.0"

    def test_ipv6_brackets_stripped(self) -> None:
        cfg = ServerConfig.from_address("[::1]:9000")
        assert (cfg.host, cfg.port) == ("::1", 9000)

    def test_overrides(self) -> None:
        cfg = ServerConfig.from_address("localhost:1", log_level="debug", access_log=False)
        assert cfg.log_level == "debug"
        assert cfg.access_log is False

    @pytest.mark.parametrize("address", ["localhost", "localhost:http", "host:70000", "h:-1"])
    def test_invalid(self, address: str) -> None:
        with pytest.raises(ConfigurationError):
            ServerConfig.from_address(address)
