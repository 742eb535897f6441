"""Server configuration.

ServerConfig is a frozen dataclass — immutable after creation, no string-key
dict lookups.
"""

from __future__ import annotations

from dataclasses import dataclass

from mockroute.errors import ConfigurationError

DEFAULT_ADDRESS = "127.0.0.1:9527"


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Listener configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = ServerConfig(host="0.0.0.0", port=8080)
        config = ServerConfig.from_address("0.0.0.0:8080")
    """

    host: str = "127.0.0.1"
    port: int = 9527

    # Logging
    log_level: str = "info"
    access_log: bool = True

    @classmethod
    def from_address(cls, address: str, **overrides: object) -> ServerConfig:
        """Build a config from a ``host:port`` listen address.

        An empty host (``":8080"``) binds all interfaces.

        Raises:
            ConfigurationError: If the address has no port or the port is
                not an integer in ``0..65535``.
        """
        host, sep, port_text = address.rpartition(":")
        if not sep:
            msg = f"Listen address {address!r} must look like host:port"
            raise ConfigurationError(msg)
        host = host.strip("[]") or "0.0.0.0"
        try:
            port = int(port_text)
        except ValueError as exc:
            msg = f"Listen address {address!r} has a non-numeric port"
            raise ConfigurationError(msg) from exc
        if not 0 <= port <= 65535:
            msg = f"Listen address {address!r} has an out-of-range port"
            raise ConfigurationError(msg)
        return cls(host=host, port=port, **overrides)  # type: ignore[arg-type]

    @property
    def address(self) -> str:
        """The ``host:port`` string this config binds."""
        return f"{self.host}:{self.port}"
