# =============================================================================
# ReadBench -- Configuration
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass

from .constants import DEFAULT_BACKLOG, DEFAULT_HOST, DEFAULT_PORT, TOTAL_BYTES


@dataclass(frozen=True)
class BenchConfig:
    """Settings shared by the client and server roles.

    Built once at process start and passed into both role entry points.

    Attributes:
        host: Address the server binds and the client connects to.
        port: TCP port.  ``0`` lets the OS pick one (server side, tests).
        total_bytes: Payload size written by the server and expected
            by the client.
        connect_timeout: Seconds to wait for the client's connect.
            ``None`` waits forever.
        read_timeout: Seconds a single client read may block.
            ``None`` waits forever.
        write_timeout: Seconds the server waits for a payload write to
            flush.  ``None`` waits forever.
        max_connections: Cap on in-flight server connections.
            ``None`` means unbounded.
        backlog: Listen backlog for the server socket.
    """

    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    total_bytes: int = TOTAL_BYTES
    connect_timeout: float | None = None
    read_timeout: float | None = None
    write_timeout: float | None = None
    max_connections: int | None = None
    backlog: int = DEFAULT_BACKLOG

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port out of range: {self.port}")
        if self.total_bytes < 0:
            raise ValueError(f"total_bytes must be >= 0, got {self.total_bytes}")
        for name in ("connect_timeout", "read_timeout", "write_timeout"):
            value = getattr(self, name)
            if value is not None and value <= 0:
                raise ValueError(f"{name} must be positive or None, got {value}")
        if self.max_connections is not None and self.max_connections < 1:
            raise ValueError(
                f"max_connections must be >= 1 or None, got {self.max_connections}"
            )
        if self.backlog < 1:
            raise ValueError(f"backlog must be >= 1, got {self.backlog}")

    @property
    def address(self) -> tuple[str, int]:
        return (self.host, self.port)
