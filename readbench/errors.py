# =============================================================================
# ReadBench -- Error Types
# =============================================================================

from .types import DrainState


class BenchError(Exception):
    """Base exception for all benchmark errors."""


class BenchConnectionError(BenchError):
    """Client could not open a connection to the server."""


class BenchBindError(BenchError):
    """Server could not bind its listening address."""


class DrainError(BenchError):
    """A read failed before the stream reached end-of-data.

    The drain ends in :attr:`DrainState.FAILED`; the state travels on the
    exception since no :class:`DrainResult` is returned.
    """

    state = DrainState.FAILED

    def __init__(self, bytes_received: int, reason: str = "") -> None:
        self.bytes_received = bytes_received
        message = f"Read failed after {bytes_received} bytes"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
