# =============================================================================
# ReadBench -- Type Definitions
# =============================================================================

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable


class DrainState(str, Enum):
    """Drain loop state machine.

    READING -> READING on a positive read, READING -> DONE on a zero read
    or a full buffer, READING -> FAILED on a read error.  DONE and FAILED
    are terminal.  FAILED is never stored in a DrainResult; it is reported
    as :class:`readbench.errors.DrainError`, whose ``state`` carries it.
    """

    READING = "reading"
    DONE = "done"
    FAILED = "failed"


@runtime_checkable
class ReadInto(Protocol):
    """Anything that can read into a caller-owned byte window.

    Returns the number of bytes written, ``0`` at end-of-stream.
    Raw socket I/O and ``io.BufferedReader`` both qualify.
    """

    def readinto(self, buffer: memoryview | bytearray, /) -> int | None: ...


@dataclass(frozen=True)
class TimingSample:
    """One benchmark run: a label and its elapsed time in seconds."""

    label: str
    elapsed: float

    @property
    def elapsed_ms(self) -> int:
        return int(self.elapsed * 1000)

    def __str__(self) -> str:
        return f"{self.label} took {self.elapsed_ms}ms"


@dataclass(frozen=True)
class DrainResult:
    """Outcome of draining one connection."""

    bytes_received: int
    total_bytes: int
    elapsed: float
    state: DrainState
    reads: int
    data: bytes | None = None

    @property
    def complete(self) -> bool:
        return self.state is DrainState.DONE and self.bytes_received == self.total_bytes

    def sample(self, label: str) -> TimingSample:
        return TimingSample(label=label, elapsed=self.elapsed)
