# =============================================================================
# ReadBench -- Connection Drainer
# =============================================================================
#
# Reads a stream one byte at a time until end-of-stream.  The 1-byte window
# is the quantity being benchmarked; keep it at READ_WINDOW.
# =============================================================================

from __future__ import annotations

import logging
import time

from .constants import READ_WINDOW
from .errors import DrainError
from .types import DrainResult, DrainState, ReadInto

log = logging.getLogger("readbench.drain")


def drain(stream: ReadInto, total_bytes: int, *, keep_data: bool = False) -> DrainResult:
    """Drain *stream* into a fresh ``total_bytes`` buffer and time it.

    The loop ends in DONE when a read returns 0 (clean end-of-stream) or
    when the buffer is full.  With ``total_bytes == 0`` no read is made.

    Args:
        stream: Object exposing ``readinto`` (raw or buffered).
        total_bytes: Size of the drain buffer.
        keep_data: Return the received bytes in ``DrainResult.data``.

    Raises:
        DrainError: The stream raised ``OSError`` mid-drain.
    """
    buffer = bytearray(total_bytes)
    view = memoryview(buffer)
    cursor = 0
    reads = 0
    state = DrainState.READING

    start = time.perf_counter()
    while state is DrainState.READING:
        window = view[cursor:min(cursor + READ_WINDOW, total_bytes)]
        if not window:
            state = DrainState.DONE
            break
        try:
            received = stream.readinto(window)
        except OSError as exc:
            log.error("Drain failed at byte %d: %s", cursor, exc)
            raise DrainError(cursor, str(exc)) from exc
        reads += 1
        if received:
            cursor += received
        else:
            state = DrainState.DONE
    elapsed = time.perf_counter() - start

    if cursor < total_bytes:
        log.warning("Stream ended after %d of %d bytes", cursor, total_bytes)
    return DrainResult(
        bytes_received=cursor,
        total_bytes=total_bytes,
        elapsed=elapsed,
        state=state,
        reads=reads,
        data=bytes(buffer[:cursor]) if keep_data else None,
    )
