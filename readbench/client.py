# =============================================================================
# ReadBench -- Client Role
# =============================================================================
#
# Blocking, strictly sequential.  Each strategy gets its own fresh
# connection; raw always runs before buffered.
# =============================================================================

from __future__ import annotations

import logging
import socket
from typing import Callable

from .config import BenchConfig
from .constants import BUFFERED_LABEL, RAW_LABEL
from .drain import drain
from .errors import BenchConnectionError
from .types import DrainResult, TimingSample

log = logging.getLogger("readbench.client")

# (label, buffered)
STRATEGIES: tuple[tuple[str, bool], ...] = (
    (RAW_LABEL, False),
    (BUFFERED_LABEL, True),
)


def open_connection(config: BenchConfig) -> socket.socket:
    """Connect to the server.  ``read_timeout`` applies to later reads."""
    try:
        sock = socket.create_connection(config.address, timeout=config.connect_timeout)
    except OSError as exc:
        raise BenchConnectionError(
            f"Cannot connect to {config.host}:{config.port}: {exc}"
        ) from exc
    sock.settimeout(config.read_timeout)
    return sock


def measure(
    config: BenchConfig, *, buffered: bool, keep_data: bool = False
) -> DrainResult:
    """Open a fresh connection and drain it with one read strategy.

    Raw mode reads straight from the socket (``makefile`` with
    ``buffering=0``); buffered mode goes through ``io.BufferedReader``,
    which fetches larger chunks and serves the 1-byte reads from memory.
    """
    with open_connection(config) as sock:
        with sock.makefile("rb", buffering=-1 if buffered else 0) as stream:
            return drain(stream, config.total_bytes, keep_data=keep_data)


def run_client(
    config: BenchConfig, out: Callable[[str], object] = print
) -> list[TimingSample]:
    """Run the raw and buffered benchmarks and report each duration."""
    samples = []
    for label, buffered in STRATEGIES:
        result = measure(config, buffered=buffered)
        if not result.complete:
            log.warning(
                "%s: incomplete drain (%d/%d bytes)",
                label,
                result.bytes_received,
                result.total_bytes,
            )
        log.debug("%s: %d reads, %d bytes", label, result.reads, result.bytes_received)
        sample = result.sample(label)
        out(str(sample))
        samples.append(sample)
    return samples
