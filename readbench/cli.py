# =============================================================================
# ReadBench -- Command Line Entry Point
# =============================================================================

from __future__ import annotations

import argparse
import logging
import sys

from ._logging import configure_logging
from .client import run_client
from .config import BenchConfig
from .constants import ROLE_CLIENT, ROLE_SERVER
from .errors import BenchError
from .server import run_server

log = logging.getLogger("readbench.cli")

USAGE_ERROR = "ERROR: Please specify either 'client' or 'server'"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="readbench",
        description="Compare raw and buffered 1-byte reads over TCP.",
    )
    parser.add_argument("role", nargs="?", help="'client' or 'server'")
    return parser


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    # Only -h/--help is handled by argparse.  The role is always the first
    # token, anything after it is ignored, and bad roles print the usage line.
    build_parser().parse_known_args(argv)
    role = argv[0] if argv else None

    if role is None:
        print(USAGE_ERROR)
        return 0
    if role not in (ROLE_CLIENT, ROLE_SERVER):
        print(f"{USAGE_ERROR} (received '{role}')")
        return 0

    configure_logging()
    config = BenchConfig()
    try:
        if role == ROLE_CLIENT:
            run_client(config)
        else:
            run_server(config)
    except BenchError as exc:
        log.error("%s failed: %s", role, exc)
        return 1
    return 0
