"""Shared fixtures for ReadBench tests."""

import asyncio
import threading
import time

import pytest

from readbench import BenchConfig, BenchServer

TEST_HOST = "127.0.0.1"
TEST_TOTAL_BYTES = 1000


class ServerThread:
    """Runs a BenchServer on its own event loop in a daemon thread."""

    def __init__(self, config: BenchConfig) -> None:
        self.loop = asyncio.new_event_loop()
        self.server = BenchServer(config)
        self._thread = threading.Thread(
            target=self.loop.run_forever, daemon=True, name="readbench-server"
        )

    def start(self) -> None:
        self._thread.start()
        self._call(self.server.start())

    def stop(self) -> None:
        try:
            self._call(self.server.stop())
        finally:
            self.loop.call_soon_threadsafe(self.loop.stop)
            self._thread.join(timeout=5.0)
            self.loop.close()

    @property
    def config(self) -> BenchConfig:
        """Client-side config pointing at the bound port."""
        cfg = self.server.config
        return BenchConfig(
            host=cfg.host,
            port=self.server.port,
            total_bytes=cfg.total_bytes,
            read_timeout=5.0,
        )

    def _call(self, coro):
        return asyncio.run_coroutine_threadsafe(coro, self.loop).result(timeout=5.0)


def wait_until(predicate, timeout: float = 5.0) -> None:
    deadline = time.monotonic() + timeout
    while not predicate():
        if time.monotonic() > deadline:
            raise AssertionError("condition not met in time")
        time.sleep(0.01)


@pytest.fixture()
def wait_for():
    return wait_until


@pytest.fixture()
def start_server():
    """Factory: start a BenchServer on an ephemeral port, stopped on teardown."""
    started = []

    def _start(**overrides):
        values = {"host": TEST_HOST, "port": 0, "total_bytes": TEST_TOTAL_BYTES}
        values.update(overrides)
        srv = ServerThread(BenchConfig(**values))
        srv.start()
        started.append(srv)
        return srv

    yield _start
    for srv in started:
        srv.stop()


@pytest.fixture()
def running_server(start_server):
    """A server streaming the default 1000-byte test payload."""
    return start_server()
