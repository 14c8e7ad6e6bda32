# =============================================================================
# ReadBench -- Server Role
# =============================================================================
#
# One asyncio task per accepted connection.  Each task writes a freshly
# generated payload in a single write, then closes.  Tasks share nothing
# but the listener, so no locking is needed.
# =============================================================================

from __future__ import annotations

import asyncio
import contextlib
import logging
import signal

from .config import BenchConfig
from .errors import BenchBindError
from .payload import generate_payload

log = logging.getLogger("readbench.server")


class BenchServer:
    """Streams the benchmark payload to every client that connects.

    Failures inside one connection are logged and end only that
    connection's task; the listener and other connections keep going.
    In-flight tasks are tracked so :meth:`stop` can cancel and await them.

    Example::

        async with BenchServer(BenchConfig(port=0)) as server:
            print(server.port)
            await server.serve_forever()
    """

    def __init__(self, config: BenchConfig) -> None:
        self._config = config
        self._server: asyncio.Server | None = None
        self._tasks: set[asyncio.Task] = set()
        self._stopped = asyncio.Event()

        self.connections_served = 0
        self.connections_failed = 0
        self.connections_rejected = 0

    # -- Properties -----------------------------------------------------------

    @property
    def config(self) -> BenchConfig:
        return self._config

    @property
    def is_serving(self) -> bool:
        return self._server is not None and self._server.is_serving()

    @property
    def port(self) -> int:
        """Bound port (resolves ``port=0`` to the OS-assigned one)."""
        if self._server is None or not self._server.sockets:
            raise RuntimeError("server is not started")
        return self._server.sockets[0].getsockname()[1]

    @property
    def active_connections(self) -> int:
        return len(self._tasks)

    # -- Lifecycle ------------------------------------------------------------

    async def start(self) -> None:
        """Bind the listener and begin accepting."""
        if self._server is not None:
            return
        cfg = self._config
        try:
            self._server = await asyncio.start_server(
                self._handle_connection,
                cfg.host,
                cfg.port,
                backlog=cfg.backlog,
            )
        except OSError as exc:
            raise BenchBindError(f"Cannot bind {cfg.host}:{cfg.port}: {exc}") from exc
        self._stopped.clear()
        log.info("Listening on %s:%d, ready to accept", cfg.host, self.port)

    async def serve_forever(self) -> None:
        """Block until :meth:`stop` is called.

        Accept errors do not surface here: asyncio reports them through the
        loop exception handler and the listener keeps accepting.  Only a
        failure to bind (see :meth:`start`) is fatal.
        """
        if self._server is None:
            await self.start()
        await self._stopped.wait()

    async def stop(self) -> None:
        """Close the listener, cancel in-flight connections and wait for them."""
        if self._server is None:
            return
        server, self._server = self._server, None
        server.close()

        tasks = list(self._tasks)
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        await server.wait_closed()

        self._stopped.set()
        log.info(
            "Stopped (served=%d failed=%d rejected=%d)",
            self.connections_served,
            self.connections_failed,
            self.connections_rejected,
        )

    async def __aenter__(self) -> BenchServer:
        await self.start()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.stop()

    # -- Per-connection work --------------------------------------------------

    async def _handle_connection(
        self, reader: asyncio.StreamReader, writer: asyncio.StreamWriter
    ) -> None:
        peer = writer.get_extra_info("peername")
        limit = self._config.max_connections
        if limit is not None and len(self._tasks) >= limit:
            self.connections_rejected += 1
            log.warning("Connection limit (%d) reached, rejecting %s", limit, peer)
            await self._close(writer)
            return

        task = asyncio.current_task()
        if task is not None:
            self._tasks.add(task)
            task.add_done_callback(self._tasks.discard)

        try:
            await self._send_payload(writer)
        except (OSError, asyncio.TimeoutError) as exc:
            self.connections_failed += 1
            log.warning("Sending to %s failed: %s", peer, exc)
        else:
            self.connections_served += 1
            log.info("Data sent to %s, closing connection", peer)
        finally:
            await self._close(writer)

    async def _send_payload(self, writer: asyncio.StreamWriter) -> None:
        data = generate_payload(self._config.total_bytes)
        writer.write(data)
        timeout = self._config.write_timeout
        if timeout is None:
            await writer.drain()
        else:
            await asyncio.wait_for(writer.drain(), timeout)

    @staticmethod
    async def _close(writer: asyncio.StreamWriter) -> None:
        writer.close()
        # Peer may already have reset the connection.
        with contextlib.suppress(OSError):
            await writer.wait_closed()


async def serve(config: BenchConfig, stop: asyncio.Event | None = None) -> None:
    """Run a :class:`BenchServer` until SIGINT, SIGTERM or *stop* is set.

    Signal handlers are installed before the listener starts, so once the
    startup line is logged a SIGTERM stops the server cleanly.
    """
    if stop is None:
        stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    installed = []
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError, RuntimeError):
            loop.add_signal_handler(sig, stop.set)
            installed.append(sig)

    server = BenchServer(config)
    try:
        await server.start()
        waiter = asyncio.create_task(server.serve_forever())
        try:
            await stop.wait()
        finally:
            await server.stop()
            await waiter
    finally:
        for sig in installed:
            loop.remove_signal_handler(sig)


def run_server(config: BenchConfig) -> None:
    """Blocking entry point for the server role."""
    asyncio.run(serve(config))
