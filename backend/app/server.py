"""Server Lifecycle — listener thread, signal wait, and deadline-bounded graceful shutdown.

Invariants:
    - States advance STARTING → LISTENING → SHUTTING_DOWN → STOPPED, never backwards
    - uvicorn serves on its own thread; the main thread only waits for a stop notification
    - Shutdown stops accepting connections, lets in-flight requests finish, and force-closes
      whatever is still open once shutdown_timeout elapses
    - A listener that dies before a stop was requested is fatal (ListenerStartupError);
      a shutdown that misses its deadline is fatal (ShutdownTimeoutError)

Design Decisions:
    - threading.Event for the stop notification: set from the SIGINT/SIGTERM handler or
      when the listener thread exits, whichever comes first
    - uvicorn skips its own signal handling off the main thread, so signals stay ours
    - uvicorn has no read/write timeouts; TransportTimeouts bounds them at the ASGI layer
      and idle_timeout maps to uvicorn's keep-alive timeout
"""

import asyncio
import logging
import signal
import sys
import threading
import time
from enum import Enum

import uvicorn

from app.config import Settings, get_settings
from app.core.errors import (
    ListenerStartupError, ServerLifecycleError, ShutdownTimeoutError,
)
from app.infrastructure.observability import setup_logging
from app.main import create_app

logger = logging.getLogger(__name__)

HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)
FORCE_CLOSE_GRACE = 5.0


class ServerState(str, Enum):
    """Lifecycle states of the listener."""
    STARTING = "starting"
    LISTENING = "listening"
    SHUTTING_DOWN = "shutting_down"
    STOPPED = "stopped"


class TransportTimeouts:
    """ASGI wrapper enforcing per-request read and write deadlines.

    Both deadlines start when the request reaches the app. Reading the request
    body must finish within read_timeout; every response write must happen
    before write_timeout. Handlers are never cancelled while they compute, only
    while they wait on the transport.
    """

    def __init__(self, app, read_timeout: float, write_timeout: float):
        self.app = app
        self.read_timeout = read_timeout
        self.write_timeout = write_timeout

    async def __call__(self, scope, receive, send):
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        loop = asyncio.get_running_loop()
        read_deadline = loop.time() + self.read_timeout
        write_deadline = loop.time() + self.write_timeout
        body_complete = False

        async def timed_receive():
            nonlocal body_complete
            if body_complete:
                return await receive()
            message = await asyncio.wait_for(
                receive(), max(0.0, read_deadline - loop.time()),
            )
            if message["type"] != "http.request" or not message.get("more_body", False):
                body_complete = True
            return message

        async def timed_send(message):
            await asyncio.wait_for(
                send(message), max(0.0, write_deadline - loop.time()),
            )

        await self.app(scope, timed_receive, timed_send)


class ServerLifecycle:
    """Owns the uvicorn listener from start to graceful stop."""

    def __init__(self, app, settings: Settings):
        self.settings = settings
        config = uvicorn.Config(
            TransportTimeouts(app, settings.read_timeout, settings.write_timeout),
            host=settings.host,
            port=settings.port,
            timeout_keep_alive=settings.idle_timeout,
            lifespan="on",
            log_config=None,
            access_log=False,
        )
        self.server = uvicorn.Server(config)
        self._listener: threading.Thread | None = None
        self._loop: asyncio.AbstractEventLoop | None = None
        self._failure: BaseException | None = None
        self._stop_requested = threading.Event()
        self._wakeup = threading.Event()

    @property
    def state(self) -> ServerState:
        if self._listener is not None and not self._listener.is_alive():
            return ServerState.STOPPED
        if self._stop_requested.is_set():
            return ServerState.SHUTTING_DOWN
        if self.server.started:
            return ServerState.LISTENING
        return ServerState.STARTING

    # ─── Start ──────────────────────────────────────────────────

    def start(self) -> None:
        """Begin serving on a background thread; returns immediately."""
        logger.info(
            f"Starting server on port {self.settings.port}...",
            extra={"port": self.settings.port},
        )
        self._listener = threading.Thread(
            target=self._serve, name="http-listener", daemon=True,
        )
        self._listener.start()

    def _serve(self) -> None:
        try:
            asyncio.run(self._serve_forever())
        except SystemExit as e:
            # uvicorn calls sys.exit(1) when the socket cannot be bound
            self._failure = e
        except Exception as e:
            logger.error(f"Listener crashed: {e}", exc_info=True)
            self._failure = e
        finally:
            self._wakeup.set()

    async def _serve_forever(self) -> None:
        self._loop = asyncio.get_running_loop()
        await self.server.serve()

    def wait_until_listening(self, timeout: float = 10.0) -> bool:
        """Poll until uvicorn reports started; False if it died or timed out."""
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if self.server.started:
                return True
            if self._listener is not None and not self._listener.is_alive():
                return False
            time.sleep(0.05)
        return self.server.started

    # ─── Stop notification ──────────────────────────────────────

    def install_signal_handlers(self) -> None:
        """Route SIGINT/SIGTERM to request_stop. Main thread only."""
        for sig in HANDLED_SIGNALS:
            signal.signal(sig, self.request_stop)

    def request_stop(self, signum=None, frame=None) -> None:
        self._stop_requested.set()
        self._wakeup.set()

    def wait_for_stop(self, poll_interval: float = 0.5) -> None:
        """Block until a stop is requested or the listener exits on its own."""
        while not self._wakeup.wait(poll_interval):
            pass
        if not self._stop_requested.is_set():
            reason = "listener exited"
            if isinstance(self._failure, SystemExit):
                reason = "could not bind listen socket"
            elif self._failure is not None:
                reason = str(self._failure)
            raise ListenerStartupError(self.settings.host, self.settings.port, reason)

    # ─── Shutdown ───────────────────────────────────────────────

    def shutdown(self) -> None:
        """Drain in-flight requests within shutdown_timeout, then force-close."""
        logger.info("Shutting down server...")
        self._stop_requested.set()
        self._wakeup.set()
        self.server.should_exit = True
        if self._listener is None:
            return

        self._listener.join(self.settings.shutdown_timeout)
        if self._listener.is_alive():
            logger.warning(
                f"Graceful shutdown exceeded {self.settings.shutdown_timeout:g}s, "
                f"closing {len(self.server.server_state.connections)} connection(s)",
            )
            self.server.force_exit = True
            self._close_connections()
            self._listener.join(FORCE_CLOSE_GRACE)
            raise ShutdownTimeoutError(self.settings.shutdown_timeout)

        if self._failure is not None:
            raise ServerLifecycleError(f"Listener failed during shutdown: {self._failure}")

    def _close_connections(self) -> None:
        loop = self._loop
        if loop is None or loop.is_closed():
            return

        def close_all():
            for connection in list(self.server.server_state.connections):
                connection.transport.close()

        loop.call_soon_threadsafe(close_all)

    # ─── Entry point ────────────────────────────────────────────

    def run(self) -> None:
        """Serve until SIGINT/SIGTERM, then stop gracefully."""
        self.install_signal_handlers()
        self.start()
        self.wait_for_stop()
        self.shutdown()
        logger.info("Server stopped gracefully")


def main() -> None:
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    lifecycle = ServerLifecycle(create_app(), settings)
    try:
        lifecycle.run()
    except ServerLifecycleError as e:
        logger.critical(str(e))
        sys.exit(1)
