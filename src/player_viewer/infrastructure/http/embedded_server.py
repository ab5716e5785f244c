"""Run the ASGI application inside a host process on a background thread."""
from __future__ import annotations

import logging
import socket
import threading

import uvicorn
from fastapi import FastAPI

logger = logging.getLogger(__name__)


class EmbeddedServer:
    """Serve ``app`` with uvicorn without taking over the calling thread."""

    def __init__(self, app: FastAPI, host: str, port: int) -> None:
        self._app = app
        self._host = host
        self._port = port
        self._server: uvicorn.Server | None = None
        self._thread: threading.Thread | None = None

    @property
    def is_running(self) -> bool:
        """Return ``True`` while the serving thread is alive."""

        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Bind the listening socket and start serving in a daemon thread.

        Raises ``OSError`` in the caller's thread when the address cannot be
        bound, e.g. because the port is already in use.
        """

        if self.is_running:
            return

        listening_socket = _bind_socket(self._host, self._port)
        config = uvicorn.Config(
            self._app,
            host=self._host,
            port=self._port,
            log_config=None,
            access_log=False,
        )
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._server.run,
            kwargs={"sockets": [listening_socket]},
            name="player-viewer-http",
            daemon=True,
        )
        self._thread.start()
        logger.info("HTTP server started on %s:%s", self._host, self._port)

    def stop(self, timeout: float = 5.0) -> None:
        """Ask uvicorn to shut down and wait for the serving thread."""

        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout)
        self._server = None
        self._thread = None


def _bind_socket(host: str, port: int) -> socket.socket:
    """Return a socket bound to ``host:port`` ready to be handed to uvicorn."""

    listening_socket = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        listening_socket.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        listening_socket.bind((host, port))
    except OSError:
        listening_socket.close()
        raise
    listening_socket.set_inheritable(True)
    return listening_socket
