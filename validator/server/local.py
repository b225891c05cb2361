"""Background uvicorn server for the static file app.

``LocalServer`` owns the server for the lifetime of a validation run::

    with LocalServer(settings.server_root, port=settings.server_port) as server:
        ...  # server.base_url is reachable until the block exits
"""

from __future__ import annotations

import logging
import threading
import time
from pathlib import Path
from typing import Optional

import uvicorn

from validator.models import ServerError
from validator.server.app import create_app

logger = logging.getLogger(__name__)

_POLL_INTERVAL = 0.05


class LocalServer:
    """Serve *root* over HTTP on *host*:*port* from a daemon thread."""

    def __init__(
        self,
        root: Path,
        host: str = "localhost",
        port: int = 5000,
        start_timeout: float = 10.0,
    ) -> None:
        self.root = Path(root)
        self.host = host
        self.port = port
        self.start_timeout = start_timeout
        self._server: Optional[uvicorn.Server] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}/"

    @property
    def running(self) -> bool:
        return bool(
            self._server is not None
            and self._server.started
            and self._thread is not None
            and self._thread.is_alive()
        )

    def start(self) -> "LocalServer":
        """Start serving and block until the socket is bound.

        Raises:
            ServerError: If the port cannot be bound or the server does not
                come up within ``start_timeout`` seconds.
        """
        if self._thread is not None:
            raise ServerError("Server already started")
        try:
            app = create_app(self.root)
        except NotADirectoryError as exc:
            raise ServerError(str(exc)) from exc

        config = uvicorn.Config(
            app,
            host=self.host,
            port=self.port,
            log_level="warning",
            lifespan="off",
            access_log=False,
        )
        self._server = uvicorn.Server(config)
        self._thread = threading.Thread(
            target=self._serve,
            args=(self._server,),
            name=f"respec-validator-server-{self.port}",
            daemon=True,
        )
        self._thread.start()

        deadline = time.monotonic() + self.start_timeout
        while not self._server.started:
            if not self._thread.is_alive():
                raise ServerError(
                    f"Could not serve {self.root} on {self.base_url} "
                    "(is the port already in use?)"
                )
            if time.monotonic() > deadline:
                self.stop()
                raise ServerError(
                    f"Server on {self.base_url} did not start within "
                    f"{self.start_timeout:.1f}s"
                )
            time.sleep(_POLL_INTERVAL)

        logger.debug("Serving %s at %s", self.root, self.base_url)
        return self

    def _serve(self, server: uvicorn.Server) -> None:
        try:
            server.run()
        except SystemExit:
            # uvicorn exits when it cannot bind; start() reports it.
            logger.debug("Server thread for %s exited during startup", self.base_url)

    def stop(self) -> None:
        if self._server is not None:
            self._server.should_exit = True
        if self._thread is not None:
            self._thread.join(timeout=5.0)
        self._server = None
        self._thread = None

    def __enter__(self) -> "LocalServer":
        return self.start()

    def __exit__(self, *exc_info) -> None:
        self.stop()
