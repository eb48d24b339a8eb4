"""Embedded HTTP(S) server exposing a health-check endpoint."""

from __future__ import annotations

import http.server
import ssl
import threading

from .engine import FalcoError, Priority
from .logger import Logger, default_logger

_HEALTHZ_BODY = b'{"status": "ok"}'


def _make_handler(
    healthz_endpoint: str, logger: Logger
) -> type[http.server.BaseHTTPRequestHandler]:
    class _Handler(http.server.BaseHTTPRequestHandler):
        def do_GET(self) -> None:  # noqa: N802
            path = self.path.split("?", 1)[0]
            if path == healthz_endpoint:
                self.send_response(200)
                self.send_header("Content-Type", "application/json")
                self.send_header("Content-Length", str(len(_HEALTHZ_BODY)))
                self.end_headers()
                self.wfile.write(_HEALTHZ_BODY)
            else:
                self.send_error(404)

        def log_message(self, format: str, *args: object) -> None:
            # Route request logs through the application logger instead of stderr.
            logger.log(
                Priority.DEBUG,
                f"webserver: {self.address_string()} {format % args}\n",
            )

    return _Handler


class Webserver:
    """Serves ``{"status": "ok"}`` at a health endpoint in a background thread."""

    def __init__(self, *, logger: Logger | None = None) -> None:
        self._logger = logger if logger is not None else default_logger
        self._server: http.server.ThreadingHTTPServer | None = None
        self._thread: threading.Thread | None = None
        self._running = False

    def __enter__(self) -> "Webserver":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.stop()

    @property
    def port(self) -> int | None:
        """The port actually listened on, or None when stopped."""
        if self._server is None:
            return None
        return self._server.server_address[1]

    def start(
        self,
        listen_port: int,
        healthz_endpoint: str,
        ssl_certificate: str,
        ssl_enabled: bool,
    ) -> None:
        """Start listening on all interfaces; raises FalcoError on failure."""
        if self._running:
            raise FalcoError("attempted restarting webserver without stopping it first")

        context: ssl.SSLContext | None = None
        if ssl_enabled:
            try:
                context = ssl.SSLContext(ssl.PROTOCOL_TLS_SERVER)
                context.load_cert_chain(certfile=ssl_certificate, keyfile=ssl_certificate)
            except (OSError, ssl.SSLError) as exc:
                raise FalcoError("invalid webserver configuration") from exc

        try:
            server = http.server.ThreadingHTTPServer(
                ("0.0.0.0", listen_port), _make_handler(healthz_endpoint, self._logger)
            )
        except OSError as exc:
            self._logger.log(Priority.ERROR, f"webserver: {exc}\n")
            raise FalcoError("an error occurred while starting webserver") from exc

        server.daemon_threads = True
        if context is not None:
            server.socket = context.wrap_socket(server.socket, server_side=True)

        self._server = server
        self._thread = threading.Thread(
            target=server.serve_forever, name="webserver", daemon=True
        )
        self._thread.start()
        self._running = True

    def stop(self) -> None:
        """Shut the server down and wait for its thread; safe to repeat."""
        if not self._running:
            return
        if self._server is not None:
            self._server.shutdown()
        if self._thread is not None:
            self._thread.join()
            self._thread = None
        if self._server is not None:
            self._server.server_close()
            self._server = None
        self._running = False