"""Listener setup and process entry point."""

import logging
import socket
import sys

from werkzeug.serving import BaseWSGIServer, WSGIRequestHandler, make_server

from greeter.app import create_app
from greeter.config import READ_HEADER_TIMEOUT, Config

LOGGER = logging.getLogger(__name__)


class GreeterRequestHandler(WSGIRequestHandler):
    """Request handler with a bounded wait for the client's request headers."""

    def setup(self) -> None:
        # StreamRequestHandler.setup applies self.timeout to the connection.
        self.timeout = getattr(self.server, "read_header_timeout", READ_HEADER_TIMEOUT)
        super().setup()

    def connection_dropped(self, error, environ=None) -> None:
        LOGGER.warning("Failed to write response: %s", error)


def _parse_port(port: str) -> int:
    number = int(port)
    if not 0 <= number <= 65535:
        raise ValueError(f"port out of range: {port}")
    return number


def build_server(config: Config, app=None) -> BaseWSGIServer:
    """Bind the listener for ``config``.

    Raises OSError when the address cannot be bound and ValueError when the
    port is not a valid TCP port number.
    """
    if app is None:
        app = create_app(config)
    port = _parse_port(config.port)
    with socket.create_server((config.host, port)) as sock:
        # werkzeug duplicates the descriptor, so the original can be closed.
        server = make_server(
            config.host,
            port,
            app,
            threaded=True,
            request_handler=GreeterRequestHandler,
            fd=sock.fileno(),
        )
    server.read_header_timeout = config.read_header_timeout
    return server


def serve(config: Config) -> None:
    LOGGER.info("Server starting on port %s", config.port)
    try:
        server = build_server(config)
    except (OSError, ValueError) as exc:
        LOGGER.critical("Failed to listen on %s: %s", config.bind_address, exc)
        sys.exit(1)

    # werkzeug swallows KeyboardInterrupt and closes the socket on the way out.
    server.serve_forever()


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    serve(Config.from_env())


if __name__ == "__main__":
    main()
