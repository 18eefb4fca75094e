"""Socket binding and uvicorn serving for the GitHub Mapper API."""

import logging
import socket
import sys

import uvicorn

from github_mapper.config import Settings, settings
from github_mapper.main import SERVICE_NAME, app

logger = logging.getLogger(__name__)

MAX_PORT = 65535


class StartupError(Exception):
    """Fatal error raised before the service starts accepting connections."""


class BindError(StartupError):
    """The listening socket could not be bound."""

    def __init__(self, host: str, port: int, reason: str):
        self.host = host
        self.port = port
        self.reason = reason
        super().__init__(f"Cannot bind {host}:{port}: {reason}")


def bind_socket(host: str, port: int, backlog: int = 2048) -> socket.socket:
    """Bind and listen on (host, port).

    The socket is listening on return, so a second bind of the same port
    fails even with SO_REUSEADDR set.
    """
    if not 0 <= port <= MAX_PORT:
        raise BindError(host, port, f"port must be in range 0-{MAX_PORT}")

    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    try:
        sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        sock.bind((host, port))
        sock.listen(backlog)
    except OSError as e:
        sock.close()
        raise BindError(host, port, e.strerror or str(e)) from e
    sock.set_inheritable(True)
    return sock


def build_server(config: Settings = settings) -> uvicorn.Server:
    """Create a uvicorn server for the application without starting it."""
    return uvicorn.Server(
        uvicorn.Config(
            app,
            host=config.host,
            port=config.port,
            log_level=config.log_level.lower(),
        )
    )


def serve(config: Settings = settings) -> None:
    """Bind the configured port and serve until the process is stopped.

    Raises:
        BindError: if the port is out of range, in use, or not permitted.
    """
    uv_server = build_server(config)
    sock = bind_socket(config.host, config.port)
    port = sock.getsockname()[1]
    logger.info(f"Starting {SERVICE_NAME} on port {port}")
    try:
        uv_server.run(sockets=[sock])
    finally:
        sock.close()


def main() -> None:
    """Process entry point."""
    try:
        serve(settings)
    except StartupError as e:
        logger.error(f"Failed to start server: {e}")
        sys.exit(1)
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
