"""
File server startup.

`init(on_ready)` loads the MIME table and Config.txt from the server root,
starts listening on the configured port in a background thread and calls
`on_ready` once the socket accepts connections.
"""

import threading
from collections.abc import Callable
from types import MappingProxyType

import uvicorn
from loguru import logger

from .config import Settings, get_settings
from .main import create_app
from .services.resolver import load_config, load_mime_table


class NotifyingServer(uvicorn.Server):
    """uvicorn server that reports when its sockets are listening."""

    def __init__(self, config: uvicorn.Config, on_ready: Callable[[], None] | None = None):
        super().__init__(config)
        self.on_ready = on_ready

    async def startup(self, sockets=None) -> None:
        await super().startup(sockets=sockets)
        if self.should_exit or self.on_ready is None:
            return
        on_ready, self.on_ready = self.on_ready, None
        on_ready()

    @property
    def bound_port(self) -> int | None:
        """Port of the first listening socket."""
        for server in getattr(self, "servers", []):
            for sock in server.sockets:
                return sock.getsockname()[1]
        return None


class FileServer:
    """The file server process: loaded tables plus one uvicorn listener."""

    def __init__(self, settings: Settings | None = None):
        """Initialize FileServer."""
        self.settings = settings or get_settings()
        self.mime_table = MappingProxyType({})
        self.config = MappingProxyType({})
        self.server: NotifyingServer | None = None
        self.thread: threading.Thread | None = None

    @property
    def port(self) -> int:
        """Port from Config.txt, or the settings port when it has none."""
        port = self.config.get("port")
        if isinstance(port, int):
            return port
        logger.warning("No port in config, using default", port=self.settings.port)
        return self.settings.port

    @property
    def listening_port(self) -> int:
        """Port the listener is bound to, or the configured port before it binds."""
        if self.server is not None and self.server.bound_port is not None:
            return self.server.bound_port
        return self.port

    def load(self) -> None:
        """Load the MIME table and config once. Failures are logged only."""
        root = self.settings.root_dir
        try:
            self.mime_table = MappingProxyType(load_mime_table(root, self.settings.mime_name))
        except OSError as e:
            logger.error(f"Error: {e}")
        self.config = MappingProxyType(load_config(root, self.settings.config_name))

    def build(self, on_ready: Callable[[], None] | None = None) -> NotifyingServer:
        """Create the application and its listener."""
        app = create_app(self.mime_table, self.config, self.settings)
        config = uvicorn.Config(app, host=self.settings.host, port=self.port, log_config=None)
        self.server = NotifyingServer(config, on_ready)
        return self.server

    def serve(self, on_ready: Callable[[], None] | None = None) -> None:
        """Run the listener in the calling thread until it stops."""
        server = self.build(on_ready)
        try:
            server.run()
        except SystemExit:
            # uvicorn exits when it cannot bind
            logger.error("File server could not listen", host=self.settings.host, port=server.config.port)

    def start(self, on_ready: Callable[[], None]) -> threading.Thread:
        """Run the listener in a background thread."""
        self.thread = threading.Thread(target=self.serve, args=(on_ready,), name="webdesk-server", daemon=True)
        self.thread.start()
        return self.thread

    def is_running(self) -> bool:
        return self.thread is not None and self.thread.is_alive()

    def stop(self) -> None:
        """Ask the listener to exit and wait for its thread."""
        if self.server is not None:
            self.server.should_exit = True
        if self.thread is not None:
            self.thread.join(timeout=5)
        logger.info("File server stopped")


def init(on_ready: Callable[[], None], settings: Settings | None = None) -> FileServer:
    """
    Load the server tables and start listening.

    Args:
        on_ready: Called exactly once, from the server thread, after the
            socket is listening. Never called if listening fails.
        settings: Process settings, read from the environment when omitted

    Returns:
        The running FileServer.
    """
    server = FileServer(settings)
    server.load()
    server.start(on_ready)
    return server
