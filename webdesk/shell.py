"""
Native window shell for the file server.

Starts the server, waits for it to listen and opens the project's home
document in a pywebview window sized from Config.txt.
"""

import html
import threading
from collections.abc import Mapping

import webview
from loguru import logger

from .config import Settings, get_settings
from .server import FileServer, init
from .utils.exceptions import ConfigurationException

ERROR_TITLE = "Server"


def check_condition(condition: bool, error: str) -> None:
    """
    Check a condition.

    Raises:
        ConfigurationException: With `error` as message if the condition fails
    """
    if not condition:
        raise ConfigurationException(error)


def window_options(config: Mapping[str, int | str]) -> dict[str, str]:
    """Normalize the debug and fullscreen flags to "on" or "off"."""
    return {
        "debug": "on" if config.get("debug") == "on" else "off",
        "fullscreen": "on" if config.get("fullscreen") == "on" else "off",
    }


class WindowShell:
    """Hosts the served app in native windows, one per project name."""

    def __init__(self, settings: Settings | None = None):
        """Initialize WindowShell."""
        self.settings = settings or get_settings()
        self.windows: dict[str, webview.Window] = {}
        self.server: FileServer | None = None
        self.ready = threading.Event()
        self.debug = False
        self.opened = False

    def load_app(self, name: str, url: str, width: int, height: int, options: Mapping[str, str]) -> None:
        """
        Load an app into a window. A name that already has a window is ignored.

        Args:
            name: Window title and registry key
            url: URL to load
            width: Window width, also the minimum width
            height: Window height, also the minimum height
            options: `debug` and `fullscreen` flags, "on" or "off"
        """
        if name in self.windows:
            return

        window = webview.create_window(
            name,
            url=url,
            width=width,
            height=height,
            min_size=(width, height),
            background_color="#FFFFFF",
            fullscreen=(options["fullscreen"] == "on"),
        )
        window.events.closed += lambda: self.windows.pop(name, None)
        self.windows[name] = window
        self.opened = True
        if options["debug"] == "on":
            self.debug = True

        logger.info("Opened window", name=name, url=url, width=width, height=height)

    def show_error(self, message: str) -> None:
        """Show a configuration error in its own window."""
        logger.error("Window shell configuration error", error=message)
        webview.create_window(
            ERROR_TITLE,
            html=f"<p style='font-family: sans-serif'>{html.escape(message)}</p>",
            width=420,
            height=140,
        )
        self.opened = True

    def on_server_ready(self) -> None:
        self.ready.set()

    def open_home(self, config: Mapping[str, int | str], port: int) -> None:
        """Validate the window keys of the config and open the home document on `port`."""
        try:
            check_condition("project" in config, "No project name set.")
            check_condition("width" in config, "No width set for window.")
            check_condition("height" in config, "No height set for window.")
            check_condition("home" in config, "No home document set.")
            url = f"http://localhost:{port}/{config['home']}"
            self.load_app(str(config["project"]), url, config["width"], config["height"], window_options(config))
        except ConfigurationException as e:
            self.show_error(e.message)

    def wait_for_server(self) -> bool:
        """Block until the server listens. False if its thread died first."""
        while not self.ready.wait(0.1):
            if not self.server.is_running():
                return False
        return True

    def run(self) -> None:
        """Start the server, open the home window and run the GUI loop."""
        self.server = init(self.on_server_ready, self.settings)
        if not self.wait_for_server():
            logger.error("File server did not start, no window opened")
            return

        self.open_home(self.server.config, self.server.listening_port)
        if self.opened:
            webview.start(debug=self.debug)

        self.server.stop()
