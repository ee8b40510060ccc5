"""
Command line interface for the Webdesk file server.
"""

import os
import sys
from pathlib import Path

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import get_settings
from .server import FileServer
from .services.resolver import load_config, load_mime_table
from .shell import WindowShell
from .utils.logging import setup_logging

app = typer.Typer(
    name="webdesk",
    help="Webdesk - local development file server with a native window shell",
    add_completion=False,
)

console = Console()

WINDOW_KEYS = ["project", "width", "height", "home"]


@app.command()
def serve(
    root: Path = typer.Option(None, help="Server root directory"),
    host: str = typer.Option(None, help="Host to bind to"),
    port: int = typer.Option(None, help="Port to use when Config.txt sets none"),
    log_level: str = typer.Option(None, help="Logging level"),
) -> None:
    """Start the file server in the foreground."""
    settings = get_settings(root=root, host=host, port=port, log_level=log_level)
    setup_logging(settings.log_level, settings.log_file)

    server = FileServer(settings)
    server.load()

    def announce() -> None:
        print(f"🚀 Webdesk serving {settings.root_dir} on http://{settings.host}:{server.port}")

    server.serve(announce)


@app.command()
def window(
    root: Path = typer.Option(None, help="Server root directory"),
    log_level: str = typer.Option(None, help="Logging level"),
) -> None:
    """Start the file server and open the project window."""
    settings = get_settings(root=root, log_level=log_level)
    setup_logging(settings.log_level, settings.log_file)
    WindowShell(settings).run()


@app.command()
def config(root: Path = typer.Option(None, help="Server root directory")) -> None:
    """Show current configuration."""
    settings = get_settings(root=root)

    table = Table(title="Webdesk Configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Root", settings.root_dir)
    table.add_row("Host", settings.host)
    table.add_row("Default Port", str(settings.port))
    table.add_row("Home Document", settings.home_document)
    table.add_row("Log Level", settings.log_level)

    for key, value in load_config(settings.root_dir, settings.config_name).items():
        table.add_row(f"{settings.config_name}.txt: {key}", str(value))

    console.print(table)


@app.command()
def check(root: Path = typer.Option(None, help="Server root directory")) -> None:
    """Check the server root and its configuration files."""
    settings = get_settings(root=root)
    root_dir = settings.root_dir
    issues = []

    print(f"🔍 Checking server root {root_dir}...")

    if not os.path.isdir(root_dir):
        issues.append(f"❌ Server root not found: {root_dir}")
    else:
        try:
            mime_table = load_mime_table(root_dir, settings.mime_name)
            print(f"✅ MIME table loaded: {len(mime_table)} types")
        except OSError as e:
            mime_table = {}
            issues.append(f"❌ Cannot read {settings.mime_name}.txt: {e}")

        cfg = load_config(root_dir, settings.config_name)
        if "port" not in cfg:
            issues.append(f"❌ No port set in {settings.config_name}.txt")
        for key in WINDOW_KEYS:
            if key not in cfg:
                issues.append(f"❌ No {key} set in {settings.config_name}.txt")

        home = os.path.join(root_dir, settings.home_document)
        if os.path.isfile(home):
            print(f"✅ Default document found: {settings.home_document}")
        else:
            issues.append(f"❌ Default document missing: {settings.home_document}")

        ext = settings.home_document.rsplit(".", 1)[-1]
        if mime_table and ext not in mime_table:
            issues.append(f"❌ No MIME type for default document extension: {ext}")

    if issues:
        print("\n🚨 Issues found:")
        for issue in issues:
            print(f"  {issue}")
        sys.exit(1)
    else:
        print("\n✅ All checks passed!")


@app.command()
def version() -> None:
    """Show version information."""
    print(f"Webdesk v{__version__}")
    print("Local development file server with a native window shell")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
