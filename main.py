"""
Launch the window shell for the server root in the current directory.
"""

from webdesk.cli import app

if __name__ == "__main__":
    app(["window"])
