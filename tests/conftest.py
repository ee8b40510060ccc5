"""
Shared fixtures: a server root populated like a real Webdesk project.
"""

import pytest
from fastapi.testclient import TestClient

from webdesk.config import Settings
from webdesk.main import create_app
from webdesk.services.resolver import load_config, load_mime_table

MIME_TXT = "html=text/html,false\ntxt=text/plain,false\njson=application/json,false\npng=image/png,true\n"
CONFIG_TXT = "project=Demo\nwidth=800\nheight=600\nhome=Home.html\nport=0\n"
HOME_HTML = "<html><body>Home</body></html>"


@pytest.fixture
def server_root(tmp_path):
    """A server root with Mime.txt, Config.txt and Home.html."""
    (tmp_path / "Mime.txt").write_text(MIME_TXT)
    (tmp_path / "Config.txt").write_text(CONFIG_TXT)
    (tmp_path / "Home.html").write_text(HOME_HTML)
    return tmp_path


@pytest.fixture
def settings(server_root):
    return Settings(root=server_root)


@pytest.fixture
def app(server_root, settings):
    root = settings.root_dir
    return create_app(load_mime_table(root, "Mime"), load_config(root, "Config"), settings)


@pytest.fixture
def client(app):
    """Create a test client."""
    return TestClient(app)
