"""
Pytest configuration and fixtures for the qBittorrent add proxy tests.
"""
import os
import sys

# Add project root to path for imports
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

import pytest
import tempfile
import shutil
from unittest.mock import MagicMock

import requests
from fastapi.testclient import TestClient

from api.qbittorrent import QBittorrentClient
from api.server import create_app
from utils.app_config import AppConfig


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_path = tempfile.mkdtemp()
    yield temp_path
    # Cleanup after test
    shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def static_dir(temp_dir):
    """Create a small front-end bundle to serve as static assets."""
    root = os.path.join(temp_dir, 'wwwroot')
    os.makedirs(os.path.join(root, 'assets'))
    with open(os.path.join(root, 'index.html'), 'w', encoding='utf-8') as f:
        f.write('<html><body>Torrent Adder</body></html>')
    with open(os.path.join(root, 'assets', 'app.js'), 'w', encoding='utf-8') as f:
        f.write('console.log("app");')
    return root


@pytest.fixture
def app_config(static_dir):
    """Configuration pointing at a fake daemon and the temporary bundle."""
    return AppConfig(
        qbittorrent_host='192.168.1.2',
        qbittorrent_port=12301,
        movies_directory='/data/movies',
        series_directory='/data/series',
        static_directory=static_dir,
        request_timeout=5,
    )


@pytest.fixture
def mock_session():
    """requests.Session stand-in whose POSTs succeed with 200."""
    session = MagicMock(spec=requests.Session)
    response = MagicMock()
    response.status_code = 200
    response.raise_for_status.return_value = None
    session.post.return_value = response
    return session


@pytest.fixture
def client(app_config, mock_session):
    """TestClient for an app whose daemon client uses the mock session."""
    qbittorrent = QBittorrentClient.from_config(app_config, session=mock_session)
    return TestClient(create_app(app_config, qbittorrent))
