"""Pytest fixtures for YouTrack tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from mcp_youtrack.youtrack.client import YouTrackClient, YouTrackPage
from mcp_youtrack.youtrack.config import YouTrackConfig
from mcp_youtrack.youtrack.projects import YouTrackProjects


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for YouTrack."""
    with patch.dict(
        os.environ,
        {
            "YOUTRACK_URL": "https://youtrack.example.com/",
            "YOUTRACK_TOKEN": "perm:secret-token",
        },
        clear=True,
    ):
        yield


@pytest.fixture
def youtrack_config():
    """Create a YouTrackConfig instance for tests."""
    return YouTrackConfig(url="https://youtrack.example.com", token="perm:secret-token")


@pytest.fixture
def youtrack_client(youtrack_config):
    """Create a YouTrackClient with a mocked session."""
    client = YouTrackClient(youtrack_config)
    client.session = MagicMock()
    return client


@pytest.fixture
def mock_client(youtrack_config):
    """Create a fully mocked YouTrackClient for operation tests."""
    client = MagicMock(spec=YouTrackClient)
    client.config = youtrack_config
    return client


@pytest.fixture
def mock_projects():
    """Create mocked project operations."""
    projects = MagicMock(spec=YouTrackProjects)
    projects.build_project_ref.return_value = {"id": "0-1"}
    return projects


@pytest.fixture
def make_page():
    """Build a YouTrackPage the way the client would for the given items."""

    def _make_page(items, offset=0, limit=20, total=None):
        return YouTrackPage(
            items=items,
            offset=offset,
            limit=limit,
            next_offset=offset + limit if len(items) == limit else None,
            total=total,
        )

    return _make_page
