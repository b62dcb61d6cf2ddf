"""Tests for YouTrack project operations."""

import pytest

from mcp_youtrack.exceptions import YouTrackApiError, YouTrackTransportError
from mcp_youtrack.youtrack.projects import YouTrackProjects, is_project_entity_id
from tests.utils.factories import YouTrackCustomFieldFactory


@pytest.fixture
def projects(mock_client):
    """Create YouTrackProjects over a mocked client."""
    return YouTrackProjects(mock_client)


@pytest.mark.parametrize(
    "value, expected",
    [("42-17", True), ("0-0", True), ("DEMO", False), ("42-", False), ("a-1", False)],
)
def test_is_project_entity_id(value, expected):
    """Test the digits-dash-digits entity id pattern."""
    assert is_project_entity_id(value) is expected


def test_build_project_ref_entity_id_skips_lookup(projects, mock_client):
    """Test an entity id is sent as an id without a lookup."""
    assert projects.build_project_ref("42-17") == {"id": "42-17"}
    mock_client.get.assert_not_called()


def test_build_project_ref_short_name_resolved(projects, mock_client):
    """Test a short name is looked up and the resolved reference is sent."""
    mock_client.get.return_value = {"id": "0-5", "shortName": "DEMO", "name": "Demo"}

    ref = projects.build_project_ref("DEMO")

    assert ref == {"id": "0-5", "shortName": "DEMO", "name": "Demo"}
    assert mock_client.get.call_args.args[0] == "/admin/projects/DEMO"


def test_build_project_ref_omits_missing_keys(projects, mock_client):
    """Test keys the lookup did not return are left out."""
    mock_client.get.return_value = {"id": "0-5"}

    assert projects.build_project_ref("DEMO") == {"id": "0-5", "shortName": "DEMO"}


@pytest.mark.parametrize(
    "error",
    [
        YouTrackApiError("Get project DEMO failed", action="Get project DEMO", status_code=404),
        YouTrackTransportError("Get project DEMO failed", action="Get project DEMO"),
    ],
)
def test_build_project_ref_falls_back_to_short_name(projects, mock_client, error):
    """Test a failed lookup falls back to sending the short name."""
    mock_client.get.side_effect = error

    assert projects.build_project_ref("DEMO") == {"shortName": "DEMO"}


def test_find_projects(projects, mock_client, make_page):
    """Test finding projects sends the query and paging."""
    mock_client.list_page.return_value = make_page(
        [{"id": "0-1", "name": "Website", "shortName": "WEB"}], limit=10
    )

    result = projects.find_projects("web", 0, 10)

    assert [project.short_name for project in result] == ["WEB"]
    call = mock_client.list_page.call_args
    assert call.args == ("/admin/projects",)
    assert call.kwargs["params"] == {"query": "web"}
    assert call.kwargs["offset"] == 0
    assert call.kwargs["limit"] == 10
    assert call.kwargs["fields"] == "id,name,shortName"


def test_get_issue_fields_schema(projects, mock_client):
    """Test reading a project's custom field schemas."""
    mock_client.get_list.return_value = [
        YouTrackCustomFieldFactory.create_nested("Priority"),
        YouTrackCustomFieldFactory.create_flat("State", fieldType={"id": "state[1]"}),
    ]

    schema = projects.get_issue_fields_schema("WEB")

    assert schema.project_id == "WEB"
    assert [(field.name, field.type) for field in schema.fields] == [
        ("Priority", "enum[1]"),
        ("State", "state[1]"),
    ]
    assert mock_client.get_list.call_args.args == ("/admin/projects/WEB/customFields",)
    assert "projectCustomField" in mock_client.get_list.call_args.kwargs["fields"]
