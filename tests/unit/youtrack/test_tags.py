"""Tests for YouTrack tag operations."""

import pytest

from mcp_youtrack.exceptions import TagNotFoundError, YouTrackApiError
from mcp_youtrack.models.youtrack import TagAction
from mcp_youtrack.youtrack.constants import TAG_FIELDS
from mcp_youtrack.youtrack.tags import YouTrackTags


@pytest.fixture
def tags(mock_client):
    """Create YouTrackTags over a mocked client."""
    return YouTrackTags(mock_client)


def test_add_does_not_list_first(tags, mock_client):
    """Test adding a tag posts once and only lists afterwards."""
    mock_client.post.return_value = {"id": "6-2", "name": "ui"}
    mock_client.get_list.return_value = [{"id": "6-2", "name": "ui"}]

    result = tags.manage_tag("WEB-1", "ui", TagAction.ADD)

    mock_client.post.assert_called_once()
    assert mock_client.post.call_args.kwargs["json"] == {"name": "ui"}
    assert mock_client.get_list.call_count == 1
    assert [tag.name for tag in result.tags] == ["ui"]
    assert result.issue_id == "WEB-1"


def test_remove_deletes_matching_id(tags, mock_client):
    """Test removal matches the name case-insensitively and deletes by id."""
    mock_client.get_list.side_effect = [
        [{"id": "6-1", "name": "Regression"}, {"id": "6-2", "name": "ui"}],
        [{"id": "6-2", "name": "ui"}],
    ]

    result = tags.manage_tag("WEB-1", "regression", TagAction.REMOVE)

    mock_client.delete.assert_called_once()
    assert mock_client.delete.call_args.args == ("/issues/WEB-1/tags/6-1",)
    assert mock_client.delete.call_args.kwargs["fields"] == TAG_FIELDS
    assert [tag.name for tag in result.tags] == ["ui"]


def test_remove_missing_tag_raises_without_delete(tags, mock_client):
    """Test removing an absent tag fails before any delete is sent."""
    mock_client.get_list.return_value = [{"id": "6-2", "name": "ui"}]

    with pytest.raises(TagNotFoundError) as excinfo:
        tags.manage_tag("WEB-1", "regression", TagAction.REMOVE)

    assert excinfo.value.tag == "regression"
    assert excinfo.value.issue_id == "WEB-1"
    assert "regression" in str(excinfo.value)
    mock_client.delete.assert_not_called()


def test_remove_match_without_id_raises(tags, mock_client):
    """Test a matching tag without an id cannot be removed."""
    mock_client.get_list.return_value = [{"name": "regression"}]

    with pytest.raises(TagNotFoundError):
        tags.remove_tag("WEB-1", "regression")

    mock_client.delete.assert_not_called()


def test_failed_delete_propagates(tags, mock_client):
    """Test a failed delete is not reported as success."""
    mock_client.get_list.return_value = [{"id": "6-1", "name": "regression"}]
    mock_client.delete.side_effect = YouTrackApiError(
        "Remove tag failed", action="Remove tag", status_code=500
    )

    with pytest.raises(YouTrackApiError):
        tags.manage_tag("WEB-1", "regression", TagAction.REMOVE)

    assert mock_client.get_list.call_count == 1


@pytest.mark.parametrize(
    "value, expected",
    [("add", TagAction.ADD), ("Remove", TagAction.REMOVE), (TagAction.ADD, TagAction.ADD)],
)
def test_tag_action_parse(value, expected):
    """Test tag actions parse case-insensitively."""
    assert TagAction.parse(value) is expected


def test_tag_action_parse_unknown():
    """Test unknown tag actions are rejected."""
    with pytest.raises(ValueError, match="toggle"):
        TagAction.parse("toggle")
