"""Tests for YouTrack comment operations."""

import pytest

from mcp_youtrack.youtrack.comments import YouTrackComments


@pytest.fixture
def mock_comment_response():
    """Mock single comment response data."""
    return {
        "id": "4-17",
        "text": "Reproduced on 1.2",
        "author": {"login": "jdoe", "fullName": "John Doe", "email": "jdoe@example.com"},
        "created": 1700000000000,
        "updated": None,
    }


@pytest.fixture
def comments(mock_client):
    """Create YouTrackComments over a mocked client."""
    return YouTrackComments(mock_client)


def test_add_comment(comments, mock_client, mock_comment_response):
    """Test adding a comment posts its text."""
    mock_client.post.return_value = mock_comment_response

    comment = comments.add_comment("WEB-1", "Reproduced on 1.2")

    assert comment.id == "4-17"
    assert comment.author.full_name == "John Doe"
    call = mock_client.post.call_args
    assert call.args == ("/issues/WEB-1/comments",)
    assert call.kwargs["json"] == {"text": "Reproduced on 1.2"}


def test_get_comments_full_page(comments, mock_client, mock_comment_response, make_page):
    """Test a full page of comments carries the next offset."""
    mock_client.list_page.return_value = make_page(
        [mock_comment_response] * 5, offset=10, limit=5
    )

    page = comments.get_comments("WEB-1", 10, 5)

    assert page.issue_id == "WEB-1"
    assert len(page.comments) == 5
    assert page.next_offset == 15


def test_get_comments_last_page(comments, mock_client, mock_comment_response, make_page):
    """Test a short page of comments ends the listing."""
    mock_client.list_page.return_value = make_page([mock_comment_response], limit=5)

    page = comments.get_comments("WEB-1", 0, 5)

    assert page.next_offset is None
