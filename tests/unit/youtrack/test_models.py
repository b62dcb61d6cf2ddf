"""Tests for the YouTrack response models."""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from mcp_youtrack.models.youtrack import (
    YouTrackComment,
    YouTrackCustomFieldSchema,
    YouTrackIssueCreated,
    YouTrackIssueDetails,
    YouTrackIssueSummary,
    YouTrackIssueUpdateResult,
    YouTrackProjectDetails,
    YouTrackProjectRef,
    YouTrackSavedSearch,
    YouTrackTagRef,
    YouTrackUserRef,
)
from mcp_youtrack.models.youtrack.link import parse_link_counts
from mcp_youtrack.utils.date import parse_timestamp
from tests.utils.factories import YouTrackCustomFieldFactory, YouTrackIssueFactory

INSTANT = datetime(2023, 11, 14, 22, 13, 20, tzinfo=timezone.utc)


class TestTimestamps:
    """Tests for timestamp decoding."""

    @pytest.mark.parametrize(
        "value",
        [
            1700000000000,
            1700000000000.0,
            "1700000000000",
            "2023-11-14T22:13:20Z",
            "2023-11-14T22:13:20+00:00",
            "2023-11-14T23:13:20+01:00",
            "2023-11-14T22:13:20",
        ],
    )
    def test_same_instant(self, value):
        """Test every accepted shape decodes to the same aware instant."""
        parsed = parse_timestamp(value)

        assert parsed == INSTANT
        assert parsed.tzinfo is not None

    @pytest.mark.parametrize(
        "value",
        [None, True, "", "yesterday", "12:xx", {"ms": 1}, [1], "1e400", "9" * 5000],
    )
    def test_unparseable_is_none(self, value):
        """Test other shapes decode to None without raising."""
        assert parse_timestamp(value) is None


class TestReferences:
    """Tests for embedded reference models."""

    def test_missing_keys_are_none(self):
        """Test absent keys decode to None rather than defaults."""
        project = YouTrackProjectRef.from_api_response({"shortName": "WEB"})

        assert project.short_name == "WEB"
        assert project.id is None
        assert project.name is None

    def test_user_timezone_aliases(self):
        """Test both time zone spellings are accepted."""
        assert YouTrackUserRef.from_api_response({"timezone": "UTC"}).timezone == "UTC"
        assert (
            YouTrackUserRef.from_api_response({"timeZone": "Europe/Berlin"}).timezone
            == "Europe/Berlin"
        )

    def test_tag_color_and_name_match(self):
        """Test tag color comes from the background and names match case-insensitively."""
        tag = YouTrackTagRef.from_api_response(
            {"id": "6-1", "name": "Regression", "color": {"background": "#f00"}}
        )

        assert tag.color == "#f00"
        assert tag.matches_name("REGRESSION")
        assert not tag.matches_name("regress")

    def test_non_dict_returns_default(self):
        """Test non-dictionary input yields an empty instance."""
        assert YouTrackUserRef.from_api_response("jdoe") == YouTrackUserRef()

    def test_models_are_frozen(self):
        """Test decoded models cannot be mutated."""
        project = YouTrackProjectRef.from_api_response({"id": "0-1"})

        with pytest.raises(ValidationError):
            project.id = "0-2"


class TestIssues:
    """Tests for issue models."""

    def test_issue_details(self):
        """Test decoding a full issue."""
        issue = YouTrackIssueDetails.from_api_response(YouTrackIssueFactory.create())

        assert issue.id_readable == "WEB-1"
        assert issue.project.short_name == "WEB"
        assert issue.reporter.full_name == "John Doe"
        assert issue.created == INSTANT
        assert issue.resolved is None
        assert issue.votes == 3
        assert [tag.name for tag in issue.tags] == ["regression"]
        assert issue.custom_fields == {
            "Priority": "Critical",
            "Assignee": "asmith",
            "Fix versions": ["1.0", "1.1"],
            "Estimation": 120,
        }

    def test_issue_details_without_custom_fields(self):
        """Test an issue without customFields keeps the map absent."""
        data = YouTrackIssueFactory.create()
        del data["customFields"]

        assert YouTrackIssueDetails.from_api_response(data).custom_fields is None

    def test_boolean_votes_rejected(self):
        """Test a boolean votes value is not read as a count."""
        data = YouTrackIssueFactory.create(votes=True)

        assert YouTrackIssueDetails.from_api_response(data).votes is None

    def test_issue_summary(self):
        """Test decoding a search hit."""
        issue = YouTrackIssueSummary.from_api_response(
            YouTrackIssueFactory.create_summary("WEB-7")
        )

        assert issue.id_readable == "WEB-7"
        assert issue.summary == "Issue WEB-7"
        assert issue.updated == INSTANT

    def test_issue_created(self):
        """Test decoding a created issue."""
        created = YouTrackIssueCreated.from_api_response(
            {"id": "2-9", "idReadable": "WEB-9", "summary": "New", "url": None}
        )

        assert created.id_readable == "WEB-9"
        assert created.url is None

    def test_update_result_falls_back_to_requested_id(self):
        """Test the update result uses the requested id when none is returned."""
        result = YouTrackIssueUpdateResult.from_api_response(
            {"summary": "s"}, issue_id="WEB-1", fields_updated=["summary"]
        )

        assert result.id == "WEB-1"
        assert result.fields_updated == ["summary"]

    def test_simplified_dict_drops_absent_values(self):
        """Test the simplified form omits None and renders timestamps as text."""
        issue = YouTrackIssueSummary.from_api_response(
            {"idReadable": "WEB-1", "created": 1700000000000}
        )

        assert issue.to_simplified_dict() == {
            "id_readable": "WEB-1",
            "created": "2023-11-14T22:13:20Z",
        }
        assert issue.format_timestamp(issue.created) == "2023-11-14T22:13:20+00:00"
        assert issue.format_timestamp(issue.updated) is None


class TestCustomFieldSchema:
    """Tests for custom field schema decoding."""

    def test_nested_and_flat_decode_identically(self):
        """Test wrapped nested entries and flat entries give the same schema."""
        nested = YouTrackCustomFieldSchema.from_api_response(
            YouTrackCustomFieldFactory.create_nested()
        )
        flat = YouTrackCustomFieldSchema.from_api_response(
            YouTrackCustomFieldFactory.create_flat()
        )

        assert nested == flat
        assert nested.name == "Priority"
        assert nested.type == "enum[1]"
        assert nested.required is True
        assert nested.can_be_empty is False
        assert nested.default_value == {"name": "Normal"}
        assert [option.name for option in nested.possible_values] == [
            "Critical",
            "Normal",
        ]
        assert nested.possible_values[0].color == "#f00"

    def test_nested_identity_wins_and_flat_fills_gaps(self):
        """Test the nested name wins and a missing nested type comes from the top level."""
        schema = YouTrackCustomFieldSchema.from_api_response(
            {
                "field": {"name": "Nested"},
                "name": "Flat",
                "fieldType": {"id": "user[1]"},
            }
        )

        assert schema.name == "Nested"
        assert schema.type == "user[1]"

    @pytest.mark.parametrize(
        "flags, required, can_be_empty",
        [
            ({"isRequired": True, "canBeEmpty": True}, True, True),
            ({"canBeEmpty": False}, True, False),
            ({"canBeEmpty": True}, False, True),
            ({"isRequired": True}, True, False),
            ({}, False, True),
            ({"isRequired": "yes", "canBeEmpty": "no"}, False, True),
        ],
    )
    def test_required_flags(self, flags, required, can_be_empty):
        """Test required and can_be_empty derivation from the raw flags."""
        schema = YouTrackCustomFieldSchema.from_api_response({"name": "F", **flags})

        assert schema.required is required
        assert schema.can_be_empty is can_be_empty

    def test_project_details_schemas(self):
        """Test project details decode their custom field schemas."""
        project = YouTrackProjectDetails.from_api_response(
            {
                "id": "0-1",
                "shortName": "WEB",
                "leader": {"login": "lead"},
                "created": "1700000000000",
                "customFields": [
                    YouTrackCustomFieldFactory.create_nested("Priority"),
                    YouTrackCustomFieldFactory.create_nested("Type"),
                ],
            }
        )

        assert project.leader.login == "lead"
        assert project.created == INSTANT
        assert [schema.name for schema in project.custom_field_schemas] == [
            "Priority",
            "Type",
        ]


class TestMisc:
    """Tests for comment, saved search and link decoding."""

    def test_comment(self):
        """Test decoding a comment."""
        comment = YouTrackComment.from_api_response(
            {
                "id": "4-1",
                "text": "Looks good",
                "author": {"login": "jdoe"},
                "created": 1700000000000,
            }
        )

        assert comment.author.login == "jdoe"
        assert comment.created == INSTANT
        assert comment.updated is None

    def test_saved_search(self):
        """Test decoding a saved search."""
        search = YouTrackSavedSearch.from_api_response(
            {"id": "8-1", "name": "Mine", "query": "for: me", "owner": {"login": "jdoe"}}
        )

        assert search.query == "for: me"
        assert search.owner.login == "jdoe"

    def test_link_counts(self):
        """Test link counts are read per link type."""
        counts = parse_link_counts(
            {
                "linkTypeAggregated": [
                    {"name": "relates to", "issues": {"size": 2}},
                    {"name": "duplicates", "issues": {"size": 0}},
                    {"name": "broken"},
                    {"issues": {"size": 1}},
                ]
            }
        )

        assert counts == {"relates to": 2, "duplicates": 0}

    @pytest.mark.parametrize(
        "data", [None, {}, {"linkTypeAggregated": []}, {"linkTypeAggregated": [{}]}]
    )
    def test_link_counts_absent(self, data):
        """Test responses without usable counts give None."""
        assert parse_link_counts(data) is None
