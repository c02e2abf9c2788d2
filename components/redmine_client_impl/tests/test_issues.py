"""Unit tests for the issues API: filter, builder, show/delete and watchers.

The Transport is a MagicMock, so these tests check the paths, query parameters
and payloads handed to it.
"""

import json
from dataclasses import fields as dataclass_fields

import pytest

from redmine_client_impl.base import BuilderKind
from redmine_client_impl.issues import IssueBuilder, IssuesApi
from redmine_interface.errors import ApiError, ParseError
from redmine_interface.issue import Issue, IssueFields, build_issue


@pytest.fixture
def issues(transport):
    return IssuesApi(transport)

#--------------------------- list --------------------------

def test_issue_ids_accumulate_in_call_order(issues):
    # Act: one id, then two more
    params = issues.list().issue_id(1).issue_ids([2, 3]).query_params()

    # Assert: a single comma-joined parameter
    assert params == {"issue_id": "1,2,3"}


def test_scalar_filters_keep_last_value(issues):
    params = issues.list().status_id(1).status_id(5).project_id(2).query_params()

    assert params == {"status_id": "5", "project_id": "2"}


def test_all_filters_are_serialized(issues):
    params = (
        issues.list()
        .assigned_to_id(7)
        .parent_id(3)
        .project_id(1)
        .status_id(2)
        .subproject_id(4)
        .tracker_id(9)
        .offset(25)
        .limit(50)
        .query_params()
    )

    assert params == {
        "assigned_to_id": "7",
        "parent_id": "3",
        "project_id": "1",
        "status_id": "2",
        "subproject_id": "4",
        "tracker_id": "9",
        "offset": "25",
        "limit": "50",
    }


def test_empty_filter_sends_no_params(issues):
    assert issues.list().query_params() == {}


def test_list_does_not_perform_io_until_execute(issues, transport):
    issues.list().issue_id(1)

    transport.get.assert_not_called()


def test_list_execute_returns_issues(issues, transport, issue_raw):
    # Setup
    transport.get.return_value = json.dumps(
        {"issues": [issue_raw], "total_count": 1, "offset": 0, "limit": 25}
    )

    # Act
    result = issues.list().issue_id(1).issue_ids([2, 3]).execute()

    # Assert
    transport.get.assert_called_once_with("/issues.json", {"issue_id": "1,2,3"})
    assert [issue.id for issue in result] == [2]
    assert len(result) == 1
    assert result.total_count == 1
    assert result[0].assigned_to.name == "Jane Doe"


def test_list_execute_invalid_json_raises_parse_error(issues, transport):
    transport.get.return_value = "<html>Internal error</html>"

    with pytest.raises(ParseError):
        issues.list().execute()


def test_list_execute_wrong_envelope_raises_parse_error(issues, transport):
    transport.get.return_value = json.dumps({"errors": ["Forbidden"]})

    with pytest.raises(ParseError):
        issues.list().execute()


def test_list_execute_has_no_partial_result(issues, transport, issue_raw):
    # Setup: second issue lacks its mandatory subject
    broken = dict(issue_raw, id=3)
    del broken["subject"]
    transport.get.return_value = json.dumps({"issues": [issue_raw, broken]})

    # Assert: the whole call fails
    with pytest.raises(ParseError):
        issues.list().execute()

#--------------------------- show / delete --------------------------

def test_show_unwraps_envelope(issues, transport, issue_raw):
    transport.get.return_value = json.dumps({"issue": issue_raw})

    issue = issues.show(2).execute()

    transport.get.assert_called_once_with("/issues/2.json")
    assert isinstance(issue, Issue)
    assert issue.subject == "Crash on login"
    assert issue.status.name == "New"
    assert issue.category is None


def test_show_error_body_raises_parse_error(issues, transport):
    transport.get.return_value = ""

    with pytest.raises(ParseError):
        issues.show(999).execute()


def test_delete_targets_issue_path(issues, transport):
    transport.delete.return_value = True

    assert issues.delete(6).execute() is True
    transport.delete.assert_called_once_with("/issues/6.json")


def test_delete_propagates_api_error(issues, transport):
    transport.delete.side_effect = ApiError(404, "")

    with pytest.raises(ApiError) as exc_info:
        issues.delete(6).execute()
    assert exc_info.value.status_code == 404

#--------------------------- create / update --------------------------

def test_create_payload_contains_only_required_fields(issues):
    builder = issues.create(1, 2, 3, 4, "subject")

    assert builder.kind is BuilderKind.CREATE
    assert builder.payload() == {
        "issue": {
            "project_id": 1,
            "tracker_id": 2,
            "status_id": 3,
            "priority_id": 4,
            "subject": "subject",
            "is_private": False,
            "private_notes": False,
        }
    }


def test_create_execute_returns_location(issues, transport):
    # Setup
    transport.create.return_value = "/issues/42.json"

    # Act
    result = issues.create(1, 1, 1, 1, "subject").is_private(True).estimated_hours(3.4).execute()

    # Assert
    assert result == "/issues/42.json"
    path, payload = transport.create.call_args.args
    assert path == "/issues.json"
    assert payload["issue"]["is_private"] is True
    assert payload["issue"]["estimated_hours"] == 3.4
    transport.update.assert_not_called()


def test_update_without_setters_sends_empty_issue(issues, transport):
    transport.update.return_value = True

    assert issues.update(5).execute() is True
    transport.update.assert_called_once_with("/issues/5.json", {"issue": {}})
    transport.create.assert_not_called()


def test_update_sends_only_fields_set(issues):
    builder = issues.update(5).notes("Fixed in r123").done_ratio(100)

    assert builder.kind is BuilderKind.UPDATE
    assert builder.update_id == 5
    assert builder.payload() == {"issue": {"notes": "Fixed in r123", "done_ratio": 100}}


def test_update_sends_explicit_zero_and_false(issues):
    payload = issues.update(5).category_id(0).is_private(False).description("").payload()

    assert payload == {"issue": {"category_id": 0, "is_private": False, "description": ""}}


def test_setters_last_call_wins(issues):
    payload = issues.update(5).subject("first").subject("second").payload()

    assert payload == {"issue": {"subject": "second"}}


def test_watcher_ids_accumulate(issues):
    payload = issues.update(5).watcher_user_ids([1, 2]).add_watcher_user_id(3).watcher_user_ids([4]).payload()

    assert payload["issue"]["watcher_user_ids"] == [1, 2, 3, 4]


def test_every_setter_maps_to_its_field(issues):
    payload = (
        issues.update(1)
        .project_id(2)
        .tracker_id(3)
        .status_id(4)
        .priority_id(5)
        .subject("s")
        .description("d")
        .category_id(6)
        .fixed_version_id(7)
        .assigned_to_id(8)
        .parent_issue_id(9)
        .is_private(True)
        .estimated_hours(1.5)
        .start_date("2024-01-01")
        .due_date("2024-02-01")
        .done_ratio(10)
        .notes("n")
        .private_notes(True)
        .payload()
    )

    assert payload["issue"] == {
        "project_id": 2,
        "tracker_id": 3,
        "status_id": 4,
        "priority_id": 5,
        "subject": "s",
        "description": "d",
        "category_id": 6,
        "fixed_version_id": 7,
        "assigned_to_id": 8,
        "parent_issue_id": 9,
        "is_private": True,
        "estimated_hours": 1.5,
        "start_date": "2024-01-01",
        "due_date": "2024-02-01",
        "done_ratio": 10,
        "notes": "n",
        "private_notes": True,
    }


def test_update_builder_requires_an_id(transport):
    with pytest.raises(ValueError):
        IssueBuilder(transport, BuilderKind.UPDATE, IssueFields())


def test_create_payload_round_trips_through_read_model(issues, issue_raw):
    # Setup: a create payload with every field the read model also carries
    sent = (
        issues.create(1, 1, 1, 1, "Round trip")
        .description("desc")
        .is_private(True)
        .estimated_hours(2.25)
        .start_date("2024-05-01")
        .due_date("2024-05-31")
        .done_ratio(40)
        .payload()["issue"]
    )
    read_names = {f.name for f in dataclass_fields(Issue)}
    shared = {name: value for name, value in sent.items() if name in read_names}

    # Act: what the server would echo back for that issue
    issue = build_issue({**issue_raw, **shared})

    # Assert
    assert set(shared) == {
        "subject", "description", "is_private", "estimated_hours", "start_date", "due_date", "done_ratio",
    }
    for name, value in shared.items():
        assert getattr(issue, name) == value

#--------------------------- watchers --------------------------

def test_add_watcher_posts_user_id(issues, transport, make_response):
    transport.post_raw.return_value = make_response(204)

    assert issues.add_watcher(1, 7).execute() is True
    transport.post_raw.assert_called_once_with("/issues/1/watchers.json", {"user_id": 7})


def test_add_watcher_failure_raises_api_error(issues, transport, make_response):
    transport.post_raw.return_value = make_response(403, "forbidden")

    with pytest.raises(ApiError) as exc_info:
        issues.add_watcher(1, 7).execute()
    assert exc_info.value.status_code == 403


def test_remove_watcher_deletes_nested_path(issues, transport):
    transport.delete.return_value = True

    assert issues.remove_watcher(1, 7).execute() is True
    transport.delete.assert_called_once_with("/issues/1/watchers/7.json")

#--------------------------- malformed bodies --------------------------

def test_show_null_or_nested_scalar_raises_parse_error(issues, transport, issue_raw):
    # Setup: values of the wrong JSON type must not be stringified
    issue_raw["project"] = {"id": 1, "name": None}
    issue_raw["created_on"] = {"x": 1}
    transport.get.return_value = json.dumps({"issue": issue_raw})

    with pytest.raises(ParseError):
        issues.show(2).execute()


def test_show_null_subject_raises_parse_error(issues, transport, issue_raw):
    issue_raw["subject"] = None
    transport.get.return_value = json.dumps({"issue": issue_raw})

    with pytest.raises(ParseError):
        issues.show(2).execute()


def test_deeply_nested_body_raises_parse_error(issues, transport):
    transport.get.return_value = "[" * 200000

    with pytest.raises(ParseError):
        issues.list().execute()
