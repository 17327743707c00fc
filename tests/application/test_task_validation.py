"""Tests for request payload and id validation."""

from __future__ import annotations

import pytest

from app.application.tasks.task_validation import (
    TaskValidationError,
    parse_task_id,
    validate_create_payload,
    validate_update_payload,
)
from app.domain.task import TaskChanges


def test_create_payload_trims_title_and_defaults_completed():
    assert validate_create_payload({"title": "  Test Task  "}) == ("Test Task", False)


def test_create_payload_keeps_completed_flag():
    assert validate_create_payload({"title": "Task", "completed": True}) == ("Task", True)


def test_create_payload_ignores_unknown_fields():
    assert validate_create_payload({"title": "Task", "priority": 3}) == ("Task", False)


@pytest.mark.parametrize(
    "payload",
    [
        {},
        None,
        {"title": "   "},
        {"title": ""},
        {"title": 123},
        {"title": None},
        {"title": ["Task"]},
        {"title": "x" * 256},
    ],
)
def test_create_payload_rejects_bad_title(payload):
    with pytest.raises(TaskValidationError, match="title"):
        validate_create_payload(payload)


def test_create_payload_accepts_title_of_max_length():
    title, _ = validate_create_payload({"title": "x" * 255})
    assert len(title) == 255


@pytest.mark.parametrize("completed", ["true", 1, 0, None, "false"])
def test_create_payload_rejects_non_boolean_completed(completed):
    with pytest.raises(TaskValidationError, match="completed"):
        validate_create_payload({"title": "Task", "completed": completed})


def test_create_payload_reports_every_bad_field():
    with pytest.raises(TaskValidationError) as exc_info:
        validate_create_payload({"title": 1, "completed": "yes"})

    message = str(exc_info.value)
    assert "title" in message
    assert "completed" in message


@pytest.mark.parametrize("payload", [[], ["title"], "title", 42])
def test_payload_must_be_an_object(payload):
    with pytest.raises(TaskValidationError, match="JSON object"):
        validate_create_payload(payload)
    with pytest.raises(TaskValidationError, match="JSON object"):
        validate_update_payload(payload)


def test_update_payload_only_carries_supplied_fields():
    assert validate_update_payload({"completed": True}) == TaskChanges(completed=True)
    assert validate_update_payload({"title": " New "}) == TaskChanges(title="New")


def test_update_payload_empty_is_a_no_op():
    changes = validate_update_payload({})

    assert changes.is_empty
    assert validate_update_payload(None).is_empty


@pytest.mark.parametrize("payload", [{"title": "  "}, {"title": 5}, {"title": None}])
def test_update_payload_validates_title_when_present(payload):
    with pytest.raises(TaskValidationError, match="title"):
        validate_update_payload(payload)


@pytest.mark.parametrize("payload", [{"completed": "true"}, {"completed": None}, {"completed": 1}])
def test_update_payload_validates_completed_when_present(payload):
    with pytest.raises(TaskValidationError, match="completed"):
        validate_update_payload(payload)


@pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), ("+7", 7), (3, 3)])
def test_parse_task_id_accepts_positive_integers(raw, expected):
    assert parse_task_id(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["abc", "", "12abc", "1.5", " 1", "1_000", "0", "-3", None, True, 0, "١٢", "9" * 5000],
)
def test_parse_task_id_rejects_malformed_ids(raw):
    with pytest.raises(TaskValidationError, match="Invalid ID"):
        parse_task_id(raw)
