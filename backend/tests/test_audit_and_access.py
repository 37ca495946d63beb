"""Tests for audit rows, the user context middleware and error rendering."""
import pytest
from flask_jwt_extended import create_access_token

from singleactivity.application.format.reorder_activities import reorder_activities
from singleactivity.domain.invariants.exceptions import InvariantViolation
from singleactivity.models.audit_log import AuditLog
from singleactivity.utils.urls import course_view_url


# ------------------------
# Audit log
# ------------------------

def test_nothing_is_audited_without_a_current_user(make_course, add_cm):
    course = make_course("forum")
    add_cm(course, "quiz", section=0)
    add_cm(course, "forum", section=2)

    reorder_activities(course_id=course.id, activitytype="forum")

    assert AuditLog.query.count() == 0


def test_course_creation_is_audited(client, login):
    manager, headers, _ = login("manager")

    response = client.post(
        "/api/v1/courses",
        json={"fullname": "Audited", "shortname": "AUD"},
        headers=headers,
    )

    course_id = response.get_json()["id"]
    log = AuditLog.query.filter_by(action="course.create").one()
    assert log.entity_id == course_id
    assert log.actor_id == manager.id
    assert log.payload["shortname"] == "AUD"


def test_course_view_audits_reorder(client, login, make_course, add_cm):
    student, headers, _ = login("student")
    course = make_course("forum")
    quiz = add_cm(course, "quiz", section=0)
    forum = add_cm(course, "forum", section=2)

    client.get(course_view_url(course.id), headers=headers)

    moves = {
        log.entity_id: log.payload
        for log in AuditLog.query.filter_by(action="module.move").all()
    }
    assert moves[forum.id]["to_section"] == 0
    assert moves[quiz.id]["to_section"] == 1
    hidden = AuditLog.query.filter_by(action="section.visibility").one()
    assert hidden.payload == {"section": 1, "visible": False}
    assert hidden.actor_id == student.id


def test_editing_toggle_is_audited(client, login, make_course, add_cm):
    teacher, headers, sesskey = login("editingteacher")
    course = make_course("forum")
    add_cm(course, "forum")

    client.get(f"/course/view?id={course.id}&edit=1&sesskey={sesskey}", headers=headers)

    log = AuditLog.query.filter_by(action="user.editing").one()
    assert log.entity_id == teacher.id
    assert log.payload == {"course_id": course.id, "editing": True}


def test_audit_rows_cannot_be_changed(client, db, login):
    _, headers, _ = login("manager")
    client.post("/api/v1/courses", json={"fullname": "X", "shortname": "X"}, headers=headers)
    log = AuditLog.query.filter_by(action="course.create").one()

    log.action = "course.delete"
    with pytest.raises(RuntimeError):
        db.session.commit()
    db.session.rollback()


# ------------------------
# User context
# ------------------------

def test_disabled_user_is_rejected(client, db, login, make_course):
    user, headers, _ = login("student")
    course = make_course("forum")
    user.is_active = False
    db.session.commit()

    response = client.get(course_view_url(course.id), headers=headers)

    assert response.status_code == 401
    assert response.get_json()["error"] == "Unknown or disabled user"


def test_token_for_unknown_user_is_rejected(client, app):
    token = create_access_token(identity="no-such-user")

    response = client.get("/api/v1/health", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401


def test_anonymous_request_passes_middleware(client):
    assert client.get("/api/v1/health").status_code == 200


# ------------------------
# Errors
# ------------------------

def test_invariant_violation_is_rendered_as_json(client, login, make_course, monkeypatch):
    _, headers, _ = login("student")
    course = make_course("forum")

    def broken_reorder(**kwargs):
        raise InvariantViolation("Section 0 must hold only the main activity")

    monkeypatch.setattr(
        "singleactivity.application.format.page_set_course.reorder_activities",
        broken_reorder,
    )

    response = client.get(course_view_url(course.id), headers=headers)

    assert response.status_code == 400
    assert response.get_json() == {
        "error": "InvariantViolation",
        "message": "Section 0 must hold only the main activity",
    }
