# singleactivity/application/format/options.py
from typing import Any, Dict, Optional
from flask import current_app
from singleactivity.extensions import db
from singleactivity.models.course import Course
from singleactivity.models.module_type import ModuleType
from singleactivity.domain.messages import ACTIVITY_TYPE_LABEL, ACTIVITY_TYPE_HELP
from singleactivity.utils.audit import log_action
from singleactivity.utils.transaction import transactional

BLOCK_POS_LEFT = "side-pre"
BLOCK_POS_RIGHT = "side-post"


def get_module_types_names() -> Dict[str, str]:
    """Enabled module types, name -> full name."""
    types = ModuleType.query.filter_by(enabled=True).order_by(ModuleType.name.asc()).all()
    return {t.name: t.fullname for t in types}


def course_format_options(for_edit_form: bool = False) -> Dict[str, Dict[str, Any]]:
    """
    Options the format stores per course. The edit form variant adds what a
    form needs to render them.
    """
    options: Dict[str, Dict[str, Any]] = {
        "activitytype": {
            "default": current_app.config["SINGLEACTIVITY_DEFAULT_ACTIVITYTYPE"],
            "type": "text",
        },
    }

    if for_edit_form:
        options["activitytype"].update({
            "label": ACTIVITY_TYPE_LABEL,
            "help": ACTIVITY_TYPE_HELP,
            "help_component": "format_singleactivity",
            "element_type": "select",
            "element_attributes": [get_module_types_names()],
        })

    return options


def get_format_options(course: Course) -> Dict[str, Any]:
    stored = course.format_options or {}
    return {
        name: stored.get(name, definition["default"])
        for name, definition in course_format_options().items()
    }


def get_activitytype(course: Course) -> Optional[str]:
    """
    The course's activity type, or None when it does not name an
    enabled module type.
    """
    activitytype = get_format_options(course).get("activitytype")
    if activitytype and activitytype in get_module_types_names():
        return activitytype
    return None


def validate_format_options(data: Dict[str, Any]) -> Dict[str, Any]:
    known = course_format_options()
    unknown = set(data) - set(known)
    if unknown:
        raise ValueError(f"Unknown format options: {sorted(unknown)}")

    activitytype = data.get("activitytype")
    if activitytype and activitytype not in get_module_types_names():
        raise ValueError(f"Unknown activity type: {activitytype}")

    return dict(data)


def update_format_options(
    *,
    course_id: str,
    data: Dict[str, Any],
) -> Course:
    course = Course.query.filter_by(id=course_id).first()
    if not course:
        raise ValueError("Course not found")

    changes = validate_format_options(data)
    current = dict(course.format_options or {})
    changed_fields = [k for k, v in changes.items() if current.get(k) != v]

    if not changed_fields:
        return course  # Saving an unchanged form is not an update

    with transactional():
        current.update(changes)
        # Reassign so SQLAlchemy notices the JSON change
        course.format_options = current
        db.session.add(course)

        log_action(
            action="course.format_options.update",
            entity_type="course",
            entity_id=course.id,
            payload={"fields": changed_fields},
        )

    return course


def get_default_blocks() -> Dict[str, list]:
    return {
        BLOCK_POS_LEFT: [],
        BLOCK_POS_RIGHT: [],
    }
