from typing import Any, Dict
from sqlalchemy.exc import IntegrityError
from singleactivity.extensions import db
from singleactivity.models.course import Course
from singleactivity.domain.activity import MAIN_SECTION
from singleactivity.application.course.sections import create_sections_if_missing
from singleactivity.application.format.options import (
    get_default_blocks,
    validate_format_options,
)
from singleactivity.utils.audit import log_action
from singleactivity.utils.transaction import transactional


def create_course(
    *,
    actor_id: str,
    data: Dict[str, Any],
) -> Course:
    """
    Create a single activity course.

    Edge cases handled:
    - Missing required fields
    - Duplicate shortname
    - Unknown activity type
    """
    fullname: str | None = data.get("fullname")
    shortname: str | None = data.get("shortname")

    if not fullname or not shortname:
        raise ValueError("Both fullname and shortname are required")

    format_options = validate_format_options(data.get("format_options") or {})

    course = Course()
    course.fullname = fullname
    course.shortname = shortname
    course.format = "singleactivity"
    course.format_options = format_options
    course.default_blocks = get_default_blocks()
    try:
        with transactional():
            db.session.add(course)
            db.session.flush()  # ensures course.id is available

            create_sections_if_missing(course.id, [MAIN_SECTION])

            log_action(
                action="course.create",
                entity_type="course",
                entity_id=course.id,
                payload={
                    "shortname": course.shortname,
                    "format_options": course.format_options,
                    "actor_id": actor_id,
                },
            )

        return course

    except IntegrityError as exc:
        db.session.rollback()
        raise ValueError("A course with this shortname already exists") from exc
