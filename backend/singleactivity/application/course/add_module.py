from typing import Any, Dict
from singleactivity.extensions import db
from singleactivity.models.course import Course
from singleactivity.models.course_module import CourseModule
from singleactivity.models.module_type import ModuleType
from singleactivity.application.course.sections import create_sections_if_missing, get_section
from singleactivity.utils.order import next_order
from singleactivity.utils.audit import log_action
from singleactivity.utils.transaction import transactional


def add_module(
    *,
    course_id: str,
    modname: str,
    sectionnum: int,
    data: Dict[str, Any],
) -> CourseModule:
    """
    Add a module of type ``modname`` at the end of a course section.
    """
    course = Course.query.filter_by(id=course_id).first()
    if not course:
        raise ValueError("Course not found")

    module_type = ModuleType.query.filter_by(name=modname, enabled=True).first()
    if not module_type:
        raise ValueError(f"Unknown module type: {modname}")

    name: str | None = data.get("name")
    if not name:
        raise ValueError("Module name is required")

    if sectionnum < 0:
        raise ValueError("Section number cannot be negative")

    with transactional():
        create_sections_if_missing(course.id, [sectionnum])
        section = get_section(course.id, sectionnum)

        cm = CourseModule()
        cm.course_id = course.id
        cm.module = module_type.name
        cm.name = name
        cm.visible = bool(data.get("visible", True)) and section.visible
        cm.visible_old = bool(data.get("visible", True))
        cm.order = next_order(CourseModule.query.filter_by(section_id=section.id))
        cm.section = section

        db.session.add(cm)
        db.session.flush()

        log_action(
            action="module.create",
            entity_type="course_module",
            entity_id=cm.id,
            payload={
                "module": cm.module,
                "section": sectionnum,
                "order": cm.order,
            },
        )

    return cm
