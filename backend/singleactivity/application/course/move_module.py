from flask import current_app
from singleactivity.extensions import db
from singleactivity.models.course_module import CourseModule
from singleactivity.models.section import Section
from singleactivity.utils.order import compact_order, next_order
from singleactivity.utils.audit import log_action


def moveto_module(cm: CourseModule, section: Section) -> None:
    """
    Move a module to the end of ``section``.

    Moving into a hidden section hides the module and remembers that it was
    visible; moving into a visible section restores the remembered state.
    Flushes, does not commit.
    """
    old_section = cm.section

    if not section.visible and cm.visible:
        cm.visible = False
        cm.visible_old = True
    elif section.visible and not cm.visible:
        cm.visible = cm.visible_old

    cm.order = next_order(CourseModule.query.filter_by(section_id=section.id))
    cm.section = section
    db.session.flush()

    if old_section is not None and old_section.id != section.id:
        compact_order(CourseModule.query.filter_by(section_id=old_section.id))

    current_app.logger.info(
        "Moved module %s (%s) from section %s to section %s",
        cm.id, cm.module,
        old_section.section if old_section is not None else None,
        section.section,
    )
    log_action(
        action="module.move",
        entity_type="course_module",
        entity_id=cm.id,
        payload={
            "from_section": old_section.section if old_section is not None else None,
            "to_section": section.section,
            "order": cm.order,
        },
    )
