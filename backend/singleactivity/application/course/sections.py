from typing import Iterable
from flask import current_app
from singleactivity.extensions import db
from singleactivity.models.section import Section
from singleactivity.utils.audit import log_action


def create_sections_if_missing(course_id: str, sectionnums: Iterable[int]) -> bool:
    """
    Create the numbered sections a course does not have yet.
    Returns True if anything was created. Flushes, does not commit.
    """
    existing = {
        s.section
        for s in Section.query.filter_by(course_id=course_id).all()
    }

    created = False
    for sectionnum in sorted(set(sectionnums) - existing):
        section = Section()
        section.course_id = course_id
        section.section = sectionnum
        section.visible = True
        db.session.add(section)
        created = True

    if created:
        db.session.flush()
    return created


def get_section(course_id: str, sectionnum: int) -> Section | None:
    return Section.query.filter_by(course_id=course_id, section=sectionnum).first()


def set_section_visible(course_id: str, sectionnum: int, visible: bool) -> Section:
    """
    Show or hide a section together with its modules.

    Hiding remembers each module's visibility in ``visible_old``; showing
    the section again restores it.
    """
    section = get_section(course_id, sectionnum)
    if section is None:
        raise ValueError(f"Section {sectionnum} not found")

    section.visible = visible
    for cm in section.modules:
        if visible:
            cm.visible = cm.visible_old
        else:
            cm.visible_old = cm.visible
            cm.visible = False

    db.session.flush()

    current_app.logger.info(
        "Section %s of course %s is now %s",
        sectionnum, course_id, "visible" if visible else "hidden",
    )
    log_action(
        action="section.visibility",
        entity_type="section",
        entity_id=section.id,
        payload={"section": sectionnum, "visible": visible},
    )
    return section
