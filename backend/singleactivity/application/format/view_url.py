from typing import Any, Dict, Optional
from singleactivity.models.section import Section
from singleactivity.domain.activity import ORPHANED_SECTION
from singleactivity.application.course.modinfo import get_fast_modinfo
from singleactivity.utils.urls import course_view_url


def get_view_url(
    course_id: str,
    section: int | Section | None = None,
    options: Optional[Dict[str, Any]] = None,
) -> Optional[str]:
    """
    URL of the course, or of a section of it.

    Only the orphaned section has a page of its own, and only while it holds
    modules. With ``options["navigation"]`` set, other sections get no URL.
    """
    options = options or {}
    sectionnum = section.section if isinstance(section, Section) else section

    if sectionnum == ORPHANED_SECTION and get_fast_modinfo(course_id).sections.get(ORPHANED_SECTION):
        return course_view_url(course_id, section=ORPHANED_SECTION)

    if options.get("navigation") and section is not None:
        return None

    return course_view_url(course_id)
