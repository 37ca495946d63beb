# singleactivity/application/format/reorder_activities.py
from typing import Optional
from flask import current_app
from singleactivity.models.course import Course
from singleactivity.models.course_module import CourseModule
from singleactivity.domain.activity import locate_activity, MAIN_SECTION, ORPHANED_SECTION
from singleactivity.domain.invariants.course import assert_single_activity_layout
from singleactivity.application.course.modinfo import get_fast_modinfo
from singleactivity.application.course.sections import (
    create_sections_if_missing,
    get_section,
    set_section_visible,
)
from singleactivity.application.course.move_module import moveto_module
from singleactivity.application.format.options import get_activitytype
from singleactivity.utils.transaction import transactional


def reorder_activities(
    *,
    course_id: str,
    activitytype: Optional[str],
) -> Optional[CourseModule]:
    """
    Put the main activity in section 0 and everything else in section 1.

    Responsibilities:
    - Sections 0 and 1 exist, 0 visible and 1 hidden
    - First module of ``activitytype`` moved to section 0
    - Every other module moved to section 1
    - Layout invariant checked before commit

    Runs on every course view. Each mutation is skipped when the state
    already matches. Failures roll back and propagate.
    """
    with transactional():
        create_sections_if_missing(course_id, [MAIN_SECTION, ORPHANED_SECTION])
        section0 = get_section(course_id, MAIN_SECTION)
        section1 = get_section(course_id, ORPHANED_SECTION)

        if not section0.visible:
            set_section_visible(course_id, MAIN_SECTION, True)
        if section1.visible:
            set_section_visible(course_id, ORPHANED_SECTION, False)

        modinfo = get_fast_modinfo(course_id)
        activity_id = locate_activity(modinfo.sections, modinfo.modnames, activitytype)
        activity = modinfo.cms.get(activity_id) if activity_id else None

        if activity is not None and activity.sectionnum != MAIN_SECTION:
            moveto_module(activity, section0)

        for cm_id, cm in modinfo.cms.items():
            if (activity is None or cm_id != activity.id) and cm.sectionnum != ORPHANED_SECTION:
                moveto_module(cm, section1)

        assert_single_activity_layout(get_fast_modinfo(course_id), activity_id)

    current_app.logger.debug(
        "Course %s reordered, main activity: %s", course_id, activity_id
    )
    return activity


def get_activity(course: Course) -> Optional[CourseModule]:
    """The course's main activity, after putting the course in order."""
    return reorder_activities(
        course_id=course.id,
        activitytype=get_activitytype(course),
    )
