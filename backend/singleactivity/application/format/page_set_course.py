from typing import Optional
from flask import current_app
from singleactivity.models.course import Course
from singleactivity.models.user import User
from singleactivity.domain.capabilities import (
    capabilities_for,
    COURSE_UPDATE,
    MANAGE_ACTIVITIES,
)
from singleactivity.domain.view_outcome import (
    CourseViewState,
    PassThrough,
    ViewOutcome,
    ViewRequest,
    decide_view_outcome,
    is_edit_toggle,
)
from singleactivity.application.format.options import get_activitytype
from singleactivity.application.format.reorder_activities import reorder_activities
from singleactivity.utils.urls import module_url


def page_set_course(
    *,
    course: Course,
    user: User,
    section: Optional[int] = None,
    edit: Optional[int] = None,
    sesskey_valid: bool = False,
) -> ViewOutcome:
    """
    Decide what a request to view ``course`` turns into.

    Edit mode toggles pass through untouched. Anything else puts the course
    in order first, then goes through the view decision table.
    """
    if is_edit_toggle(edit, sesskey_valid):
        return PassThrough()

    activitytype = get_activitytype(course)
    activity = reorder_activities(course_id=course.id, activitytype=activitytype)
    capabilities = capabilities_for(user.role)

    request = ViewRequest(
        course_id=course.id,
        section=section,
        can_update=COURSE_UPDATE in capabilities,
        can_manage_activities=MANAGE_ACTIVITIES in capabilities,
    )
    state = CourseViewState(
        activitytype=activitytype,
        activity_id=activity.id if activity is not None else None,
        activity_url=_activity_url(activity),
        activity_visible=activity is not None and activity.is_visible_to(capabilities),
    )

    outcome = decide_view_outcome(request, state)
    current_app.logger.debug(
        "Course %s viewed by %s: %s", course.id, user.id, type(outcome).__name__
    )
    return outcome


def _activity_url(activity) -> Optional[str]:
    if activity is None or not activity.module_type.has_view:
        return None
    return module_url(activity.module, activity.id)
