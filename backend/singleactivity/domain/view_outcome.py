# singleactivity/domain/view_outcome.py
"""
Decision table for a request to view a single activity course.

The decision is pure: callers run the reorder step, collect the request and
course state, and perform whatever redirect the outcome asks for.
"""
from dataclasses import dataclass
from typing import Optional, Union

from singleactivity.utils.urls import (
    SITE_ROOT,
    course_edit_url,
    module_add_url,
)
from .activity import MAIN_SECTION, ORPHANED_SECTION
from .messages import ERROR_ACTIVITY_TYPE, ERROR_NOT_SETUP, ACTIVITY_HIDDEN


@dataclass(frozen=True)
class ViewRequest:
    course_id: str
    section: Optional[int]
    can_update: bool
    can_manage_activities: bool


@dataclass(frozen=True)
class CourseViewState:
    activitytype: Optional[str]
    activity_id: Optional[str] = None
    activity_url: Optional[str] = None
    activity_visible: bool = False


@dataclass(frozen=True)
class PassThrough:
    """Editing mode toggle; the course view handles it itself."""


@dataclass(frozen=True)
class ShowOrphaned:
    course_id: str


@dataclass(frozen=True)
class RedirectTo:
    url: str
    message: Optional[str] = None


@dataclass(frozen=True)
class ShowActivity:
    url: str


ViewOutcome = Union[PassThrough, ShowOrphaned, RedirectTo, ShowActivity]


def is_edit_toggle(edit: Optional[int], sesskey_valid: bool) -> bool:
    return edit in (0, 1) and sesskey_valid


def decide_view_outcome(request: ViewRequest, state: CourseViewState) -> ViewOutcome:
    """
    The order of the checks decides the outcome: the orphaned listing wins
    over any configuration problem, and a missing type wins over a missing
    activity.
    """
    if request.section == ORPHANED_SECTION and request.can_manage_activities:
        return ShowOrphaned(course_id=request.course_id)

    if not state.activitytype:
        if request.can_update:
            return RedirectTo(course_edit_url(request.course_id), ERROR_ACTIVITY_TYPE)
        return RedirectTo(SITE_ROOT, ERROR_NOT_SETUP)

    if state.activity_id is None:
        if request.can_manage_activities:
            return RedirectTo(
                module_add_url(request.course_id, MAIN_SECTION, state.activitytype)
            )
        return RedirectTo(SITE_ROOT, ERROR_NOT_SETUP)

    if not state.activity_visible or not state.activity_url:
        return RedirectTo(SITE_ROOT, ACTIVITY_HIDDEN)

    return ShowActivity(state.activity_url)
