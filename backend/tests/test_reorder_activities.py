"""Tests for keeping the main activity in section 0 and the rest in section 1."""
from types import SimpleNamespace

import pytest

from singleactivity.application.course.modinfo import get_fast_modinfo
from singleactivity.application.course.sections import get_section, set_section_visible
from singleactivity.application.format.options import update_format_options
from singleactivity.application.format.reorder_activities import (
    get_activity,
    reorder_activities,
)
from singleactivity.domain.invariants.course import assert_single_activity_layout
from singleactivity.domain.invariants.exceptions import InvariantViolation
from singleactivity.models.course_module import CourseModule


def layout(course_id):
    modinfo = get_fast_modinfo(course_id)
    return {
        cm.id: (cm.sectionnum, cm.order, cm.visible)
        for cm in modinfo.cms.values()
    }


def test_main_activity_in_section_0_and_rest_in_section_1(make_course, add_cm):
    course = make_course("forum")
    page = add_cm(course, "page", section=0)
    quiz = add_cm(course, "quiz", section=2)
    forum = add_cm(course, "forum", section=3)

    activity = reorder_activities(course_id=course.id, activitytype="forum")

    assert activity.id == forum.id
    modinfo = get_fast_modinfo(course.id)
    assert modinfo.sections[0] == [forum.id]
    assert sorted(modinfo.sections[1]) == sorted([page.id, quiz.id])
    assert set(modinfo.sections) == {0, 1}
    assert modinfo.section_info[0].visible is True
    assert modinfo.section_info[1].visible is False


def test_exactly_one_module_of_the_type_stays_in_section_0(make_course, add_cm):
    course = make_course("forum")
    first = add_cm(course, "forum", section=0)
    second = add_cm(course, "forum", section=0)

    reorder_activities(course_id=course.id, activitytype="forum")

    modinfo = get_fast_modinfo(course.id)
    assert modinfo.sections[0] == [first.id]
    assert modinfo.sections[1] == [second.id]


def test_reordering_twice_changes_nothing(make_course, add_cm):
    course = make_course("quiz")
    add_cm(course, "page", section=0)
    add_cm(course, "quiz", section=2)
    add_cm(course, "label", section=2)

    reorder_activities(course_id=course.id, activitytype="quiz")
    once = layout(course.id)
    reorder_activities(course_id=course.id, activitytype="quiz")

    assert layout(course.id) == once


def test_without_activity_type_everything_is_orphaned(make_course, add_cm):
    course = make_course("forum")
    forum = add_cm(course, "forum", section=0)

    assert reorder_activities(course_id=course.id, activitytype=None) is None

    modinfo = get_fast_modinfo(course.id)
    assert modinfo.sections == {1: [forum.id]}


def test_missing_sections_are_created(make_course):
    course = make_course("forum")

    assert reorder_activities(course_id=course.id, activitytype="forum") is None

    assert get_section(course.id, 0).visible is True
    assert get_section(course.id, 1).visible is False


def test_orphaned_modules_are_hidden_and_remember_visibility(make_course, add_cm):
    course = make_course("forum")
    add_cm(course, "forum", section=0)
    quiz = add_cm(course, "quiz", section=0)

    reorder_activities(course_id=course.id, activitytype="forum")

    quiz = CourseModule.query.filter_by(id=quiz.id).one()
    assert quiz.sectionnum == 1
    assert quiz.visible is False
    assert quiz.visible_old is True


def test_module_brought_back_to_section_0_is_visible_again(make_course, add_cm):
    course = make_course("forum")
    forum = add_cm(course, "forum", section=0)
    quiz = add_cm(course, "quiz", section=0)
    reorder_activities(course_id=course.id, activitytype="forum")

    update_format_options(course_id=course.id, data={"activitytype": "quiz"})
    activity = get_activity(course)

    assert activity.id == quiz.id
    assert activity.sectionnum == 0
    assert activity.visible is True
    forum = CourseModule.query.filter_by(id=forum.id).one()
    assert (forum.sectionnum, forum.visible) == (1, False)


def test_hidden_main_activity_stays_hidden(make_course, add_cm):
    course = make_course("forum")
    forum = add_cm(course, "forum", section=2, visible=False)

    activity = reorder_activities(course_id=course.id, activitytype="forum")

    assert activity.id == forum.id
    assert activity.sectionnum == 0
    assert activity.visible is False


def test_section_order_is_compacted(make_course, add_cm):
    course = make_course("forum")
    add_cm(course, "page", section=0)
    add_cm(course, "forum", section=0)
    add_cm(course, "url", section=0)

    reorder_activities(course_id=course.id, activitytype="forum")

    for cms in get_fast_modinfo(course.id).sections.values():
        orders = [CourseModule.query.filter_by(id=i).one().order for i in cms]
        assert orders == list(range(1, len(cms) + 1))


def _modinfo(sections, visible0=True, visible1=False):
    section_info = {
        0: SimpleNamespace(visible=visible0, modules=[]),
        1: SimpleNamespace(visible=visible1, modules=[]),
    }
    return SimpleNamespace(sections=sections, section_info=section_info)


@pytest.mark.parametrize(
    "modinfo, activity_id",
    [
        (_modinfo({0: ["a", "b"]}), "a"),
        (_modinfo({0: ["b"]}), "a"),
        (_modinfo({0: ["a"]}), None),
        (_modinfo({0: ["a"], 2: ["b"]}), "a"),
        (_modinfo({0: ["a"]}, visible0=False), "a"),
        (_modinfo({0: ["a"]}, visible1=True), "a"),
    ],
)
def test_layout_invariant_rejects_broken_layouts(modinfo, activity_id):
    with pytest.raises(InvariantViolation):
        assert_single_activity_layout(modinfo, activity_id)


def test_layout_invariant_accepts_good_layout():
    assert_single_activity_layout(_modinfo({0: ["a"], 1: ["b", "c"]}), "a")
    assert_single_activity_layout(_modinfo({1: ["b"]}), None)


def test_showing_a_section_restores_module_visibility(make_course, add_cm):
    course = make_course("forum")
    page = add_cm(course, "page", section=0)
    url = add_cm(course, "url", section=0, visible=False)

    set_section_visible(course.id, 0, False)
    assert (page.visible, page.visible_old) == (False, True)
    assert (url.visible, url.visible_old) == (False, False)

    set_section_visible(course.id, 0, True)
    assert page.visible is True
    assert url.visible is False


def test_reorder_shows_hidden_section_0_and_its_activity(make_course, add_cm):
    course = make_course("forum")
    forum = add_cm(course, "forum", section=0)
    set_section_visible(course.id, 0, False)
    assert forum.visible is False

    activity = reorder_activities(course_id=course.id, activitytype="forum")

    assert activity.id == forum.id
    assert get_section(course.id, 0).visible is True
    assert activity.visible is True


def test_set_section_visible_rejects_missing_section(make_course):
    course = make_course("forum")
    with pytest.raises(ValueError):
        set_section_visible(course.id, 5, True)
