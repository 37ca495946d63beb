"""Tests for format options, default blocks and view URLs."""
import pytest

from singleactivity.application.course.sections import get_section
from singleactivity.application.format.options import (
    course_format_options,
    get_activitytype,
    get_default_blocks,
    get_format_options,
    get_module_types_names,
    update_format_options,
)
from singleactivity.application.format.view_url import get_view_url
from singleactivity.models.module_type import ModuleType
from singleactivity.utils.urls import course_view_url


def test_options_default_to_configured_activity_type(app):
    app.config["SINGLEACTIVITY_DEFAULT_ACTIVITYTYPE"] = "quiz"
    assert course_format_options() == {
        "activitytype": {"default": "quiz", "type": "text"},
    }


def test_edit_form_offers_enabled_module_types(db):
    wiki = ModuleType.query.filter_by(name="wiki").one()
    wiki.enabled = False
    db.session.commit()

    option = course_format_options(for_edit_form=True)["activitytype"]

    assert option["element_type"] == "select"
    choices = option["element_attributes"][0]
    assert choices["forum"] == "Forum"
    assert "label" in choices
    assert "wiki" not in choices
    assert option["label"]


def test_module_types_names_are_sorted_by_name(app):
    names = list(get_module_types_names())
    assert names == sorted(names)


def test_stored_activity_type_wins_over_default(make_course):
    course = make_course("quiz")
    assert get_format_options(course) == {"activitytype": "quiz"}
    assert get_activitytype(course) == "quiz"


def test_course_without_stored_type_uses_default(make_course):
    course = make_course(None)
    assert get_activitytype(course) == "forum"


@pytest.mark.parametrize("stored", ["", "not-a-module"])
def test_unusable_activity_type_resolves_to_none(db, make_course, stored):
    course = make_course("forum")
    course.format_options = {"activitytype": stored}
    db.session.commit()

    assert get_activitytype(course) is None


def test_disabled_activity_type_resolves_to_none(db, make_course):
    course = make_course("scorm")
    ModuleType.query.filter_by(name="scorm").one().enabled = False
    db.session.commit()

    assert get_activitytype(course) is None


def test_update_rejects_unknown_activity_type(make_course):
    course = make_course("forum")
    with pytest.raises(ValueError):
        update_format_options(course_id=course.id, data={"activitytype": "nope"})


def test_update_rejects_unknown_option(make_course):
    course = make_course("forum")
    with pytest.raises(ValueError):
        update_format_options(course_id=course.id, data={"colour": "red"})


def test_update_without_changes_fails(make_course):
    course = make_course("forum")
    with pytest.raises(ValueError):
        update_format_options(course_id=course.id, data={"activitytype": "forum"})


def test_update_stores_new_activity_type(make_course):
    course = make_course("forum")
    update_format_options(course_id=course.id, data={"activitytype": "quiz"})
    assert get_activitytype(course) == "quiz"


def test_default_blocks_are_empty():
    assert get_default_blocks() == {"side-pre": [], "side-post": []}


def test_new_course_gets_default_blocks_and_section_0(make_course):
    course = make_course("forum")
    assert course.default_blocks == get_default_blocks()
    assert [s.section for s in course.sections] == [0]


# ------------------------
# View URLs
# ------------------------

def test_course_url_without_section(make_course):
    course = make_course("forum")
    assert get_view_url(course.id) == course_view_url(course.id)


def test_orphaned_section_with_modules_has_its_own_url(make_course, add_cm):
    course = make_course("forum")
    add_cm(course, "quiz", section=1)
    assert get_view_url(course.id, 1) == course_view_url(course.id, section=1)
    assert get_view_url(course.id, get_section(course.id, 1)) == course_view_url(course.id, section=1)


def test_empty_orphaned_section_falls_back_to_course(make_course):
    course = make_course("forum")
    assert get_view_url(course.id, 1) == course_view_url(course.id)


def test_navigation_gets_no_url_for_sections(make_course):
    course = make_course("forum")
    assert get_view_url(course.id, 0, {"navigation": True}) is None
    assert get_view_url(course.id, None, {"navigation": True}) == course_view_url(course.id)
