# singleactivity/api/v1/course_pages.py
"""
Host pages the course format hooks into: the course view that redirects to
the main activity, the course and module edit forms it sends managers to,
and the module page whose navigation it flattens.
"""
from flask import Blueprint, current_app, flash, g, jsonify, redirect, request
from flask_jwt_extended import jwt_required
from singleactivity.extensions import db
from singleactivity.models.course import Course
from singleactivity.models.course_module import CourseModule
from singleactivity.domain.activity import MAIN_SECTION, ORPHANED_SECTION
from singleactivity.domain.capabilities import (
    capabilities_for,
    has_capability,
    COURSE_UPDATE,
    MANAGE_ACTIVITIES,
)
from singleactivity.domain.messages import ACTIVITY_HIDDEN, ORPHANED_WARNING
from singleactivity.domain.view_outcome import (
    PassThrough,
    RedirectTo,
    ShowActivity,
    ShowOrphaned,
)
from singleactivity.application.course.add_module import add_module
from singleactivity.application.course.modinfo import get_fast_modinfo
from singleactivity.application.format.navigation import build_navigation, page_set_cm
from singleactivity.application.format.options import (
    course_format_options,
    get_format_options,
    update_format_options,
)
from singleactivity.application.format.page_set_course import page_set_course
from singleactivity.normalizers.course import normalize_course
from singleactivity.normalizers.course_module import normalize_course_module
from singleactivity.normalizers.navigation import normalize_navigation
from singleactivity.utils.audit import log_action
from singleactivity.utils.decorators import user_required, capability_required
from singleactivity.utils.tokens import confirm_sesskey
from singleactivity.utils.urls import course_view_url

course_bp = Blueprint("course", __name__)


# ------------------------
# Course view
# ------------------------

@course_bp.route("/course/view", methods=["GET"])
@jwt_required()
@user_required
def course_view():
    course = Course.query.filter_by(id=request.args.get("id")).first_or_404()
    user = g.current_user
    edit = _edit_flag(request.args.get("edit"))

    outcome = page_set_course(
        course=course,
        user=user,
        section=request.args.get("section", type=int),
        edit=edit,
        sesskey_valid=confirm_sesskey(request.args.get("sesskey")),
    )

    if isinstance(outcome, PassThrough):
        return _toggle_editing(course, user, bool(edit))

    if isinstance(outcome, ShowOrphaned):
        modinfo = get_fast_modinfo(course.id)
        modules = [
            modinfo.cms[cm_id]
            for cm_id in modinfo.sections.get(ORPHANED_SECTION, [])
        ]
        return jsonify({
            "course": normalize_course(course),
            "section": ORPHANED_SECTION,
            "warning": ORPHANED_WARNING,
            "modules": [normalize_course_module(m, admin=True) for m in modules],
        }), 200

    if isinstance(outcome, RedirectTo):
        if outcome.message:
            flash(outcome.message)
        return redirect(outcome.url)

    if isinstance(outcome, ShowActivity):
        return redirect(outcome.url)

    raise TypeError(f"Unhandled course view outcome: {outcome!r}")


EDIT_FLAGS = {
    "1": 1, "on": 1, "true": 1,
    "0": 0, "off": 0, "false": 0,
}


def _edit_flag(value):
    """
    Editing mode request as 1 or 0, or -1 when the request does not ask to
    toggle. Accepts 0/1, on/off and true/false.
    """
    if value is None:
        return -1
    return EDIT_FLAGS.get(value.strip().lower(), -1)


def _toggle_editing(course, user, editing):
    if not has_capability(user.role, COURSE_UPDATE):
        return jsonify({"error": "Insufficient permissions"}), 403

    if user.editing != editing:
        user.editing = editing
        log_action(
            action="user.editing",
            entity_type="user",
            entity_id=user.id,
            payload={"course_id": course.id, "editing": editing},
        )
        db.session.commit()

    return redirect(course_view_url(course.id))


# ------------------------
# Course settings
# ------------------------

@course_bp.route("/course/edit", methods=["GET"])
@jwt_required()
@capability_required(COURSE_UPDATE)
def course_edit_form():
    course = Course.query.filter_by(id=request.args.get("id")).first_or_404()

    return jsonify({
        "course": normalize_course(course),
        "form": course_format_options(for_edit_form=True),
        "values": get_format_options(course),
    })

@course_bp.route("/course/edit", methods=["POST"])
@jwt_required()
@capability_required(COURSE_UPDATE)
def course_edit():
    course = Course.query.filter_by(id=request.args.get("id")).first_or_404()
    data = request.get_json(silent=True) or {}

    try:
        update_format_options(course_id=course.id, data=data)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return redirect(course_view_url(course.id))


# ------------------------
# Module creation
# ------------------------

@course_bp.route("/course/modedit", methods=["GET"])
@jwt_required()
@capability_required(MANAGE_ACTIVITIES)
def module_add_form():
    course = Course.query.filter_by(id=request.args.get("course")).first_or_404()

    return jsonify({
        "course": normalize_course(course),
        "add": request.args.get("add"),
        "section": request.args.get("section", MAIN_SECTION, type=int),
    })

@course_bp.route("/course/modedit", methods=["POST"])
@jwt_required()
@capability_required(MANAGE_ACTIVITIES)
def module_add():
    course = Course.query.filter_by(id=request.args.get("course")).first_or_404()
    data = request.get_json(silent=True) or {}

    try:
        cm = add_module(
            course_id=course.id,
            modname=request.args.get("add", ""),
            sectionnum=request.args.get("section", MAIN_SECTION, type=int),
            data=data,
        )
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    current_app.logger.info("Module %s added to course %s", cm.id, course.id)
    return redirect(course_view_url(course.id))


# ------------------------
# Module page
# ------------------------

@course_bp.route("/mod/<modname>/view", methods=["GET"])
@jwt_required()
@user_required
def module_view(modname):
    cm = CourseModule.query.filter_by(
        id=request.args.get("id"),
        module=modname,
    ).first_or_404()
    user = g.current_user
    course = Course.query.filter_by(id=cm.course_id).first_or_404()

    # Building the navigation puts the course in order, which can hide cm
    tree = build_navigation(course=course, user=user)
    if not cm.is_visible_to(capabilities_for(user.role)):
        return jsonify({"error": ACTIVITY_HIDDEN}), 403

    spliced = page_set_cm(tree, course=course, cm=cm, user=user)

    return jsonify({
        "course": normalize_course(course),
        "module": normalize_course_module(cm),
        "main_activity": spliced,
        "navigation": normalize_navigation(tree),
    })
