# singleactivity/api/v1/courses.py
from flask import g, request, jsonify
from flask_jwt_extended import jwt_required
from singleactivity.models.course import Course
from singleactivity.domain.capabilities import COURSE_CREATE, has_capability, MANAGE_ACTIVITIES
from singleactivity.application.course.create_course import create_course as create_course_use_case
from singleactivity.application.format.options import (
    course_format_options,
    get_format_options,
    get_activitytype,
)
from singleactivity.application.format.view_url import get_view_url
from singleactivity.application.format.navigation import build_navigation
from singleactivity.normalizers.course import normalize_course
from singleactivity.normalizers.navigation import normalize_navigation
from singleactivity.utils.decorators import user_required, capability_required
from . import v1_bp


# ------------------------
# Courses
# ------------------------

@v1_bp.route("/courses", methods=["POST"])
@jwt_required()
@capability_required(COURSE_CREATE)
def create_course():
    data = request.get_json(silent=True) or {}

    try:
        course = create_course_use_case(actor_id=g.current_user.id, data=data)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400

    return jsonify({
        "id": course.id,
        "message": "Course created successfully"
    }), 201

@v1_bp.route("/courses/<course_id>", methods=["GET"])
@jwt_required()
@user_required
def get_course(course_id):
    course = Course.query.filter_by(id=course_id).first_or_404()
    admin = has_capability(g.current_user.role, MANAGE_ACTIVITIES)

    return jsonify(normalize_course(course, admin=admin, include_sections=admin))

@v1_bp.route("/courses/<course_id>/navigation", methods=["GET"])
@jwt_required()
@user_required
def get_course_navigation(course_id):
    course = Course.query.filter_by(id=course_id).first_or_404()
    tree = build_navigation(course=course, user=g.current_user)

    return jsonify(normalize_navigation(tree))

# ------------------------
# Format
# ------------------------

@v1_bp.route("/courses/<course_id>/format/options", methods=["GET"])
@jwt_required()
@user_required
def get_course_format_options(course_id):
    course = Course.query.filter_by(id=course_id).first_or_404()
    for_edit_form = request.args.get("form", 0, type=int) == 1

    return jsonify({
        "definitions": course_format_options(for_edit_form=for_edit_form),
        "values": get_format_options(course),
        "activitytype": get_activitytype(course),
    })

@v1_bp.route("/courses/<course_id>/format/view-url", methods=["GET"])
@jwt_required()
@user_required
def get_course_view_url(course_id):
    course = Course.query.filter_by(id=course_id).first_or_404()
    section = request.args.get("section", type=int)
    navigation = request.args.get("navigation", 0, type=int) == 1

    return jsonify({
        "url": get_view_url(course.id, section, {"navigation": navigation})
    })
