# singleactivity/utils/urls.py
"""
Paths of the host pages the course format links and redirects to.

Built without an application context so domain code can produce them.
"""
from typing import Optional
from urllib.parse import urlencode

SITE_ROOT = "/"


def course_view_url(course_id: str, section: Optional[int] = None) -> str:
    params = {"id": course_id}
    if section is not None:
        params["section"] = section
    return f"/course/view?{urlencode(params)}"


def course_edit_url(course_id: str) -> str:
    return f"/course/edit?{urlencode({'id': course_id})}"


def module_add_url(course_id: str, section: int, modname: str) -> str:
    return "/course/modedit?" + urlencode(
        {"add": modname, "course": course_id, "section": section}
    )


def module_url(modname: str, cm_id: str) -> str:
    return f"/mod/{modname}/view?{urlencode({'id': cm_id})}"
