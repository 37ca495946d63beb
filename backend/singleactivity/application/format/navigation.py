# singleactivity/application/format/navigation.py
from typing import Optional
from singleactivity.models.course import Course
from singleactivity.models.course_module import CourseModule
from singleactivity.models.user import User
from singleactivity.domain.activity import ORPHANED_SECTION
from singleactivity.domain.capabilities import capabilities_for, MANAGE_ACTIVITIES
from singleactivity.domain.messages import ORPHANED, ORPHANED_ICON
from singleactivity.domain.navigation import (
    NavigationNode,
    NavigationTree,
    NODETYPE_BRANCH,
    NODETYPE_LEAF,
    TYPE_ACTIVITY,
    TYPE_COURSE,
    TYPE_SECTION,
    splice_activity_into_course,
)
from singleactivity.application.course.modinfo import get_fast_modinfo
from singleactivity.application.format.reorder_activities import get_activity
from singleactivity.application.format.view_url import get_view_url
from singleactivity.utils.urls import course_view_url, module_url


def navigation_add_activity(
    tree: NavigationTree,
    parent: NavigationNode,
    cm: CourseModule,
    capabilities,
    icon: Optional[str] = None,
) -> Optional[NavigationNode]:
    """
    Add a node for ``cm`` under ``parent``. Modules the user cannot see and
    modules without a page of their own get no node.
    """
    if not cm.is_visible_to(capabilities) or not cm.module_type.has_view:
        return None

    node = tree.add(
        parent,
        cm.name,
        action=module_url(cm.module, cm.id),
        type=TYPE_ACTIVITY,
        key=cm.id,
        icon=icon or f"{cm.module}/icon",
    )
    node.nodetype = NODETYPE_BRANCH if cm.module_type.extends_navigation else NODETYPE_LEAF
    return node


def extend_course_navigation(
    tree: NavigationTree,
    course_node: NavigationNode,
    *,
    course: Course,
    user: User,
) -> None:
    """
    The course node leads straight to the main activity. Managers also get
    an "Orphaned activities" branch listing what sits in section 1.
    """
    capabilities = capabilities_for(user.role)

    activity = get_activity(course)
    if activity is not None and activity.is_visible_to(capabilities):
        activity_node = navigation_add_activity(tree, course_node, activity, capabilities)
        if activity_node is not None:
            course_node.action = activity_node.action
            activity_node.display = False

    if MANAGE_ACTIVITIES not in capabilities:
        return

    modinfo = get_fast_modinfo(course.id)
    if not modinfo.sections.get(ORPHANED_SECTION):
        return

    section1 = modinfo.section_info[ORPHANED_SECTION]
    orphaned_node = tree.add(
        course_node,
        ORPHANED,
        action=get_view_url(course.id, ORPHANED_SECTION),
        type=TYPE_SECTION,
        key=section1.id,
        icon=ORPHANED_ICON,
    )
    orphaned_node.nodetype = NODETYPE_BRANCH
    orphaned_node.classes.append("error")

    for cm_id in modinfo.sections[ORPHANED_SECTION]:
        navigation_add_activity(
            tree, orphaned_node, modinfo.cms[cm_id], capabilities, icon=ORPHANED_ICON
        )


def build_navigation(*, course: Course, user: User) -> NavigationTree:
    """Site navigation with the course node extended by the format."""
    tree = NavigationTree()
    course_node = tree.add(
        tree.root,
        course.shortname,
        action=course_view_url(course.id),
        type=TYPE_COURSE,
        key=course.id,
    )
    course_node.nodetype = NODETYPE_BRANCH

    extend_course_navigation(tree, course_node, course=course, user=user)
    return tree


def page_set_cm(
    tree: NavigationTree,
    *,
    course: Course,
    cm: CourseModule,
    user: User,
) -> bool:
    """
    On the main activity's own page, drop the extra navigation level: the
    course node becomes the activity node. Returns whether it happened.
    """
    activity = get_activity(course)
    if activity is None or activity.id != cm.id:
        return False

    if not activity.is_visible_to(capabilities_for(user.role)):
        return False

    # The page being rendered is the activity's own
    activity_node = tree.find(cm.id, TYPE_ACTIVITY)
    if activity_node is not None:
        tree.make_active(activity_node)

    return splice_activity_into_course(
        tree,
        activity_key=cm.id,
        course_key=course.id,
        page_url=module_url(cm.module, cm.id),
    )
