from typing import Mapping, Optional, Sequence

# Section numbers with a fixed role in a single activity course
MAIN_SECTION = 0
ORPHANED_SECTION = 1


def locate_activity(
    sections: Mapping[int, Sequence[str]],
    modnames: Mapping[str, str],
    activitytype: Optional[str],
) -> Optional[str]:
    """
    Find the main activity of a course.

    ``sections`` maps section numbers to the ordered module ids they hold and
    ``modnames`` maps each module id to its type. Returns the id of the first
    module of ``activitytype``, walking sections in ascending number. When
    several modules match, which one comes first is up to the caller's
    enumeration order.
    """
    if not activitytype:
        return None

    for sectionnum in sorted(sections):
        for cm_id in sections[sectionnum]:
            if modnames.get(cm_id) == activitytype:
                return cm_id
    return None
