from singleactivity.domain.activity import MAIN_SECTION, ORPHANED_SECTION
from .exceptions import InvariantViolation

def assert_module_order(modules):
    orders = [module.order for module in modules]
    if not orders:
        return

    expected = list(range(1, len(orders) + 1))
    if sorted(orders) != expected:
        raise InvariantViolation(
            f"Module orders are not consecutive starting from 1: {orders}"
        )

def assert_single_activity_layout(modinfo, activity_id=None):
    """
    Section 0 is visible and holds the main activity only; everything else
    sits in hidden section 1.
    """
    main = modinfo.section_info.get(MAIN_SECTION)
    orphaned = modinfo.section_info.get(ORPHANED_SECTION)

    if main is None or orphaned is None:
        raise InvariantViolation("Sections 0 and 1 must both exist.")

    if not main.visible:
        raise InvariantViolation("Section 0 must be visible.")

    if orphaned.visible:
        raise InvariantViolation("Section 1 must be hidden.")

    expected_main = [activity_id] if activity_id else []
    if modinfo.sections.get(MAIN_SECTION, []) != expected_main:
        raise InvariantViolation(
            f"Section 0 must only hold the main activity, found: "
            f"{modinfo.sections.get(MAIN_SECTION, [])}"
        )

    for sectionnum, cm_ids in modinfo.sections.items():
        if sectionnum not in (MAIN_SECTION, ORPHANED_SECTION) and cm_ids:
            raise InvariantViolation(
                f"Section {sectionnum} must be empty, found: {cm_ids}"
            )

    for section in modinfo.section_info.values():
        assert_module_order(section.modules)
