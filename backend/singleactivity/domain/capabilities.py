from typing import FrozenSet

COURSE_CREATE = "course:create"
COURSE_UPDATE = "course:update"
MANAGE_ACTIVITIES = "course:manageactivities"
VIEW_HIDDEN_ACTIVITIES = "course:viewhiddenactivities"

# Role archetypes and the capabilities they grant
ROLE_CAPABILITIES: dict[str, FrozenSet[str]] = {
    "manager": frozenset({
        COURSE_CREATE,
        COURSE_UPDATE,
        MANAGE_ACTIVITIES,
        VIEW_HIDDEN_ACTIVITIES,
    }),
    "editingteacher": frozenset({
        COURSE_UPDATE,
        MANAGE_ACTIVITIES,
        VIEW_HIDDEN_ACTIVITIES,
    }),
    "teacher": frozenset({VIEW_HIDDEN_ACTIVITIES}),
    "student": frozenset(),
}


def capabilities_for(role: str | None) -> FrozenSet[str]:
    return ROLE_CAPABILITIES.get(role or "", frozenset())


def has_capability(role: str | None, capability: str) -> bool:
    return capability in capabilities_for(role)
