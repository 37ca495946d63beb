# singleactivity/application/course/modinfo.py
from dataclasses import dataclass, field
from typing import Dict, List

from singleactivity.models.course_module import CourseModule
from singleactivity.models.section import Section


@dataclass
class ModInfo:
    """
    Snapshot of a course's sections and modules.

    ``sections`` only lists sections that hold at least one module, in the
    order the modules appear in them.
    """
    course_id: str
    sections: Dict[int, List[str]] = field(default_factory=dict)
    cms: Dict[str, CourseModule] = field(default_factory=dict)
    section_info: Dict[int, Section] = field(default_factory=dict)

    @property
    def modnames(self) -> Dict[str, str]:
        return {cm_id: cm.module for cm_id, cm in self.cms.items()}


def get_fast_modinfo(course_id: str) -> ModInfo:
    modinfo = ModInfo(course_id=course_id)

    sections = (
        Section.query
        .filter_by(course_id=course_id)
        .order_by(Section.section.asc())
        .all()
    )
    for section in sections:
        modinfo.section_info[section.section] = section

    modules = (
        CourseModule.query
        .join(Section, CourseModule.section_id == Section.id)
        .filter(CourseModule.course_id == course_id)
        .order_by(Section.section.asc(), CourseModule.order.asc())
        .all()
    )
    for cm in modules:
        modinfo.sections.setdefault(cm.sectionnum, []).append(cm.id)
        modinfo.cms[cm.id] = cm

    return modinfo
