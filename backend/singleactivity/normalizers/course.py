from .course_module import normalize_course_module

def normalize_section(section, admin=False):
    modules = sorted(section.modules, key=lambda m: m.order)
    return {
        "id": section.id,
        "section": section.section,
        "name": section.name,
        "visible": section.visible,
        "modules": [
            normalize_course_module(m, admin=admin) for m in modules
        ],
    }

def normalize_course(course, admin=False, include_sections=False):
    data = {
        "id": course.id,
        "fullname": course.fullname,
        "shortname": course.shortname,
        "format": course.format,
        "format_options": course.format_options or {},
        "default_blocks": course.default_blocks or {},
    }

    if include_sections:
        data["sections"] = [
            normalize_section(s, admin=admin) for s in course.sections
        ]

    return data
