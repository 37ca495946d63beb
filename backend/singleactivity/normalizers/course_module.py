from singleactivity.utils.urls import module_url

def normalize_course_module(cm, admin=False):
    base = {
        "id": cm.id,
        "module": cm.module,
        "name": cm.name,
        "section": cm.sectionnum,
        "order": cm.order,
        "url": module_url(cm.module, cm.id) if cm.module_type.has_view else None,
    }

    if admin:
        base["visible"] = cm.visible
        base["visible_old"] = cm.visible_old

    return base
