from flask import g
from singleactivity.extensions import db
from singleactivity.models.audit_log import AuditLog
from typing import Optional

def log_action(
    *,
    action: str,
    entity_type: str,
    entity_id: Optional[str],
    payload: dict | None = None
):
    if getattr(g, "current_user", None) is None:
        return  # Skip logging outside an authenticated request
    log = AuditLog()

    log.actor_id = g.current_user.id
    log.action = action
    log.entity_type = entity_type
    log.entity_id = entity_id
    log.payload = payload or {}

    db.session.add(log)
