import json
from flask import current_app, request
from models import db
from models.audit_log import AuditLog
from utils.client_ip import client_ip

def log_event(action: str, entity=None, entity_id=None, metadata=None):
    """
    Persist one audit row and mirror it to the app log.
    Commits the current session, so call it after the handler's own commit.
    """
    ip = client_ip()
    user_agent = request.headers.get("User-Agent", "")

    row = AuditLog(
        action=action,
        entity=entity,
        entity_id=str(entity_id) if entity_id is not None else None,
        ip=ip,
        user_agent=user_agent[:255] if user_agent else None,
        metadata_json=json.dumps(metadata) if metadata else None,
    )
    db.session.add(row)
    db.session.commit()

    current_app.logger.info("audit %s %s=%s ip=%s", action, entity or "-", entity_id or "-", ip)
