import math
from datetime import datetime, timedelta
from flask import current_app
from sqlalchemy import select, update

from models import db
from models.login_attempt import LoginAttempt


def _utcnow() -> datetime:
    return datetime.utcnow()


def check_lock(ip: str) -> tuple[bool, int]:
    """
    Returns (locked, minutes_remaining).
    An expired lock deletes the record so counting restarts from zero.
    """
    row = db.session.get(LoginAttempt, ip)
    if not row or not row.locked_until:
        return False, 0

    now = _utcnow()
    if row.locked_until <= now:
        db.session.delete(row)
        db.session.commit()
        return False, 0

    minutes = math.ceil((row.locked_until - now).total_seconds() / 60)
    return True, max(minutes, 1)


def _increment(ip: str, now: datetime) -> None:
    table = LoginAttempt.__table__
    dialect = db.session.get_bind().dialect.name

    if dialect in ("sqlite", "postgresql"):
        if dialect == "sqlite":
            from sqlalchemy.dialects.sqlite import insert
        else:
            from sqlalchemy.dialects.postgresql import insert
        stmt = insert(table).values(ip=ip, count=1, first_attempt=now, last_attempt=now)
        stmt = stmt.on_conflict_do_update(
            index_elements=[table.c.ip],
            set_={"count": table.c.count + 1, "last_attempt": now},
        )
        db.session.execute(stmt)
        return

    # Other dialects: UPDATE first, INSERT only when no row matched
    result = db.session.execute(
        update(table).where(table.c.ip == ip).values(count=table.c.count + 1, last_attempt=now)
    )
    if result.rowcount == 0:
        db.session.execute(table.insert().values(ip=ip, count=1, first_attempt=now, last_attempt=now))


def register_failure(ip: str) -> tuple[int, bool]:
    """
    Atomically increments the failure counter. Returns (fail_count, locked_now)
    """
    now = _utcnow()
    _increment(ip, now)

    count = db.session.execute(
        select(LoginAttempt.count).where(LoginAttempt.ip == ip)
    ).scalar_one()

    max_attempts = current_app.config.get("MAX_LOGIN_ATTEMPTS", 5)
    lock_minutes = current_app.config.get("LOCKOUT_MINUTES", 60)

    locked_now = False
    if count >= max_attempts:
        db.session.execute(
            update(LoginAttempt.__table__)
            .where(LoginAttempt.ip == ip)
            .values(locked_until=now + timedelta(minutes=lock_minutes))
        )
        locked_now = True

    db.session.commit()
    # Core statements bypass the identity map
    db.session.expire_all()
    return count, locked_now


def reset_attempts(ip: str):
    """
    Clears failure state after successful login.
    """
    db.session.execute(LoginAttempt.__table__.delete().where(LoginAttempt.ip == ip))
    db.session.commit()
    db.session.expire_all()


def clear_lock(ip: str) -> bool:
    row = db.session.get(LoginAttempt, ip)
    if not row:
        return False
    db.session.delete(row)
    db.session.commit()
    return True
