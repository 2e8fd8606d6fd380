from .db import db
from .tab import Tab
from .demo import Demo, DEMO_TYPES
from .model_registry import ModelEntry, Brand
from .login_attempt import LoginAttempt
from .demo_like import DemoLike
from .audit_log import AuditLog
