from .auth import auth_bp
from .tabs import tab_bp
from .demos import demo_bp
from .likes import like_bp
from .registry import registry_bp
from .logos import logo_bp
from .files import file_bp
from .audit_logs import audit_bp
