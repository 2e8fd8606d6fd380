import json
import logging

from flask import Flask
from flask_cors import CORS
from werkzeug.middleware.proxy_fix import ProxyFix
from config import Config
from routes import auth_bp, tab_bp, demo_bp, like_bp, registry_bp, logo_bp, file_bp, audit_bp

from models import db
from flask_migrate import Migrate
from storage import init_blob_store
from utils.auth_context import load_current_admin
from utils.catalog import init_catalog


class JsonFormatter(logging.Formatter):
    def format(self, record):
        base = {
            "level": record.levelname,
            "msg": record.getMessage(),
            "name": record.name,
        }
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base)


def configure_logging(app):
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    app.logger.handlers.clear()
    app.logger.addHandler(handler)


def create_app(config_object=None, blob_store=None):
    app = Flask(__name__)
    app.config.from_object(config_object or Config)

    configure_logging(app)

    # Trust X-Forwarded-For only from the configured number of proxies
    hops = app.config.get("TRUSTED_PROXY_HOPS", 0)
    if hops:
        app.wsgi_app = ProxyFix(app.wsgi_app, x_for=hops, x_proto=hops, x_host=hops)

    CORS(
        app,
        origins=app.config.get("CORS_ALLOW_ORIGIN", "*"),
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # Register routes
    app.register_blueprint(auth_bp)
    app.register_blueprint(tab_bp)
    app.register_blueprint(demo_bp)
    app.register_blueprint(like_bp)
    app.register_blueprint(registry_bp)
    app.register_blueprint(logo_bp)
    app.register_blueprint(file_bp)
    app.register_blueprint(audit_bp)

    # Database init
    db.init_app(app)

    # Migrations
    Migrate(app, db)

    init_blob_store(app, blob_store)
    init_catalog(app)

    @app.before_request
    def _load_admin():
        load_current_admin()

    @app.after_request
    def add_security_headers(resp):
        resp.headers["X-Content-Type-Options"] = "nosniff"
        # served demo files set SAMEORIGIN themselves
        resp.headers.setdefault("X-Frame-Options", "DENY")
        resp.headers["Referrer-Policy"] = "no-referrer"
        if resp.mimetype == "application/json":
            resp.headers["Content-Security-Policy"] = "default-src 'none'; frame-ancestors 'none';"
        return resp

    register_cli(app)

    app.logger.info("arena backend ready (blob backend: %s)", app.config.get("BLOB_BACKEND"))
    return app

#-------------------------
import click
from security.bruteforce import clear_lock
from utils.seed import seed_catalog

def register_cli(app):
    @app.cli.command("seed-catalog")
    def seed_catalog_command():
        """Insert the predefined brands and models that are missing."""
        brands_added, models_added = seed_catalog()
        app.extensions["model_catalog"].invalidate()
        print(f"Added {brands_added} brand(s) and {models_added} model(s)")

    @app.cli.command("unlock")
    @click.argument("ip")
    def unlock(ip):
        """Clear the login lockout for a client IP."""
        if clear_lock(ip.strip()):
            print(f"{ip} unlocked")
        else:
            print("No lockout record for that IP")

#-------------------------




if __name__ == "__main__":
    app = create_app()
    # Run locally
    app.run(host="127.0.0.1", port=5002)
