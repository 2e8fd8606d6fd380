"""
Shared fixtures: an app on in-memory SQLite with blobs in a temp directory.
"""
import pytest

from app import create_app
from config import Config
from models import db
from security.token import issue_token
from storage.local import LocalBlobStore

ADMIN_PASSWORD = "s3cr3t!!"


class TestConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    ADMIN_PASSWORD = ADMIN_PASSWORD
    TOKEN_SCHEME = "prefix"
    BLOB_BACKEND = "local"
    LOG_LEVEL = "WARNING"


@pytest.fixture
def blob_store(tmp_path):
    return LocalBlobStore(str(tmp_path / "blobs"))


@pytest.fixture
def app(blob_store):
    app = create_app(TestConfig, blob_store=blob_store)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_token():
    token, _ = issue_token(ADMIN_PASSWORD, 60 * 60 * 1000)
    return token


@pytest.fixture
def auth_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}


@pytest.fixture
def make_tab(client, auth_headers):
    def _make(slug="snake", name_cn="贪吃蛇", name_en="Snake", sort_order=0):
        resp = client.post(
            "/api/tabs",
            json={"name_cn": name_cn, "name_en": name_en, "slug": slug, "sort_order": sort_order},
            headers=auth_headers,
        )
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return _make


@pytest.fixture
def make_demo(client, auth_headers):
    def _make(tab_id, model_key="anthropic", demo_type="html", code="<h1>hi</h1>", **extra):
        payload = {"tab_id": tab_id, "model_key": model_key, "demo_type": demo_type, "code": code}
        payload.update(extra)
        resp = client.post("/api/demos", json=payload, headers=auth_headers)
        assert resp.status_code == 201, resp.get_json()
        return resp.get_json()
    return _make


@pytest.fixture
def make_app(blob_store):
    """Builds an app from TestConfig with some settings overridden, inside its own app context."""
    contexts = []

    def _make(**overrides):
        config = type("OverrideConfig", (TestConfig,), overrides)
        other = create_app(config, blob_store=blob_store)
        ctx = other.app_context()
        ctx.push()
        contexts.append(ctx)
        db.create_all()
        return other

    yield _make

    for ctx in reversed(contexts):
        db.session.remove()
        db.drop_all()
        ctx.pop()
