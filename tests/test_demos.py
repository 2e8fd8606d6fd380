"""
Tests for demo upload/update/delete, likes and the leaderboard.
"""
import base64

import pytest

from models import db
from models.demo import Demo
from models.model_registry import Brand, ModelEntry

PNG_BYTES = b"\x89PNG\r\n\x1a\nfake-image"


@pytest.fixture
def tab(make_tab):
    return make_tab()


class TestDemoUpload:
    def test_html_demo_is_stored_verbatim(self, make_demo, tab, blob_store):
        demo = make_demo(tab["id"], code="<canvas></canvas>")
        assert demo["id"].startswith("demo-")
        assert demo["file_key"] == f"demos/{demo['id']}/index.html"
        assert demo["model_name"] == "Anthropic"
        assert demo["thumbnail_key"] is None

        stored = blob_store.get(demo["file_key"])
        assert stored.data == b"<canvas></canvas>"
        assert stored.content_type == "text/html"

    def test_python_demo_is_wrapped(self, make_demo, tab, blob_store):
        demo = make_demo(tab["id"], demo_type="python", code="print('hello')")
        html = blob_store.get(demo["file_key"]).data.decode("utf-8")
        assert "pyodide" in html
        assert "print('hello')" in html or "print(\\u0027hello\\u0027)" in html

    def test_explicit_model_name_wins(self, make_demo, tab):
        demo = make_demo(tab["id"], model_key="custom", model_name="Custom Model")
        assert demo["model_name"] == "Custom Model"

    def test_unknown_model_key_falls_back_to_key(self, make_demo, tab):
        assert make_demo(tab["id"], model_key="mystery")["model_name"] == "mystery"

    def test_data_url_thumbnail(self, make_demo, tab, blob_store):
        encoded = base64.b64encode(PNG_BYTES).decode("ascii")
        demo = make_demo(tab["id"], thumbnail=f"data:image/png;base64,{encoded}")
        assert demo["thumbnail_key"] == f"demos/{demo['id']}/thumbnail.png"
        thumb = blob_store.get(demo["thumbnail_key"])
        assert thumb.data == PNG_BYTES
        assert thumb.content_type == "image/png"

    def test_invalid_thumbnail(self, client, auth_headers, tab):
        resp = client.post(
            "/api/demos",
            json={"tab_id": tab["id"], "model_key": "x", "demo_type": "html", "code": "x", "thumbnail": "%%%"},
            headers=auth_headers,
        )
        assert resp.status_code == 400
        assert Demo.query.count() == 0

    @pytest.mark.parametrize("payload", [
        {"model_key": "x", "code": "x"},
        {"tab_id": "t", "code": "x"},
        {"tab_id": "t", "model_key": "x"},
        {"tab_id": "t", "model_key": "x", "code": "   "},
    ])
    def test_missing_fields(self, client, auth_headers, payload):
        assert client.post("/api/demos", json=payload, headers=auth_headers).status_code == 400

    def test_invalid_type(self, client, auth_headers, tab):
        resp = client.post(
            "/api/demos",
            json={"tab_id": tab["id"], "model_key": "x", "demo_type": "flash", "code": "x"},
            headers=auth_headers,
        )
        assert resp.status_code == 400

    def test_unknown_tab(self, client, auth_headers):
        resp = client.post(
            "/api/demos",
            json={"tab_id": "tab-missing", "model_key": "x", "demo_type": "html", "code": "x"},
            headers=auth_headers,
        )
        assert resp.status_code == 404

    def test_blob_failure_is_a_generic_500(self, client, auth_headers, tab, blob_store, monkeypatch):
        def boom(*args, **kwargs):
            raise OSError("disk full")
        monkeypatch.setattr(blob_store, "put", boom)

        resp = client.post(
            "/api/demos",
            json={"tab_id": tab["id"], "model_key": "x", "demo_type": "html", "code": "x"},
            headers=auth_headers,
        )
        assert resp.status_code == 500
        assert resp.get_json() == {"error": "Failed to upload demo"}


class TestDemoQueries:
    def test_list_newest_first_and_filter_by_tab(self, client, make_tab, make_demo):
        first_tab = make_tab(slug="one")
        second_tab = make_tab(slug="two")
        older = make_demo(first_tab["id"])
        newer = make_demo(first_tab["id"])
        make_demo(second_tab["id"])

        db.session.get(Demo, older["id"]).created_at = db.session.get(Demo, newer["id"]).created_at.replace(year=2000)
        db.session.commit()

        ids = [d["id"] for d in client.get(f"/api/demos?tab={first_tab['id']}").get_json()]
        assert ids == [newer["id"], older["id"]]
        assert len(client.get("/api/demos").get_json()) == 3

    def test_get_one(self, client, tab, make_demo):
        demo = make_demo(tab["id"])
        assert client.get(f"/api/demos/{demo['id']}").get_json() == demo
        assert client.get("/api/demos/demo-missing").status_code == 404


class TestDemoUpdate:
    def test_new_code_rewrites_blob(self, client, auth_headers, tab, make_demo, blob_store):
        demo = make_demo(tab["id"])
        resp = client.put(f"/api/demos/{demo['id']}", json={"code": "<p>v2</p>"}, headers=auth_headers)
        assert resp.status_code == 200
        assert blob_store.get(demo["file_key"]).data == b"<p>v2</p>"

    def test_type_change_with_code_rewraps(self, client, auth_headers, tab, make_demo, blob_store):
        demo = make_demo(tab["id"])
        resp = client.put(
            f"/api/demos/{demo['id']}",
            json={"demo_type": "markdown", "code": "# Title"},
            headers=auth_headers,
        )
        assert resp.get_json()["demo_type"] == "markdown"
        assert b"marked" in blob_store.get(demo["file_key"]).data

    def test_type_change_without_code(self, client, auth_headers, tab, make_demo):
        demo = make_demo(tab["id"])
        resp = client.put(f"/api/demos/{demo['id']}", json={"demo_type": "python"}, headers=auth_headers)
        assert resp.status_code == 400

    def test_metadata_update(self, client, auth_headers, make_tab, make_demo):
        tab = make_tab(slug="one")
        other = make_tab(slug="two")
        demo = make_demo(tab["id"])
        resp = client.put(
            f"/api/demos/{demo['id']}",
            json={"tab_id": other["id"], "model_key": "gemini", "comment": "fastest"},
            headers=auth_headers,
        )
        body = resp.get_json()
        assert body["tab_id"] == other["id"]
        assert body["model_key"] == "gemini"
        assert body["model_name"] == "Gemini"
        assert body["comment"] == "fastest"

    def test_update_errors(self, client, auth_headers, tab, make_demo):
        demo = make_demo(tab["id"])
        assert client.put(f"/api/demos/{demo['id']}", json={}, headers=auth_headers).status_code == 400
        assert client.put("/api/demos/demo-missing", json={"comment": "x"}, headers=auth_headers).status_code == 404
        resp = client.put(f"/api/demos/{demo['id']}", json={"tab_id": "tab-missing"}, headers=auth_headers)
        assert resp.status_code == 404


class TestDemoDelete:
    def test_delete_removes_blobs_and_likes(self, client, auth_headers, tab, make_demo, blob_store):
        encoded = base64.b64encode(PNG_BYTES).decode("ascii")
        demo = make_demo(tab["id"], thumbnail=encoded)
        client.post(f"/api/demos/{demo['id']}/like")

        resp = client.delete(f"/api/demos/{demo['id']}", headers=auth_headers)
        assert resp.get_json() == {"success": True}
        assert blob_store.get(demo["file_key"]) is None
        assert blob_store.get(demo["thumbnail_key"]) is None
        assert client.get("/api/likes").get_json() == {}

    def test_delete_unknown(self, client, auth_headers):
        assert client.delete("/api/demos/demo-missing", headers=auth_headers).status_code == 404


class TestLikes:
    def test_toggle(self, client, tab, make_demo):
        demo = make_demo(tab["id"])
        url = f"/api/demos/{demo['id']}/like"

        assert client.post(url).get_json() == {"liked": True, "count": 1}
        assert client.get(url).get_json() == {"count": 1, "liked": True}
        assert client.post(url).get_json() == {"liked": False, "count": 0}
        assert client.get(url).get_json() == {"count": 0, "liked": False}

    def test_likes_are_per_ip(self, client, tab, make_demo):
        demo = make_demo(tab["id"])
        url = f"/api/demos/{demo['id']}/like"
        client.post(url, environ_base={"REMOTE_ADDR": "1.1.1.1"})
        client.post(url, environ_base={"REMOTE_ADDR": "2.2.2.2"})

        assert client.get(url, environ_base={"REMOTE_ADDR": "3.3.3.3"}).get_json() == {"count": 2, "liked": False}

    def test_forwarding_headers_do_not_mint_extra_likes(self, client, tab, make_demo):
        demo = make_demo(tab["id"])
        url = f"/api/demos/{demo['id']}/like"
        client.post(url, headers={"X-Forwarded-For": "1.1.1.1"})
        resp = client.post(url, headers={"CF-Connecting-IP": "2.2.2.2"})

        assert resp.get_json() == {"liked": False, "count": 0}

    def test_like_unknown_demo(self, client):
        assert client.post("/api/demos/demo-missing/like").status_code == 404

    def test_likes_map(self, client, make_tab, make_demo):
        first_tab = make_tab(slug="one")
        second_tab = make_tab(slug="two")
        a = make_demo(first_tab["id"])
        b = make_demo(second_tab["id"])
        client.post(f"/api/demos/{a['id']}/like")
        client.post(f"/api/demos/{b['id']}/like", environ_base={"REMOTE_ADDR": "8.8.8.8"})

        assert client.get("/api/likes").get_json() == {
            a["id"]: {"count": 1, "liked": True},
            b["id"]: {"count": 1, "liked": False},
        }
        assert list(client.get(f"/api/likes?tab={second_tab['id']}").get_json()) == [b["id"]]


class TestLeaderboard:
    def test_most_liked_first_with_model_details(self, client, tab, make_demo):
        db.session.add(Brand(key="acme", name="Acme AI", logo_filename="acme.svg"))
        db.session.add(ModelEntry(key="acme-1", name="Acme One", brand_key="acme", logo_filename="acme.svg", color="#123456"))
        db.session.commit()

        popular = make_demo(tab["id"], model_key="acme-1")
        quiet = make_demo(tab["id"], model_key="gemini")
        make_demo(tab["id"], model_key="qwen")

        for ip in ("1.1.1.1", "2.2.2.2"):
            client.post(f"/api/demos/{popular['id']}/like", environ_base={"REMOTE_ADDR": ip})
        client.post(f"/api/demos/{quiet['id']}/like")

        board = client.get("/api/leaderboard").get_json()
        assert [row["demo_id"] for row in board] == [popular["id"], quiet["id"]]
        assert board[0] == {
            "demo_id": popular["id"],
            "model_name": "Acme One",
            "model_key": "acme-1",
            "tab_id": tab["id"],
            "brand_name": "Acme AI",
            "color": "#123456",
            "like_count": 2,
        }
        assert board[1]["brand_name"] == "Gemini"
        assert board[1]["color"] == "#4285f4"

    def test_filter_by_tab(self, client, make_tab, make_demo):
        first_tab = make_tab(slug="one")
        second_tab = make_tab(slug="two")
        a = make_demo(first_tab["id"])
        b = make_demo(second_tab["id"])
        client.post(f"/api/demos/{a['id']}/like")
        client.post(f"/api/demos/{b['id']}/like")

        board = client.get(f"/api/leaderboard?tab={second_tab['id']}").get_json()
        assert [row["demo_id"] for row in board] == [b["id"]]
