"""
Tests for logo management and raw file serving.
"""
import pytest

from routes.logos import sanitize_logo_name

SVG = '<svg xmlns="http://www.w3.org/2000/svg"><circle r="4"/></svg>'


@pytest.mark.parametrize("raw,expected", [
    ("openai", "openai.svg"),
    ("Open AI!", "OpenAI.svg"),
    ("../../etc/passwd", "etcpasswd.svg"),
    ("logo.svg", "logo.svg"),
    ("$$$", ""),
])
def test_sanitize_logo_name(raw, expected):
    assert sanitize_logo_name(raw) == expected


class TestLogos:
    def test_upload_list_serve_delete(self, client, auth_headers):
        resp = client.post("/api/logos", json={"name": "acme", "content": SVG}, headers=auth_headers)
        assert resp.status_code == 201
        assert resp.get_json() == {"name": "acme.svg"}

        assert client.get("/api/logos").get_json() == ["acme.svg"]

        served = client.get("/api/logo/acme.svg")
        assert served.status_code == 200
        assert served.headers["Content-Type"] == "image/svg+xml"
        assert served.headers["Cache-Control"] == "public, max-age=604800, immutable"
        assert served.headers["ETag"]
        assert served.data.decode("utf-8") == SVG

        again = client.get("/api/logo/acme.svg", headers={"If-None-Match": served.headers["ETag"]})
        assert again.status_code == 304

        assert client.delete("/api/logos/acme.svg", headers=auth_headers).get_json() == {"deleted": "acme.svg"}
        assert client.get("/api/logo/acme.svg").status_code == 404

    def test_missing_logo(self, client):
        resp = client.get("/api/logo/nothing.svg")
        assert resp.status_code == 404
        assert resp.get_json() == {"error": "Logo not found"}

    def test_upload_requires_name_and_content(self, client, auth_headers):
        assert client.post("/api/logos", json={"name": "x"}, headers=auth_headers).status_code == 400
        assert client.post("/api/logos", json={"name": "$$", "content": SVG}, headers=auth_headers).status_code == 400


class TestFiles:
    def test_demo_page_served_as_html(self, client, make_tab, make_demo):
        tab = make_tab()
        demo = make_demo(tab["id"], code="<h1>arena</h1>")

        resp = client.get(f"/api/file/{demo['file_key']}")
        assert resp.status_code == 200
        assert resp.headers["Content-Type"] == "text/html; charset=utf-8"
        assert resp.headers["X-Frame-Options"] == "SAMEORIGIN"
        assert resp.headers["ETag"]
        assert resp.data == b"<h1>arena</h1>"

    def test_missing_file(self, client):
        assert client.get("/api/file/demos/nope/index.html").status_code == 404

    def test_traversal_is_not_found(self, client):
        assert client.get("/api/file/demos/../../secret").status_code == 404

    def test_json_responses_are_not_frameable(self, client):
        resp = client.get("/api/tabs")
        assert resp.headers["X-Frame-Options"] == "DENY"
        assert resp.headers["X-Content-Type-Options"] == "nosniff"
        assert resp.headers["Access-Control-Allow-Origin"] == "*"
        assert "Access-Control-Allow-Headers" not in resp.headers

    def test_preflight(self, client):
        resp = client.open(
            "/api/demos",
            method="OPTIONS",
            headers={
                "Origin": "https://arena.example",
                "Access-Control-Request-Method": "DELETE",
                "Access-Control-Request-Headers": "Authorization, Content-Type, X-Debug",
            },
        )
        assert resp.status_code == 200
        assert "DELETE" in resp.headers["Access-Control-Allow-Methods"]
        allowed = resp.headers["Access-Control-Allow-Headers"].lower()
        assert "authorization" in allowed
        assert "content-type" in allowed
        assert "x-debug" not in allowed

    def test_sidecar_metadata_is_not_found(self, client, make_tab, make_demo):
        demo = make_demo(make_tab()["id"])
        assert client.get(f"/api/file/demos/{demo['id']}/index.html.meta.json").status_code == 404
