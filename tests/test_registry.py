"""
Tests for the model and brand registry endpoints.
"""
from utils.catalog import get_catalog


def _brand(client, auth_headers, key="acme", name="Acme AI", logo="acme.svg"):
    return client.post(
        "/api/brands",
        json={"key": key, "name": name, "logo_filename": logo},
        headers=auth_headers,
    )


class TestModels:
    def test_key_defaults_to_slug_of_name(self, client, auth_headers):
        resp = client.post("/api/models", json={"name": "Claude Sonnet 4"}, headers=auth_headers)
        assert resp.status_code == 201
        body = resp.get_json()
        assert body["key"] == "claude-sonnet-4"
        assert body["color"] == "#6366f1"
        assert body["brand_key"] is None
        assert body["logo_filename"] == "claude-sonnet-4.svg"

    def test_defaults_from_brand(self, client, auth_headers):
        _brand(client, auth_headers)
        body = client.post(
            "/api/models",
            json={"name": "Acme One", "brand_key": "acme", "color": "#abcdef"},
            headers=auth_headers,
        ).get_json()
        assert body["logo_filename"] == "acme.svg"
        assert body["brand_name"] == "Acme AI"
        assert body["color"] == "#abcdef"

    def test_unknown_brand(self, client, auth_headers):
        resp = client.post("/api/models", json={"name": "x", "brand_key": "nope"}, headers=auth_headers)
        assert resp.status_code == 404

    def test_name_required(self, client, auth_headers):
        assert client.post("/api/models", json={"key": "x"}, headers=auth_headers).status_code == 400

    def test_upsert_replaces_existing(self, client, auth_headers):
        first = client.post("/api/models", json={"key": "m1", "name": "First"}, headers=auth_headers)
        second = client.post("/api/models", json={"key": "m1", "name": "Second"}, headers=auth_headers)
        assert first.status_code == 201
        assert second.status_code == 200
        assert second.get_json()["name"] == "Second"
        models = client.get("/api/models").get_json()
        assert [(m["key"], m["name"]) for m in models] == [("m1", "Second")]

    def test_list_sorted_by_name(self, client, auth_headers):
        for name in ("Zeta", "Alpha", "Mid"):
            client.post("/api/models", json={"name": name}, headers=auth_headers)
        assert [m["name"] for m in client.get("/api/models").get_json()] == ["Alpha", "Mid", "Zeta"]

    def test_delete(self, client, auth_headers):
        client.post("/api/models", json={"key": "m1", "name": "First"}, headers=auth_headers)
        assert client.delete("/api/models/m1", headers=auth_headers).get_json() == {"deleted": "m1"}
        assert client.delete("/api/models/m1", headers=auth_headers).status_code == 404

    def test_mutations_invalidate_catalog(self, app, client, auth_headers):
        catalog = get_catalog()
        assert catalog.model_name("m1") == "m1"

        client.post("/api/models", json={"key": "m1", "name": "Model One"}, headers=auth_headers)
        assert catalog.loaded is False
        assert catalog.model_name("m1") == "Model One"

        client.delete("/api/models/m1", headers=auth_headers)
        assert catalog.model_name("m1") == "m1"


class TestBrands:
    def test_create_and_list(self, client, auth_headers):
        assert _brand(client, auth_headers).status_code == 201
        _brand(client, auth_headers, key="beta", name="Beta Labs", logo="beta.svg")
        names = [b["name"] for b in client.get("/api/brands").get_json()]
        assert names == ["Acme AI", "Beta Labs"]

    def test_all_fields_required(self, client, auth_headers):
        resp = client.post("/api/brands", json={"key": "acme", "name": "Acme"}, headers=auth_headers)
        assert resp.status_code == 400

    def test_duplicate(self, client, auth_headers):
        _brand(client, auth_headers)
        assert _brand(client, auth_headers).status_code == 409

    def test_delete_referenced_brand_conflicts(self, client, auth_headers):
        _brand(client, auth_headers)
        client.post("/api/models", json={"name": "Acme One", "brand_key": "acme"}, headers=auth_headers)

        resp = client.delete("/api/brands/acme", headers=auth_headers)
        assert resp.status_code == 409
        assert resp.get_json()["error"] == "Cannot delete brand: 1 model(s) still reference it"

        client.delete("/api/models/acme-one", headers=auth_headers)
        assert client.delete("/api/brands/acme", headers=auth_headers).get_json() == {"deleted": "acme"}

    def test_delete_unknown(self, client, auth_headers):
        assert client.delete("/api/brands/nope", headers=auth_headers).status_code == 404
