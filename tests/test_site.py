# tests/test_site.py
from services.defaults import DEFAULT_HOMEPAGE_SECTIONS, DEFAULT_SITE_SETTINGS


class TestSettings:
    def test_defaults_when_unset(self, client, api):
        body = client.get(f"{api}/settings").get_json()
        assert body == {"success": True, "data": DEFAULT_SITE_SETTINGS}

    def test_put_overwrites_wholesale(self, client, api, admin_headers):
        new = {"siteName": "Mine", "contactEmail": "me@example.com"}
        resp = client.put(f"{api}/admin/settings", json=new, headers=admin_headers)
        assert resp.status_code == 200
        assert client.get(f"{api}/settings").get_json()["data"] == new

    def test_empty_object_is_kept(self, client, api, admin_headers):
        resp = client.put(f"{api}/admin/settings", json={}, headers=admin_headers)
        assert resp.status_code == 200
        assert client.get(f"{api}/settings").get_json()["data"] == {}

    def test_put_requires_object(self, client, api, admin_headers):
        resp = client.put(f"{api}/admin/settings", json=["a"], headers=admin_headers)
        assert resp.status_code == 400

    def test_put_requires_admin(self, client, api):
        assert client.put(f"{api}/admin/settings", json={"siteName": "x"}).status_code == 401
        assert client.get(f"{api}/settings").get_json()["data"] == DEFAULT_SITE_SETTINGS


class TestHomepageSections:
    def test_defaults_sorted(self, client, api):
        data = client.get(f"{api}/homepage-sections").get_json()["data"]
        assert data == DEFAULT_HOMEPAGE_SECTIONS
        assert [s["order"] for s in data] == sorted(s["order"] for s in data)

    def test_save_and_read_back_sorted(self, client, api, admin_headers):
        sections = [
            {"id": "cta", "name": "CTA", "isVisible": False, "order": 2},
            {"id": "hero", "name": "Hero", "isVisible": True, "order": 1},
        ]
        resp = client.post(f"{api}/homepage-sections", json={"sections": sections}, headers=admin_headers)
        assert resp.status_code == 200
        data = client.get(f"{api}/homepage-sections").get_json()["data"]
        assert [s["id"] for s in data] == ["hero", "cta"]

    def test_empty_list_is_kept(self, client, api, admin_headers):
        resp = client.post(f"{api}/homepage-sections", json={"sections": []}, headers=admin_headers)
        assert resp.status_code == 200
        assert client.get(f"{api}/homepage-sections").get_json()["data"] == []

    def test_save_requires_admin(self, client, api):
        resp = client.post(f"{api}/homepage-sections", json={"sections": []})
        assert resp.status_code == 401

    def test_invalid_sections(self, client, api, admin_headers):
        for body in ({"sections": "nope"}, {}, {"sections": [{"name": "no id"}]}):
            resp = client.post(f"{api}/homepage-sections", json=body, headers=admin_headers)
            assert resp.status_code == 400
            assert resp.get_json()["error"] == "Invalid sections data"
