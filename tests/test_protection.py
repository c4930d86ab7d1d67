# tests/test_protection.py
import copy

from tests.conftest import make_post


class TestProtectedCaseStudy:
    def _save(self, client, api, study, headers, password="open-sesame"):
        study.update({"isPasswordProtected": True, "password": password})
        client.post(f"{api}/admin/case-studies", json=study, headers=headers)
        return study

    def test_public_reads_never_contain_password(self, client, api, study, admin_headers):
        self._save(client, api, study, admin_headers)
        listed = client.get(f"{api}/case-studies").get_json()["data"]
        single = client.get(f"{api}/case-studies/{study['id']}").get_json()["data"]
        for record in listed + [single]:
            assert "password" not in record
            assert record["locked"] is True
            assert "problem" not in record and "images" not in record
            assert record["title"] == study["title"]

    def test_unprotected_has_no_lock_marker(self, client, api, study, admin_headers):
        client.post(f"{api}/admin/case-studies", json=study, headers=admin_headers)
        data = client.get(f"{api}/case-studies/{study['id']}").get_json()["data"]
        assert "locked" not in data

    def test_unlock_wrong_password(self, client, api, study, admin_headers):
        self._save(client, api, study, admin_headers)
        resp = client.post(f"{api}/case-studies/{study['id']}/unlock", json={"password": "nope"})
        assert resp.status_code == 401
        body = resp.get_json()
        assert body["unlocked"] is False
        assert "token" not in body

    def test_unlock_then_read_full_record(self, client, api, study, admin_headers):
        saved = self._save(client, api, copy.deepcopy(study), admin_headers)
        resp = client.post(f"{api}/case-studies/{study['id']}/unlock", json={"password": "open-sesame"})
        assert resp.status_code == 200
        body = resp.get_json()
        assert body["unlocked"] is True
        assert body["data"]["problem"] == study["problem"]
        assert "password" not in body["data"]

        got = client.get(
            f"{api}/case-studies/{study['id']}", headers={"X-Unlock-Token": body["token"]}
        ).get_json()["data"]
        expected = {k: v for k, v in saved.items() if k != "password"}
        assert got == expected

    def test_token_is_scoped_to_one_record(self, client, api, study, admin_headers):
        self._save(client, api, copy.deepcopy(study), admin_headers)
        other = copy.deepcopy(study)
        other["id"] = "other-study"
        self._save(client, api, other, admin_headers)

        token = client.post(
            f"{api}/case-studies/{study['id']}/unlock", json={"password": "open-sesame"}
        ).get_json()["token"]
        got = client.get(f"{api}/case-studies/other-study", headers={"X-Unlock-Token": token}).get_json()
        assert got["data"]["locked"] is True

    def test_garbage_token_stays_locked(self, client, api, study, admin_headers):
        self._save(client, api, study, admin_headers)
        got = client.get(f"{api}/case-studies/{study['id']}", headers={"X-Unlock-Token": "garbage"})
        assert got.status_code == 200
        assert got.get_json()["data"]["locked"] is True

    def test_unlock_missing_is_404(self, client, api):
        resp = client.post(f"{api}/case-studies/ghost/unlock", json={"password": "x"})
        assert resp.status_code == 404


class TestProtectedBlogPost:
    def test_content_gated_until_unlocked(self, client, api, admin_headers):
        post = make_post(passwordProtected=True, password="pw", content="secret words")
        client.post(f"{api}/admin/blog-posts", json=post, headers=admin_headers)

        listed = client.get(f"{api}/blog-posts").get_json()["data"]
        assert "content" not in listed[0] and "password" not in listed[0]

        locked = client.get(f"{api}/blog-posts/first-post").get_json()["data"]
        assert locked["locked"] is True and "content" not in locked

        resp = client.post(f"{api}/blog-posts/first-post/unlock", json={"password": "pw"})
        token = resp.get_json()["token"]
        full = client.get(f"{api}/blog-posts/first-post", headers={"X-Unlock-Token": token}).get_json()["data"]
        assert full["content"] == "secret words"
        assert "password" not in full

    def test_wrong_password(self, client, api, admin_headers):
        post = make_post(passwordProtected=True, password="pw")
        client.post(f"{api}/admin/blog-posts", json=post, headers=admin_headers)
        resp = client.post(f"{api}/blog-posts/first-post/unlock", json={"password": "PW"})
        assert resp.status_code == 401
