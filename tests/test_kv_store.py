# tests/test_kv_store.py
from services import kv_store


class TestKvStore:
    def test_get_missing_returns_none(self, app):
        assert kv_store.get("nope") is None

    def test_set_then_get(self, app):
        kv_store.set("case_study:a", {"id": "a", "title": "A"})
        assert kv_store.get("case_study:a") == {"id": "a", "title": "A"}

    def test_set_overwrites(self, app):
        kv_store.set("k", {"v": 1})
        kv_store.set("k", {"v": 2})
        assert kv_store.get("k") == {"v": 2}

    def test_returned_value_is_a_copy(self, app):
        kv_store.set("k", {"tags": ["a"]})
        value = kv_store.get("k")
        value["tags"].append("b")
        assert kv_store.get("k") == {"tags": ["a"]}

    def test_delete_and_delete_missing(self, app):
        kv_store.set("k", [1, 2])
        kv_store.delete("k")
        assert kv_store.get("k") is None
        # 不存在的 key 删除不报错
        kv_store.delete("k")

    def test_get_by_prefix_is_literal(self, app):
        kv_store.set("case_study:b", {"id": "b"})
        kv_store.set("case_study:a", {"id": "a"})
        kv_store.set("caseXstudy:c", {"id": "c"})
        kv_store.set("blog_post:1", {"id": "1"})
        assert kv_store.get_by_prefix("case_study:") == [{"id": "a"}, {"id": "b"}]

    def test_get_by_prefix_empty(self, app):
        assert kv_store.get_by_prefix("blog_post:") == []
