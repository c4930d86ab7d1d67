# tests/test_seed_cli.py
import json

from app import create_app
from config import TestingConfig
from services import kv_store
from services.sample_data import sample_case_studies
from tools import seed_cli

_apps = []


def create_testing_app():
    app = create_app(TestingConfig)
    _apps.append(app)
    return app


def _run(*argv):
    _apps.clear()
    code = seed_cli.main([
        "--app-factory-path", "tests.test_seed_cli",
        "--app-factory-func", "create_testing_app",
        *argv,
    ])
    return code, _apps[0]


def test_seeds_bundled_samples(capsys):
    code, app = _run()
    assert code == 0
    assert "Initialized" in capsys.readouterr().out
    with app.app_context():
        assert len(kv_store.get_by_prefix("case_study:")) == len(sample_case_studies())
        assert kv_store.get_by_prefix("blog_post:")


def test_seed_from_file_without_blog(tmp_path):
    path = tmp_path / "seed.json"
    path.write_text(json.dumps({"caseStudies": [{"id": "only"}], "blogPosts": [{"id": "b"}]}), encoding="utf-8")
    code, app = _run("--file", str(path), "--no-blog")
    assert code == 0
    with app.app_context():
        assert kv_store.get_by_prefix("case_study:") == [{"id": "only"}]
        assert kv_store.get_by_prefix("blog_post:") == []


def test_dry_run(capsys):
    code, app = _run("--dry-run")
    assert code == 0
    assert "[dry-run]" in capsys.readouterr().out
    with app.app_context():
        assert kv_store.get_by_prefix("case_study:") == []


def test_invalid_file_returns_error(tmp_path, capsys):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"caseStudies": "nope"}), encoding="utf-8")
    code, _ = _run("--file", str(path))
    assert code == 1
    assert "Invalid case studies data" in capsys.readouterr().err
