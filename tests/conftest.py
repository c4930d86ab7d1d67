# tests/conftest.py
import copy

import pytest

from app import create_app
from config import TestingConfig
from extensions import db

ADMIN_PASSWORD = TestingConfig.ADMIN_PASSWORD

SAMPLE_STUDY = {
    "id": "test-study",
    "title": "Test Study",
    "subtitle": "A study used in tests",
    "category": "Product Design",
    "year": "2025",
    "heroImage": "https://example.com/hero.jpg",
    "overview": {
        "role": "Designer",
        "duration": "2 months",
        "tools": ["Figma"],
        "description": "Overview text",
    },
    "problem": "Problem text",
    "solution": "Solution text",
    "process": [{"title": "Research", "description": "Talked to users"}],
    "images": ["https://example.com/1.jpg"],
    "results": [{"metric": "Conversion", "value": "+10%"}],
    "featured": True,
}


@pytest.fixture
def app():
    app = create_app(TestingConfig)
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def api():
    return TestingConfig.API_PREFIX


@pytest.fixture
def admin_headers():
    return {"X-Admin-Password": ADMIN_PASSWORD}


@pytest.fixture
def jwt_headers(client, api):
    resp = client.post(f"{api}/admin/login", json={"password": ADMIN_PASSWORD})
    token = resp.get_json()["token"]
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def study():
    return copy.deepcopy(SAMPLE_STUDY)


def make_post(**overrides):
    post = {
        "id": "p1",
        "slug": "first-post",
        "title": "First Post",
        "description": "desc",
        "content": "hello world",
        "thumbnail": "",
        "category": "Technology",
        "tags": ["python"],
        "status": "published",
        "featured": False,
        "passwordProtected": False,
    }
    post.update(overrides)
    return post
