# portfolio_client/api.py
"""
Python client for the portfolio API.

Read helpers behave like the site's data hooks: they never raise, they return a
``FetchResult`` and fall back to the bundled defaults when the backend is down
or answers ``success: false``. Admin writes raise ``ApiError`` instead.
"""
from __future__ import annotations

import copy
import logging
import os
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests

from services.defaults import DEFAULT_HOMEPAGE_SECTIONS, DEFAULT_SITE_SETTINGS
from services.sample_data import sample_blog_posts, sample_case_studies

logger = logging.getLogger(__name__)

DEFAULT_BASE = os.getenv("PORTFOLIO_API_BASE", "http://127.0.0.1:5000/api")
DEFAULT_TIMEOUT = 10


class ApiError(Exception):
    def __init__(self, message: str, status: Optional[int] = None, body: Any = None):
        super().__init__(message)
        self.message = message
        self.status = status
        self.body = body


@dataclass
class FetchResult:
    data: Any
    error: Optional[str] = None
    fallback: bool = False


class PortfolioClient:
    def __init__(self, base_url: str = DEFAULT_BASE, token: Optional[str] = None,
                 public_key: Optional[str] = None, session=None, timeout: float = DEFAULT_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.token = token
        self.public_key = public_key or os.getenv("PORTFOLIO_PUBLIC_KEY")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ---------- low level ----------
    def _headers(self, admin: bool = False, extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.public_key:
            headers["Authorization"] = f"Bearer {self.public_key}"
        if admin and self.token:
            headers["X-Admin-Password"] = self.token
        if extra:
            headers.update(extra)
        return headers

    def _request(self, method: str, path: str, admin: bool = False, json: Any = None,
                 params: Optional[Dict[str, Any]] = None, headers: Optional[Dict[str, str]] = None):
        resp = self.session.request(
            method,
            f"{self.base_url}{path}",
            headers=self._headers(admin=admin, extra=headers),
            json=json,
            params=params,
            timeout=self.timeout,
        )
        try:
            body = resp.json()
        except ValueError:
            raise ApiError("Invalid response format", status=resp.status_code)
        if not isinstance(body, dict):
            raise ApiError("Invalid response format", status=resp.status_code)
        return resp.status_code, body

    def _admin_call(self, method: str, path: str, json: Any = None) -> Dict[str, Any]:
        try:
            status, body = self._request(method, path, admin=True, json=json)
        except requests.RequestException as e:
            raise ApiError(f"{method} {path} failed: {e}") from e
        if status >= 400 or not body.get("success", status < 400):
            message = body.get("error") or body.get("message") or f"HTTP {status}"
            raise ApiError(message, status=status, body=body)
        return body

    def _read(self, path: str, fallback: Any, params: Optional[Dict[str, Any]] = None,
              headers: Optional[Dict[str, str]] = None) -> FetchResult:
        try:
            status, body = self._request("GET", path, params=params, headers=headers)
        except (requests.RequestException, ApiError) as e:
            logger.warning("GET %s failed, using fallback: %s", path, e)
            return FetchResult(data=fallback, error=f"Failed to load {path}", fallback=True)
        if body.get("success"):
            return FetchResult(data=body.get("data"))
        error = body.get("error") or f"HTTP {status}"
        logger.warning("GET %s returned success=false: %s", path, error)
        return FetchResult(data=fallback, error=error, fallback=fallback is not None)

    # ---------- public reads ----------
    def health(self) -> bool:
        try:
            _, body = self._request("GET", "/health")
        except (requests.RequestException, ApiError):
            return False
        return body.get("status") == "ok"

    def get_case_studies(self, featured_only: bool = False) -> FetchResult:
        params = {"featured": "1"} if featured_only else None
        return self._read("/case-studies", sample_case_studies(), params=params)

    def get_case_study(self, cid: str, unlock_token: Optional[str] = None) -> FetchResult:
        headers = {"X-Unlock-Token": unlock_token} if unlock_token else None
        fallback = next((s for s in sample_case_studies() if s.get("id") == cid), None)
        result = self._read(f"/case-studies/{cid}", None, headers=headers)
        if result.error and fallback is not None:
            return FetchResult(data=fallback, error=result.error, fallback=True)
        return result

    def get_settings(self) -> FetchResult:
        return self._read("/settings", copy.deepcopy(DEFAULT_SITE_SETTINGS))

    def get_homepage_sections(self) -> FetchResult:
        return self._read("/homepage-sections", copy.deepcopy(DEFAULT_HOMEPAGE_SECTIONS))

    def is_section_visible(self, section_id: str) -> bool:
        sections = self.get_homepage_sections().data or []
        section = next((s for s in sections if s.get("id") == section_id), None)
        return True if section is None else bool(section.get("isVisible", True))

    def get_blog_posts(self) -> FetchResult:
        return self._read("/blog-posts", [])

    def get_blog_post(self, slug: str, unlock_token: Optional[str] = None) -> FetchResult:
        headers = {"X-Unlock-Token": unlock_token} if unlock_token else None
        return self._read(f"/blog-posts/{slug}", None, headers=headers)

    def unlock_case_study(self, cid: str, password: str) -> Optional[str]:
        return self._unlock(f"/case-studies/{cid}/unlock", password)

    def unlock_blog_post(self, slug: str, password: str) -> Optional[str]:
        return self._unlock(f"/blog-posts/{slug}/unlock", password)

    def _unlock(self, path: str, password: str) -> Optional[str]:
        try:
            status, body = self._request("POST", path, json={"password": password})
        except (requests.RequestException, ApiError) as e:
            logger.warning("unlock %s failed: %s", path, e)
            return None
        if status == 200 and body.get("unlocked"):
            return body.get("token") or ""
        return None

    # ---------- admin ----------
    def login(self, password: str) -> str:
        try:
            status, body = self._request("POST", "/admin/login", json={"password": password})
        except requests.RequestException as e:
            raise ApiError(f"login failed: {e}") from e
        if status != 200 or not body.get("success"):
            raise ApiError(body.get("message") or "Invalid password", status=status, body=body)
        self.token = body["token"]
        return self.token

    def logout(self):
        self.token = None

    def check_admin(self) -> bool:
        if not self.token:
            return False
        try:
            status, _ = self._request("GET", "/admin/test", admin=True)
        except (requests.RequestException, ApiError):
            return False
        return status == 200

    def list_case_studies_admin(self) -> List[Dict[str, Any]]:
        return self._admin_call("GET", "/admin/case-studies")["data"]

    def save_case_study(self, study: Dict[str, Any]) -> Dict[str, Any]:
        return self._admin_call("POST", "/admin/case-studies", json=study)["data"]

    def update_case_study(self, cid: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        return self._admin_call("PUT", f"/admin/case-studies/{cid}", json=updates)["data"]

    def delete_case_study(self, cid: str) -> None:
        self._admin_call("DELETE", f"/admin/case-studies/{cid}")

    def list_blog_posts_admin(self) -> List[Dict[str, Any]]:
        return self._admin_call("GET", "/admin/blog-posts")["data"]

    def get_blog_post_admin(self, pid: str) -> Dict[str, Any]:
        return self._admin_call("GET", f"/admin/blog-posts/{pid}")["data"]

    def save_blog_post(self, post: Dict[str, Any]) -> Dict[str, Any]:
        """新文章（无 id）走 POST，已有文章走 PUT。"""
        if post.get("id"):
            return self._admin_call("PUT", f"/admin/blog-posts/{post['id']}", json=post)["data"]
        return self._admin_call("POST", "/admin/blog-posts", json=post)["data"]

    def delete_blog_post(self, pid: str) -> None:
        self._admin_call("DELETE", f"/admin/blog-posts/{pid}")

    def update_settings(self, settings: Dict[str, Any]) -> Dict[str, Any]:
        return self._admin_call("PUT", "/admin/settings", json=settings)["data"]

    def save_homepage_sections(self, sections: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
        return self._admin_call("POST", "/homepage-sections", json={"sections": sections})["data"]

    def initialize(self, case_studies: List[Dict[str, Any]],
                   blog_posts: Optional[List[Dict[str, Any]]] = None) -> str:
        payload: Dict[str, Any] = {"caseStudies": case_studies}
        if blog_posts is not None:
            payload["blogPosts"] = blog_posts
        return self._admin_call("POST", "/admin/initialize", json=payload)["message"]

    def ensure_initialized(self, with_blog_posts: bool = True) -> Optional[str]:
        """
        库里一条案例都没有、且手上有管理员 token 时，写入自带的示例数据。
        返回初始化消息；无需初始化时返回 None。失败抛 ApiError，再调一次即可重试。
        """
        if not self.token:
            logger.info("no admin token, skipping initialization")
            return None
        result = self.get_case_studies()
        if result.fallback or result.data:
            return None
        logger.info("no case studies found, initializing sample data")
        blog_posts = sample_blog_posts() if with_blog_posts else None
        return self.initialize(sample_case_studies(), blog_posts)
