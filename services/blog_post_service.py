# services/blog_post_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional
from uuid import uuid4

from services import kv_store
from services.defaults import BLOG_CATEGORIES, BLOG_POST_PREFIX, BLOG_STATUSES
from services.errors import NotFoundError, ValidationError
from services.text import now_iso, parse_iso, reading_time

logger = logging.getLogger(__name__)

SLUG_EXISTS = "A post with this slug already exists"


def blog_post_key(pid: str) -> str:
    return f"{BLOG_POST_PREFIX}{pid}"


def _all_posts() -> List[Dict[str, Any]]:
    return kv_store.get_by_prefix(BLOG_POST_PREFIX)


def _slug_taken(slug: str, own_id: str) -> bool:
    # 全量扫描查重，存储层本身不保证唯一
    return any(p.get("slug") == slug and p.get("id") != own_id for p in _all_posts())


def _check_status(status: Any):
    if status not in BLOG_STATUSES:
        raise ValidationError(f"Invalid status: {status!r}")


def _check_category(category: Any):
    if category not in BLOG_CATEGORIES:
        raise ValidationError(f"Invalid category: {category!r}")


def list_published() -> List[Dict[str, Any]]:
    posts = [p for p in _all_posts() if p.get("status") == "published"]
    posts.sort(key=lambda p: parse_iso(p.get("publishedAt")), reverse=True)
    return posts


def list_all() -> List[Dict[str, Any]]:
    posts = _all_posts()
    posts.sort(key=lambda p: parse_iso(p.get("updatedAt")), reverse=True)
    return posts


def get_published_by_slug(slug: str) -> Dict[str, Any]:
    post = next((p for p in _all_posts() if p.get("slug") == slug), None)
    if not post or post.get("status") != "published":
        raise NotFoundError("Blog post not found")
    return post


def get_post(pid: str) -> Dict[str, Any]:
    post = kv_store.get(blog_post_key(pid))
    if not post:
        raise NotFoundError("Blog post not found")
    return post


def create_post(data: Dict[str, Any], now: Optional[str] = None) -> Dict[str, Any]:
    post = dict(data)
    if not post.get("id"):
        post["id"] = str(uuid4())
    post["id"] = str(post["id"])

    slug = post.get("slug")
    if not isinstance(slug, str) or not slug.strip():
        raise ValidationError("Slug is required")
    if _slug_taken(slug, post["id"]):
        raise ValidationError(SLUG_EXISTS)

    post.setdefault("status", "draft")
    post.setdefault("category", "Other")
    _check_status(post["status"])
    _check_category(post["category"])

    now = now or now_iso()
    post["readingTime"] = reading_time(post.get("content") or "")
    post["updatedAt"] = now
    if post["status"] == "published" and not post.get("publishedAt"):
        post["publishedAt"] = now

    kv_store.set(blog_post_key(post["id"]), post)
    logger.info("blog post created: %s (%s)", post["id"], slug)
    return post


def update_post(pid: str, updates: Dict[str, Any], now: Optional[str] = None) -> Dict[str, Any]:
    existing = get_post(pid)

    new_slug = updates.get("slug")
    if "slug" in updates and (not isinstance(new_slug, str) or not new_slug.strip()):
        raise ValidationError("Slug is required")
    if new_slug and new_slug != existing.get("slug") and _slug_taken(new_slug, pid):
        raise ValidationError(SLUG_EXISTS)
    if "status" in updates:
        _check_status(updates["status"])
    if "category" in updates:
        _check_category(updates["category"])

    updated = {**existing, **updates, "id": pid}
    now = now or now_iso()
    updated["readingTime"] = reading_time(updated.get("content") or "")
    updated["updatedAt"] = now
    # draft -> published 时打上发布时间
    if existing.get("status") != "published" and updated.get("status") == "published":
        updated["publishedAt"] = updates.get("publishedAt") or now

    kv_store.set(blog_post_key(pid), updated)
    logger.info("blog post updated: %s", pid)
    return updated


def delete_post(pid: str) -> None:
    kv_store.delete(blog_post_key(pid))
    logger.info("blog post deleted: %s", pid)
