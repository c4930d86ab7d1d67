# portfolio_client/payloads.py
# 后台编辑器提交前的数据整理（与前端编辑页保持一致）
from __future__ import annotations

from typing import Any, Dict, Optional

from services.text import now_iso, reading_time, slugify


def new_blog_post(title: str = "") -> Dict[str, Any]:
    return {
        "title": title,
        "slug": slugify(title),
        "description": "",
        "content": "",
        "thumbnail": "",
        "category": "Design & UX",
        "tags": [],
        "status": "draft",
        "featured": False,
        "passwordProtected": False,
        "password": "",
    }


def add_tag(post: Dict[str, Any], tag: str) -> Dict[str, Any]:
    tag = (tag or "").strip()
    tags = list(post.get("tags") or [])
    if tag and tag not in tags:
        tags.append(tag)
    return {**post, "tags": tags}


def remove_tag(post: Dict[str, Any], tag: str) -> Dict[str, Any]:
    return {**post, "tags": [t for t in (post.get("tags") or []) if t != tag]}


def blog_post_payload(post: Dict[str, Any], status: Optional[str] = None,
                      now: Optional[str] = None) -> Dict[str, Any]:
    """
    保存前补齐 readingTime / updatedAt；
    草稿第一次发布时写 publishedAt，其余情况沿用原值。
    """
    now = now or now_iso()
    payload = dict(post)
    payload["status"] = status or post.get("status") or "draft"
    payload["readingTime"] = reading_time(post.get("content") or "")
    payload["updatedAt"] = now
    if status == "published" and post.get("status", "draft") == "draft":
        payload["publishedAt"] = now
    return payload
