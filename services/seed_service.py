# services/seed_service.py
"""
首次初始化：把一批默认记录逐条写进 KV。

- 逐条 set，不批量、不事务；中途失败直接抛出，已写入的保留
- 写入都是按 key 覆盖，重复执行结果一致
- 站点设置只在不存在时写默认值
"""
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional

from services import kv_store
from services.blog_post_service import blog_post_key
from services.case_study_service import case_study_key
from services.defaults import DEFAULT_SITE_SETTINGS, SETTINGS_KEY
from services.errors import ValidationError
from services.text import reading_time

logger = logging.getLogger(__name__)


def _has_id(item: Any) -> bool:
    return isinstance(item, dict) and item.get("id") not in (None, "")


def _validate(case_studies: Any, blog_posts: Any):
    if not isinstance(case_studies, list):
        raise ValidationError("Invalid case studies data")
    if not all(_has_id(s) for s in case_studies):
        raise ValidationError("Every case study needs an id")
    if blog_posts is not None:
        if not isinstance(blog_posts, list):
            raise ValidationError("Invalid blog posts data")
        if not all(_has_id(p) for p in blog_posts):
            raise ValidationError("Every blog post needs an id")


def initialize(case_studies: Any, blog_posts: Optional[List[Dict[str, Any]]] = None,
               dry_run: bool = False) -> Dict[str, Any]:
    _validate(case_studies, blog_posts)

    total = len(case_studies)
    for i, study in enumerate(case_studies, start=1):
        logger.info("[%d/%d] case study %s", i, total, study["id"])
        if not dry_run:
            kv_store.set(case_study_key(str(study["id"])), study)

    posts = blog_posts or []
    for i, post in enumerate(posts, start=1):
        post = dict(post)
        # readingTime 缺失时补上（由 content 推导，结果稳定）
        if "readingTime" not in post:
            post["readingTime"] = reading_time(post.get("content") or "")
        logger.info("[%d/%d] blog post %s", i, len(posts), post["id"])
        if not dry_run:
            kv_store.set(blog_post_key(str(post["id"])), post)

    settings_initialized = False
    if kv_store.get(SETTINGS_KEY) is None:
        settings_initialized = True
        if not dry_run:
            kv_store.set(SETTINGS_KEY, copy.deepcopy(DEFAULT_SITE_SETTINGS))
        logger.info("default site settings initialized")
    else:
        logger.info("site settings already exist, skipping")

    if posts:
        message = f"Initialized {total} case studies, {len(posts)} blog posts, and site settings"
    else:
        message = f"Initialized {total} case studies and site settings"

    return {
        "message": message,
        "caseStudies": total,
        "blogPosts": len(posts),
        "settingsInitialized": settings_initialized,
    }
