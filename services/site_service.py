# services/site_service.py
# 站点设置 & 首页模块配置：各自一个固定 key，整体覆盖写
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List

from services import kv_store
from services.defaults import (
    DEFAULT_HOMEPAGE_SECTIONS,
    DEFAULT_SITE_SETTINGS,
    HOMEPAGE_SECTIONS_KEY,
    SETTINGS_KEY,
)
from services.errors import ValidationError

logger = logging.getLogger(__name__)


def get_settings() -> Dict[str, Any]:
    stored = kv_store.get(SETTINGS_KEY)
    # 存过空对象也算存过，不回落到默认值
    return stored if stored is not None else copy.deepcopy(DEFAULT_SITE_SETTINGS)


def save_settings(settings: Any) -> Dict[str, Any]:
    if not isinstance(settings, dict):
        raise ValidationError("Invalid settings data")
    kv_store.set(SETTINGS_KEY, settings)
    logger.info("site settings saved (%d fields)", len(settings))
    return settings


def _order(section: Dict[str, Any]):
    order = section.get("order")
    return order if isinstance(order, (int, float)) else float("inf")


def get_homepage_sections() -> List[Dict[str, Any]]:
    sections = kv_store.get(HOMEPAGE_SECTIONS_KEY)
    if sections is None:
        sections = copy.deepcopy(DEFAULT_HOMEPAGE_SECTIONS)
    return sorted(sections, key=_order)


def save_homepage_sections(sections: Any) -> List[Dict[str, Any]]:
    if not isinstance(sections, list):
        raise ValidationError("Invalid sections data")
    for s in sections:
        if not isinstance(s, dict) or not isinstance(s.get("id"), str) or not s["id"]:
            raise ValidationError("Invalid sections data")
    kv_store.set(HOMEPAGE_SECTIONS_KEY, sections)
    logger.info("homepage sections saved (%d)", len(sections))
    return sections
