# services/case_study_service.py
from __future__ import annotations

import logging
from typing import Any, Dict, List

from services import kv_store
from services.defaults import CASE_STUDY_PREFIX
from services.errors import NotFoundError, ValidationError

logger = logging.getLogger(__name__)


def case_study_key(cid: str) -> str:
    return f"{CASE_STUDY_PREFIX}{cid}"


def _require_id(data: Dict[str, Any]) -> str:
    cid = data.get("id")
    if not isinstance(cid, str) or not cid.strip():
        raise ValidationError("Case study ID is required")
    return cid


def list_case_studies(featured_only: bool = False) -> List[Dict[str, Any]]:
    items = kv_store.get_by_prefix(CASE_STUDY_PREFIX)
    if featured_only:
        items = [it for it in items if it.get("featured")]
    return items


def get_case_study(cid: str) -> Dict[str, Any]:
    study = kv_store.get(case_study_key(cid))
    if not study:
        raise NotFoundError("Case study not found")
    return study


def save_case_study(data: Dict[str, Any]) -> Dict[str, Any]:
    """整条写入（按 id upsert）。"""
    cid = _require_id(data)
    kv_store.set(case_study_key(cid), data)
    logger.info("case study saved: %s", cid)
    return data


def update_case_study(cid: str, updates: Dict[str, Any]) -> Dict[str, Any]:
    existing = get_case_study(cid)
    # 浅合并，id 以路径为准
    updated = {**existing, **updates, "id": cid}
    kv_store.set(case_study_key(cid), updated)
    logger.info("case study updated: %s", cid)
    return updated


def delete_case_study(cid: str) -> None:
    kv_store.delete(case_study_key(cid))
    logger.info("case study deleted: %s", cid)
