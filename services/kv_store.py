# services/kv_store.py
"""
Key-value adapter over the ``kv_store`` table.

Four operations, no transactions across calls: every ``set``/``delete`` commits
on its own, concurrent writers to one key race and the last write wins.
"""
from __future__ import annotations

import copy
import logging
from typing import Any, List, Optional

from sqlalchemy.exc import SQLAlchemyError

from extensions import db
from models.kv_entry import KvEntry

logger = logging.getLogger(__name__)


class KvStoreError(RuntimeError):
    """Raised when the underlying database rejects a read or write."""


def get(key: str) -> Optional[Any]:
    try:
        entry = db.session.get(KvEntry, key)
    except SQLAlchemyError as e:
        db.session.rollback()
        raise KvStoreError(f"get {key!r} failed: {e}") from e
    if entry is None:
        return None
    # 返回副本，调用方改了也不会污染 session 里的对象
    return copy.deepcopy(entry.value)


def set(key: str, value: Any) -> None:  # noqa: A001
    try:
        entry = db.session.get(KvEntry, key)
        if entry is None:
            db.session.add(KvEntry(key=key, value=copy.deepcopy(value)))
        else:
            entry.value = copy.deepcopy(value)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise KvStoreError(f"set {key!r} failed: {e}") from e
    logger.debug("kv set %s", key)


def delete(key: str) -> None:
    """Remove ``key``; a missing key is not an error."""
    try:
        KvEntry.query.filter_by(key=key).delete()
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        raise KvStoreError(f"delete {key!r} failed: {e}") from e
    logger.debug("kv delete %s", key)


def get_by_prefix(prefix: str) -> List[Any]:
    """All values whose key starts with ``prefix``, ordered by key."""
    try:
        rows = (
            KvEntry.query
            .filter(KvEntry.key.startswith(prefix, autoescape=True))
            .order_by(KvEntry.key.asc())
            .all()
        )
    except SQLAlchemyError as e:
        db.session.rollback()
        raise KvStoreError(f"get_by_prefix {prefix!r} failed: {e}") from e
    return [copy.deepcopy(r.value) for r in rows if r.value is not None]
