# models/kv_entry.py
from datetime import datetime, timezone
from extensions import db


def _utcnow():
    return datetime.now(timezone.utc).replace(tzinfo=None)


class KvEntry(db.Model):
    """
    扁平的 key-value 表：所有内容（案例/博客/站点设置/首页模块）都存成 JSON。
    key 带前缀做命名空间，如 case_study:<id>、blog_post:<id>、site_settings。
    """
    __tablename__ = "kv_store"

    key = db.Column(db.String(255), primary_key=True)
    value = db.Column(db.JSON, nullable=True)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)
