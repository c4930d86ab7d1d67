# services/protection.py
"""
Password-protected content.

Protection passwords stay on the server: public views drop ``password`` and,
for protected records, the gated body fields. A correct password buys a
short-lived unlock token scoped to one store key.
"""
from __future__ import annotations

import hmac
from datetime import timedelta
from typing import Any, Dict, Optional

from flask import current_app
from flask_jwt_extended import create_access_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError

CASE_STUDY = "case_study"
BLOG_POST = "blog_post"

# 记录里标记“受保护”的字段名两种资源不一样
PROTECTED_FLAG = {
    CASE_STUDY: "isPasswordProtected",
    BLOG_POST: "passwordProtected",
}

GATED_FIELDS = {
    CASE_STUDY: ("overview", "problem", "solution", "process", "images", "results", "testimonial"),
    BLOG_POST: ("content",),
}


def is_protected(record: Dict[str, Any], kind: str) -> bool:
    return bool(record.get(PROTECTED_FLAG[kind]))


def public_view(record: Dict[str, Any], kind: str, unlocked: bool = False) -> Dict[str, Any]:
    out = {k: v for k, v in record.items() if k != "password"}
    if is_protected(record, kind) and not unlocked:
        for f in GATED_FIELDS[kind]:
            out.pop(f, None)
        out["locked"] = True
    return out


def check_password(record: Dict[str, Any], submitted: Optional[str]) -> bool:
    expected = record.get("password")
    if not expected or not isinstance(submitted, str):
        return False
    return hmac.compare_digest(str(expected).encode("utf-8"), submitted.encode("utf-8"))


def issue_unlock_token(key: str) -> str:
    minutes = int(current_app.config.get("UNLOCK_TOKEN_EXPIRES_MINUTES", 60))
    return create_access_token(
        identity=f"unlock:{key}",
        additional_claims={"unlock": key},
        expires_delta=timedelta(minutes=minutes),
    )


def token_unlocks(token: Optional[str], key: str) -> bool:
    if not token:
        return False
    try:
        decoded = decode_token(token)
    except (JWTExtendedException, PyJWTError):
        return False
    return decoded.get("unlock") == key
