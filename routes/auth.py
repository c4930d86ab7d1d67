# routes/auth.py
from __future__ import annotations

from datetime import datetime, timedelta, timezone
from functools import wraps

from flask import Blueprint, current_app, jsonify, request
from flask_jwt_extended import create_access_token, decode_token, get_jwt, verify_jwt_in_request
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from werkzeug.security import check_password_hash

auth_bp = Blueprint("auth", __name__)

ADMIN_ROLE = "admin"


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def _fmt_expires(dt: datetime) -> str:
    return dt.strftime("%Y/%m/%d %H:%M:%S")


def _password_ok(raw) -> bool:
    if not isinstance(raw, str) or not raw:
        return False
    pwd_hash = current_app.config.get("ADMIN_PASSWORD_HASH")
    if not pwd_hash:
        return False
    return check_password_hash(pwd_hash, raw)


def _has_admin_role(claims) -> bool:
    roles = (claims or {}).get("roles") or []
    if isinstance(roles, str):
        roles = [roles]
    return ADMIN_ROLE in roles


def _bearer_is_admin() -> bool:
    # 公共 anon key 也会走 Authorization 头，解不开就当没带
    if not request.headers.get("Authorization"):
        return False
    try:
        verify_jwt_in_request()
    except (JWTExtendedException, PyJWTError):
        return False
    return _has_admin_role(get_jwt())


def _header_is_admin(value) -> bool:
    if not value:
        return False
    # X-Admin-Password 里放的可能是登录拿到的 JWT，也可能是旧前端的明文口令
    try:
        if _has_admin_role(decode_token(value)):
            return True
    except (JWTExtendedException, PyJWTError):
        pass
    if current_app.config.get("ADMIN_ACCEPT_PASSWORD_HEADER"):
        return _password_ok(value)
    return False


def is_admin_request() -> bool:
    return _bearer_is_admin() or _header_is_admin(request.headers.get("X-Admin-Password"))


def admin_required(fn):
    """
    装饰器：管理员接口统一鉴权，失败直接 401，不进入业务函数。
    """
    @wraps(fn)
    def decorated_view(*args, **kwargs):
        if not is_admin_request():
            current_app.logger.warning("admin auth failed: %s %s", request.method, request.path)
            return jsonify({"error": "Unauthorized"}), 401
        return fn(*args, **kwargs)
    return decorated_view


@auth_bp.post("/admin/login")
def login():
    """
    口令登录：
      入参：{"password": "..."}
      返回：{"success": true, "token": <JWT>, "expires": "..."}
    token 是服务端签发、会过期的 JWT，不是口令本身。
    """
    data = request.get_json(silent=True) or {}
    password = data.get("password")

    if not _password_ok(password):
        current_app.logger.info("admin login rejected")
        return jsonify({"success": False, "message": "Invalid password"}), 401

    hours = int(current_app.config.get("ADMIN_TOKEN_EXPIRES_HOURS", 12))
    expires_delta = timedelta(hours=hours)
    token = create_access_token(
        identity=ADMIN_ROLE,
        additional_claims={"roles": [ADMIN_ROLE]},
        expires_delta=expires_delta,
    )
    current_app.logger.info("admin login ok")
    return jsonify({
        "success": True,
        "token": token,
        "expires": _fmt_expires(_now_utc() + expires_delta),
        "message": "Login successful",
    }), 200


@auth_bp.get("/admin/test")
@admin_required
def admin_test():
    return jsonify({"status": "authenticated", "message": "Admin authentication works!"})
