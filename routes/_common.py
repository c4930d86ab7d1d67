# routes/_common.py
from __future__ import annotations

import traceback
from functools import wraps
from typing import Any, Dict

from flask import current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from services.errors import ContentError


def json_obj() -> Dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None or not isinstance(data, dict):
        raise BadRequest("Invalid or missing JSON body.")
    return data


def ok(data: Any = None, status: int = 200, **extra):
    body = {"success": True}
    if data is not None:
        body["data"] = data
    body.update(extra)
    return jsonify(body), status


def err(message: str, status: int = 400, **extra):
    body = {"success": False, "error": message}
    body.update(extra)
    return jsonify(body), status


def no_cache(resp):
    resp.headers["Cache-Control"] = "no-store, no-cache, must-revalidate, proxy-revalidate"
    resp.headers["Pragma"] = "no-cache"
    resp.headers["Expires"] = "0"
    return resp


def json_endpoint(failure: str):
    """
    统一错误出口：
      ContentError -> 400/404，BadRequest -> 400，其余 -> 500 + 日志
    ``failure`` 是 500 时返回给前端的概要信息。
    """
    def deco(fn):
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return fn(*args, **kwargs)
            except ContentError as e:
                return err(e.message, status=e.status_code)
            except BadRequest as e:
                return err(e.description or "Bad request", status=400)
            except Exception as e:
                current_app.logger.exception("%s failed", fn.__name__)
                extra = {"details": str(e) or e.__class__.__name__}
                if current_app.config.get("EXPOSE_ERROR_STACK"):
                    extra["stack"] = traceback.format_exc()
                return err(failure, status=500, **extra)
        return wrapper
    return deco
