# routes/initialize.py
from flask import Blueprint, current_app

from routes._common import json_endpoint, json_obj, ok
from routes.auth import admin_required
from services import seed_service

initialize_bp = Blueprint("initialize", __name__)


@initialize_bp.post("/admin/initialize")
@admin_required
@json_endpoint("Failed to initialize data")
def initialize():
    """
    批量写入默认数据：{"caseStudies": [...], "blogPosts": [...]}
    逐条写入，失败不回滚；重复调用结果一致。
    """
    data = json_obj()
    result = seed_service.initialize(data.get("caseStudies"), data.get("blogPosts"))
    current_app.logger.info("initialize done: %s", result["message"])
    return ok(message=result["message"], summary=result)
