# routes/site.py
# 站点设置 + 首页模块配置
from flask import Blueprint, request

from routes._common import json_endpoint, json_obj, ok
from routes.auth import admin_required
from services import site_service
from services.errors import ValidationError

site_bp = Blueprint("site", __name__)


@site_bp.get("/settings")
@json_endpoint("Failed to fetch settings")
def get_settings():
    return ok(site_service.get_settings())


@site_bp.put("/admin/settings")
@admin_required
@json_endpoint("Failed to update settings")
def update_settings():
    return ok(site_service.save_settings(json_obj()))


@site_bp.get("/homepage-sections")
@json_endpoint("Failed to fetch homepage sections")
def get_homepage_sections():
    return ok(site_service.get_homepage_sections())


@site_bp.post("/homepage-sections")
@admin_required
@json_endpoint("Failed to update homepage sections")
def update_homepage_sections():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Invalid sections data")
    return ok(site_service.save_homepage_sections(data.get("sections")))
