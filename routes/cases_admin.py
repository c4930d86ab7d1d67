# routes/cases_admin.py
from flask import Blueprint

from routes._common import json_endpoint, json_obj, ok
from routes.auth import admin_required
from services import case_study_service

cases_admin_bp = Blueprint("cases_admin", __name__)


@cases_admin_bp.get("/admin/case-studies")
@admin_required
@json_endpoint("Failed to fetch case studies")
def admin_list_cases():
    return ok(case_study_service.list_case_studies())


@cases_admin_bp.get("/admin/case-studies/<cid>")
@admin_required
@json_endpoint("Failed to fetch case study")
def admin_get_case(cid):
    return ok(case_study_service.get_case_study(cid))


@cases_admin_bp.post("/admin/case-studies")
@admin_required
@json_endpoint("Failed to save case study")
def admin_save_case():
    return ok(case_study_service.save_case_study(json_obj()))


@cases_admin_bp.put("/admin/case-studies/<cid>")
@admin_required
@json_endpoint("Failed to update case study")
def admin_update_case(cid):
    return ok(case_study_service.update_case_study(cid, json_obj()))


@cases_admin_bp.delete("/admin/case-studies/<cid>")
@admin_required
@json_endpoint("Failed to delete case study")
def admin_delete_case(cid):
    case_study_service.delete_case_study(cid)
    return ok(message="Case study deleted")
