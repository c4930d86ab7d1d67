# routes/cases_public.py
from flask import Blueprint, request

from routes._common import err, json_endpoint, json_obj, no_cache, ok
from services import case_study_service, protection
from services.case_study_service import case_study_key

cases_public_bp = Blueprint("cases_public", __name__)


@cases_public_bp.get("/case-studies")
@json_endpoint("Failed to fetch case studies")
def list_cases_public():
    featured_only = request.args.get("featured") in ("1", "true")
    items = case_study_service.list_case_studies(featured_only=featured_only)
    resp, code = ok([protection.public_view(it, protection.CASE_STUDY) for it in items])
    return no_cache(resp), code


@cases_public_bp.get("/case-studies/<cid>")
@json_endpoint("Failed to fetch case study")
def get_case_public(cid):
    study = case_study_service.get_case_study(cid)
    unlocked = protection.token_unlocks(request.headers.get("X-Unlock-Token"), case_study_key(cid))
    return ok(protection.public_view(study, protection.CASE_STUDY, unlocked=unlocked))


@cases_public_bp.post("/case-studies/<cid>/unlock")
@json_endpoint("Failed to unlock case study")
def unlock_case(cid):
    data = json_obj()
    study = case_study_service.get_case_study(cid)
    if not protection.is_protected(study, protection.CASE_STUDY):
        return ok(protection.public_view(study, protection.CASE_STUDY), unlocked=True)
    if not protection.check_password(study, data.get("password")):
        return err("Incorrect password", status=401, unlocked=False)
    key = case_study_key(cid)
    return ok(
        protection.public_view(study, protection.CASE_STUDY, unlocked=True),
        unlocked=True,
        token=protection.issue_unlock_token(key),
    )
