# routes/blog_public.py
from flask import Blueprint, request

from routes._common import err, json_endpoint, json_obj, no_cache, ok
from services import blog_post_service, protection
from services.blog_post_service import blog_post_key

blog_public_bp = Blueprint("blog_public", __name__)


@blog_public_bp.get("/blog-posts")
@json_endpoint("Failed to fetch blog posts")
def list_posts_public():
    """只返回已发布的文章，按发布时间倒序。"""
    posts = blog_post_service.list_published()
    resp, code = ok([protection.public_view(p, protection.BLOG_POST) for p in posts])
    return no_cache(resp), code


@blog_public_bp.get("/blog-posts/<slug>")
@json_endpoint("Failed to fetch blog post")
def get_post_public(slug):
    post = blog_post_service.get_published_by_slug(slug)
    unlocked = protection.token_unlocks(request.headers.get("X-Unlock-Token"), blog_post_key(post["id"]))
    return ok(protection.public_view(post, protection.BLOG_POST, unlocked=unlocked))


@blog_public_bp.post("/blog-posts/<slug>/unlock")
@json_endpoint("Failed to unlock blog post")
def unlock_post(slug):
    data = json_obj()
    post = blog_post_service.get_published_by_slug(slug)
    if not protection.is_protected(post, protection.BLOG_POST):
        return ok(protection.public_view(post, protection.BLOG_POST), unlocked=True)
    if not protection.check_password(post, data.get("password")):
        return err("Incorrect password. Please try again.", status=401, unlocked=False)
    return ok(
        protection.public_view(post, protection.BLOG_POST, unlocked=True),
        unlocked=True,
        token=protection.issue_unlock_token(blog_post_key(post["id"])),
    )
