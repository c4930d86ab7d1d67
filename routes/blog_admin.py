# routes/blog_admin.py
from flask import Blueprint

from routes._common import json_endpoint, json_obj, ok
from routes.auth import admin_required
from services import blog_post_service

blog_admin_bp = Blueprint("blog_admin", __name__)


@blog_admin_bp.get("/admin/blog-posts")
@admin_required
@json_endpoint("Failed to fetch blog posts")
def admin_list_posts():
    # 含草稿，按更新时间倒序
    return ok(blog_post_service.list_all())


@blog_admin_bp.get("/admin/blog-posts/<pid>")
@admin_required
@json_endpoint("Failed to fetch blog post")
def admin_get_post(pid):
    return ok(blog_post_service.get_post(pid))


@blog_admin_bp.post("/admin/blog-posts")
@admin_required
@json_endpoint("Failed to create blog post")
def admin_create_post():
    return ok(blog_post_service.create_post(json_obj()))


@blog_admin_bp.put("/admin/blog-posts/<pid>")
@admin_required
@json_endpoint("Failed to update blog post")
def admin_update_post(pid):
    return ok(blog_post_service.update_post(pid, json_obj()))


@blog_admin_bp.delete("/admin/blog-posts/<pid>")
@admin_required
@json_endpoint("Failed to delete blog post")
def admin_delete_post(pid):
    blog_post_service.delete_post(pid)
    return ok(message="Blog post deleted")
