# app.py
import logging

from flask import Flask, jsonify, request
from dotenv import load_dotenv
from werkzeug.security import generate_password_hash

from config import Config
from extensions import db, jwt, migrate, cors

# ---- 导入各个蓝图 ----
from routes.auth import auth_bp
from routes.cases_public import cases_public_bp
from routes.cases_admin import cases_admin_bp
from routes.blog_public import blog_public_bp
from routes.blog_admin import blog_admin_bp
from routes.site import site_bp
from routes.initialize import initialize_bp

load_dotenv()

BLUEPRINTS = (
    auth_bp,
    cases_public_bp,
    cases_admin_bp,
    blog_public_bp,
    blog_admin_bp,
    site_bp,
    initialize_bp,
)


def _setup_logging(app: Flask):
    level = getattr(logging, str(app.config.get("LOG_LEVEL", "INFO")).upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    app.logger.setLevel(level)


def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.json.ensure_ascii = False

    _setup_logging(app)

    # 只保存 hash，明文口令不留在 config 里
    if not app.config.get("ADMIN_PASSWORD_HASH"):
        app.config["ADMIN_PASSWORD_HASH"] = generate_password_hash(app.config["ADMIN_PASSWORD"])
    app.config.pop("ADMIN_PASSWORD", None)

    # ---- 初始化扩展 ----
    db.init_app(app)
    from models.kv_entry import KvEntry  # noqa: F401

    jwt.init_app(app)
    migrate.init_app(app, db)

    prefix = app.config.get("API_PREFIX", "").rstrip("/")

    # ---- CORS ----
    cors.init_app(
        app,
        resources={
            rf"{prefix}/*": {
                "origins": app.config.get("CORS_ORIGINS") or "*",
                "allow_headers": ["Content-Type", "Authorization", "X-Admin-Password", "X-Unlock-Token"],
                "methods": ["GET", "POST", "PUT", "DELETE", "OPTIONS"],
                "expose_headers": ["Content-Length"],
                "max_age": 600,
            }
        },
    )

    # ---- 注册蓝图 ----
    for bp in BLUEPRINTS:
        app.register_blueprint(bp, url_prefix=prefix or None)

    # ---- 健康检查 ----
    @app.get(f"{prefix}/health")
    def health():
        return jsonify({"status": "ok"})

    @app.after_request
    def log_request(response):
        app.logger.info("%s %s -> %s", request.method, request.path, response.status_code)
        return response

    return app
