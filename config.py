# config.py
import os

BASE_DIR = os.path.abspath(os.path.dirname(__file__))
INSTANCE_DIR = os.path.join(BASE_DIR, "instance")
os.makedirs(INSTANCE_DIR, exist_ok=True)  # 确保目录存在

DB_PATH = os.path.join(INSTANCE_DIR, "portfolio.sqlite3")


def _bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    # 注意：绝对路径 + 3 个斜杠
    SQLALCHEMY_DATABASE_URI = os.getenv(
        "SQLALCHEMY_DATABASE_URI",
        f"sqlite:///{DB_PATH.replace(os.sep, '/')}"
    )
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-jwt")

    # 管理员口令：优先用预先算好的 hash，否则启动时对明文做 hash
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "change-me")
    ADMIN_PASSWORD_HASH = os.getenv("ADMIN_PASSWORD_HASH")
    ADMIN_TOKEN_EXPIRES_HOURS = int(os.getenv("ADMIN_TOKEN_EXPIRES_HOURS", "12"))
    # 旧前端直接把口令塞进 X-Admin-Password，关掉后只认 JWT
    ADMIN_ACCEPT_PASSWORD_HEADER = _bool("ADMIN_ACCEPT_PASSWORD_HEADER", True)

    UNLOCK_TOKEN_EXPIRES_MINUTES = int(os.getenv("UNLOCK_TOKEN_EXPIRES_MINUTES", "60"))

    API_PREFIX = os.getenv("API_PREFIX", "/api")
    CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    EXPOSE_ERROR_STACK = _bool("EXPOSE_ERROR_STACK", False)


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    JWT_SECRET_KEY = "test-jwt-secret-key-with-enough-length"
    ADMIN_PASSWORD = "test-admin-pass"
    ADMIN_PASSWORD_HASH = None
    ADMIN_ACCEPT_PASSWORD_HEADER = True
    LOG_LEVEL = "WARNING"
