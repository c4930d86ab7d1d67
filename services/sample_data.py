# services/sample_data.py
# 打包自带的示例数据：首次初始化 & 客户端离线兜底共用
import json
from pathlib import Path

SEED_DIR = Path(__file__).resolve().parent / "seed_data"


def _load(name: str) -> list:
    path = SEED_DIR / name
    return json.loads(path.read_text(encoding="utf-8") or "[]")


def sample_case_studies() -> list[dict]:
    return _load("case_studies.json")


def sample_blog_posts() -> list[dict]:
    return _load("blog_posts.json")
