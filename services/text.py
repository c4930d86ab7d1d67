# services/text.py
import math
import re
from datetime import datetime, timezone

WORDS_PER_MINUTE = 200


def slugify(text: str) -> str:
    text = (text or "").strip().lower()
    text = re.sub(r"[^a-z0-9]+", "-", text)
    return text.strip("-")


def reading_time(content: str) -> int:
    """Minutes to read ``content`` at 200 words per minute, rounded up."""
    words = len((content or "").split())
    return math.ceil(words / WORDS_PER_MINUTE)


def now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def parse_iso(value) -> datetime:
    # 排序用：解析不了的一律排最后
    if not isinstance(value, str) or not value:
        return datetime.min.replace(tzinfo=timezone.utc)
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return datetime.min.replace(tzinfo=timezone.utc)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt
