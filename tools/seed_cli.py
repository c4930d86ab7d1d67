# tools/seed_cli.py
# -*- coding: utf-8 -*-
"""
往 KV 里写入初始数据（与 POST /admin/initialize 同一套逻辑）。
- 默认使用自带示例数据；也可以 --file 指定 JSON：{"caseStudies": [...], "blogPosts": [...]}
- 逐条写入，可重复执行
用法：
  python tools/seed_cli.py
  python tools/seed_cli.py --file ./seed.json --no-blog
  python tools/seed_cli.py --dry-run
"""
import argparse
import json
import sys


def load_bundle(path):
    from services.sample_data import sample_blog_posts, sample_case_studies
    if not path:
        return sample_case_studies(), sample_blog_posts()
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if isinstance(data, list):
        # 只给了数组：当作案例列表
        return data, None
    return data.get("caseStudies"), data.get("blogPosts")


def main(argv=None):
    ap = argparse.ArgumentParser(description="Seed case studies / blog posts / default settings")
    ap.add_argument("--file", default=None, help="JSON 路径（不填用自带示例数据）")
    ap.add_argument("--no-blog", action="store_true", help="不写博客文章")
    ap.add_argument("--app-factory-path", default="app", help="Flask 工厂模块名（如 app）")
    ap.add_argument("--app-factory-func", default="create_app", help="Flask 工厂函数名（如 create_app）")
    ap.add_argument("--dry-run", action="store_true", help="只打印不落库")
    args = ap.parse_args(argv)

    case_studies, blog_posts = load_bundle(args.file)
    if args.no_blog:
        blog_posts = None

    mod = __import__(args.app_factory_path, fromlist=[args.app_factory_func])
    create_app = getattr(mod, args.app_factory_func)
    app = create_app()

    with app.app_context():
        from extensions import db
        from services import seed_service
        from services.errors import ValidationError

        db.create_all()
        try:
            result = seed_service.initialize(case_studies, blog_posts, dry_run=args.dry_run)
        except ValidationError as e:
            print(f"❌ {e.message}", file=sys.stderr)
            return 1

    prefix = "[dry-run] " if args.dry_run else ""
    print(f"{prefix}✅ {result['message']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
