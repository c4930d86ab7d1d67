# init_db.py
import sys

from app import create_app
from extensions import db
# 确保把模型导入进来，否则不会创建对应表
from models.kv_entry import KvEntry  # noqa: F401


def main(drop: bool = False):
    app = create_app()
    with app.app_context():
        if drop:
            print("Dropping all tables...")
            db.drop_all()
        print("Creating all tables...")
        db.create_all()
        print("Done.")


if __name__ == "__main__":
    main(drop="--drop" in sys.argv[1:])
