# chatrelay/init_db.py

from sqlalchemy import inspect

from chatrelay.infra.postgres import engine, init_db
from chatrelay.models.base import Base
from chatrelay.models.chat import Chat  # noqa: F401
from chatrelay.models.user import User  # noqa: F401


def reset_db(bind=None):
    """Drop and recreate all tables"""
    bind = bind or engine
    print("⚠️  Dropping all tables...")
    Base.metadata.drop_all(bind=bind)
    print("✓ Tables dropped")

    print("📦 Creating tables...")
    init_db(bind=bind)
    print("✅ Database initialized successfully!")

    inspector = inspect(bind)
    tables = inspector.get_table_names()
    print(f"\nCreated tables: {tables}")

    for table in tables:
        columns = inspector.get_columns(table)
        print(f"\n{table}:")
        for col in columns:
            print(f"  - {col['name']}: {col['type']}")
    return tables


if __name__ == "__main__":
    reset_db()
