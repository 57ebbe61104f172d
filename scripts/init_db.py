from __future__ import annotations

from dotenv import load_dotenv

from church_attendance.config import load_settings
from church_attendance.database.bootstrap import apply_schema, list_tables
from church_attendance.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    tables = list_tables(db_config)
    print(f"OK: Applied schema.sql -> {DBConfig.from_dict(db_config).describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
