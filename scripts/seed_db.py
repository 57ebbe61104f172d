from __future__ import annotations

from dotenv import load_dotenv

from church_attendance.config import load_settings
from church_attendance.container import build_container
from church_attendance.database.bootstrap import seed_demo_data
from church_attendance.database.connection import DBConfig


def main() -> None:
    load_dotenv(override=False)
    settings = load_settings()
    db_config = dict(settings.DB_CONFIG)

    counts = seed_demo_data(build_container(db_config=db_config))

    summary = " ".join(f"{k}={v}" for k, v in counts.items())
    print(f"OK: Seeded database -> {DBConfig.from_dict(db_config).describe()} ({summary})")


if __name__ == "__main__":
    main()
