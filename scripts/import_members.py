from __future__ import annotations

import argparse
from pathlib import Path

from dotenv import load_dotenv

from church_attendance.config import load_settings
from church_attendance.container import build_container


def main() -> None:
    parser = argparse.ArgumentParser(description="Import members from a CSV file (first,last,email,phone,ministry).")
    parser.add_argument("csv_file", type=Path)
    args = parser.parse_args()

    load_dotenv(override=False)
    settings = load_settings()
    container = build_container(db_config=dict(settings.DB_CONFIG))

    result = container.member_service.import_csv(args.csv_file.read_text(encoding="utf-8-sig"))
    print(f"OK: Imported {len(result.created)} member(s), skipped {result.skipped}")


if __name__ == "__main__":
    main()
