from church_attendance.database.bootstrap import SCHEMA_PATH, _iter_sql_statements
from church_attendance.database.mysql_base import build_update


def test_splitter_skips_comments_and_respects_quotes():
    sql = "-- heading\nCREATE TABLE a (x INT);\nINSERT INTO a VALUES ('x;y');\n\n"

    assert list(_iter_sql_statements(sql)) == ["CREATE TABLE a (x INT)", "INSERT INTO a VALUES ('x;y')"]


def test_bundled_schema_creates_every_table():
    statements = list(_iter_sql_statements(SCHEMA_PATH.read_text(encoding="utf-8")))
    created = " ".join(statements)

    for table in ("users", "settings", "members", "events", "attendance", "guests"):
        assert f"CREATE TABLE IF NOT EXISTS {table}" in created


def test_build_update():
    sql, params = build_update("members", {"status": "inactive", "ministry": "None"}, key_column="id", key="AB12C3")

    assert sql == "UPDATE members SET status=%s, ministry=%s WHERE id=%s"
    assert params == ("inactive", "None", "AB12C3")
