from church_attendance.members.csv_import import has_header, parse_member_csv


def test_header_is_sniffed_by_email_column():
    assert has_header(["First", "Last", "EMAIL"])
    assert not has_header(["First", "Last", "Mail"])


def test_first_row_is_data_without_email_header():
    rows, skipped = parse_member_csv("first,last,mail\nAnn,Lee\n")

    assert skipped == 0
    assert [(r.first_name, r.last_name) for r in rows] == [("first", "last"), ("Ann", "Lee")]


def test_missing_optional_columns_become_none():
    rows, _ = parse_member_csv("Ann,Lee\n")

    assert rows[0].email is None
    assert rows[0].phone is None
    assert rows[0].ministry is None


def test_blank_lines_are_ignored():
    rows, skipped = parse_member_csv("\nAnn,Lee,ann@example.com\n\n")

    assert len(rows) == 1
    assert skipped == 0
