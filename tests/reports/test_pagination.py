import pytest

from church_attendance.reports.pagination import paginate, total_pages


@pytest.mark.parametrize("n", [1, 4, 5, 6, 10, 12])
def test_last_page_holds_the_remainder(n):
    items = list(range(n))
    last = total_pages(n)

    page = paginate(items, last)

    assert page.total_pages == last
    assert len(page.items) == (n % 5 or 5)


def test_pages_are_one_indexed():
    page = paginate(list("abcdefg"), 1)
    assert page.items == list("abcde")


def test_out_of_range_pages_are_clamped():
    assert paginate(list(range(7)), 9).page == 2
    assert paginate(list(range(7)), 0).page == 1


def test_empty_set():
    page = paginate([], 3)

    assert (page.page, page.total_pages, page.total, page.items) == (1, 0, 0, [])


def test_custom_page_size():
    assert paginate(list(range(10)), 2, page_size=3).items == [3, 4, 5]
