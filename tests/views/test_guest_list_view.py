import pytest

from church_attendance.views.guest_list import GuestListView


@pytest.fixture
def view(offline_gateway):
    for i, (event_id, church) in enumerate([("e4", "Grace Chapel")] * 6 + [("e6", "Hope Church")]):
        offline_gateway.create_guest(
            {"eventId": event_id, "firstName": f"Guest{i}", "lastName": "Visitor", "homeChurch": church}
        )
    v = GuestListView(offline_gateway)
    v.load()
    return v


def test_pages_of_five(view):
    page = view.current_page()

    assert (page.total, page.total_pages, len(page.items)) == (7, 2, 5)
    assert len(view.go_to(2).items) == 2


def test_event_filter_and_reset(view):
    view.go_to(2)
    view.set_filter(event_id="e6")

    assert view.page == 1
    assert [g.home_church for g in view.current_page().items] == ["Hope Church"]


def test_search(view):
    view.set_filter(search="guest3")
    assert [g.first_name for g in view.filtered] == ["Guest3"]

    view.set_filter(search="grace")
    assert len(view.filtered) == 6


def test_public_events(view):
    assert {e.event_id for e in view.public_events()} == {"e4", "e6", "e9", "e12"}
    assert view.event_name("e4") == "Youth Night"
    assert view.event_name("nope") == "Unknown event"
