import pytest

from church_attendance.core.exceptions import InvalidReferenceError, NotFoundError, ValidationError


def _register(container, event_id="e4", **overrides):
    fields = dict(first_name="Tom", last_name="Guest", home_church="Grace Chapel", email="tom@example.com")
    fields.update(overrides)
    return container.guest_service.register_for_event(event_id, **fields)


def test_register_for_event(container):
    guest = _register(container)

    assert guest.guest_id.startswith("g-")
    assert guest.event_id == "e4"
    assert container.guest_service.list_guests() == [guest]


def test_register_for_unknown_event(container):
    with pytest.raises(NotFoundError):
        _register(container, event_id="nope")


def test_register_for_cancelled_event(container):
    container.event_service.cancel_event("e4", "Weather")

    with pytest.raises(ValidationError):
        _register(container)


def test_register_requires_home_church(container):
    with pytest.raises(ValidationError):
        _register(container, home_church=" ")


def test_create_guest_checks_event_reference(container):
    with pytest.raises(InvalidReferenceError):
        container.guest_service.create_guest(
            event_id="nope", first_name="Tom", last_name="Guest", home_church="Grace Chapel"
        )


def test_update_guest_is_partial(container):
    guest = _register(container)

    updated = container.guest_service.update_guest(guest.guest_id, {"phone": "555-0199", "event_id": "e6"})

    assert updated.phone == "555-0199"
    assert updated.event_id == "e6"
    assert updated.email == "tom@example.com"


def test_update_guest_rejects_unknown_event(container):
    guest = _register(container)

    with pytest.raises(InvalidReferenceError):
        container.guest_service.update_guest(guest.guest_id, {"event_id": "nope"})


def test_delete_guest(container):
    guest = _register(container)

    container.guest_service.delete_guest(guest.guest_id)
    container.guest_service.delete_guest(guest.guest_id)

    assert container.guest_service.list_guests() == []
