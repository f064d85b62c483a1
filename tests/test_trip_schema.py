import pytest
from datetime import date

from schemas.packing import ItemCategory, PackingItem, PackingList
from schemas.trip import TripSpec, trip_duration_days


@pytest.fixture
def trip():
    return TripSpec(destination="Lisbon, Portugal",
                    start_date=date(2024, 6, 1), end_date=date(2024, 6, 3))


def test_duration_is_inclusive(trip):
    assert trip.duration_days() == 3
    assert trip_duration_days(date(2024, 6, 1), date(2024, 6, 1)) == 1


def test_duration_label(trip):
    assert trip.duration_label() == "3 days"
    trip.set_dates(date(2024, 6, 1), date(2024, 6, 1))
    assert trip.duration_label() == "1 day"
    trip.set_dates(date(2024, 6, 1), None)
    assert trip.duration_label() == ""


def test_duration_without_dates_raises():
    with pytest.raises(ValueError, match="not set"):
        TripSpec().duration_days()


def test_activities_keep_order_and_skip_blank(trip):
    assert trip.add_activity("Golf")
    assert not trip.add_activity("   ")
    assert not trip.add_activity("")
    assert trip.add_activity("beach day")
    assert trip.activities == ["Golf", "beach day"]


def test_remove_activity_by_index(trip):
    for a in ("golf", "hike", "swim"):
        trip.add_activity(a)
    assert trip.remove_activity(1) == "hike"
    assert trip.activities == ["golf", "swim"]
    with pytest.raises(IndexError):
        trip.remove_activity(5)


def test_clear(trip):
    trip.add_activity("golf")
    trip.clear()
    assert trip == TripSpec()


def test_packing_list_rejects_duplicate_names():
    item = PackingItem("Socks", ItemCategory.CLOTHING, 3)
    with pytest.raises(ValueError, match="Duplicate"):
        PackingList(items=(item, item))


def test_packing_item_quantity_must_be_positive():
    with pytest.raises(ValueError, match="positive"):
        PackingItem("Socks", ItemCategory.CLOTHING, 0)


def test_packing_list_lookup_helpers():
    packing = PackingList(items=(
        PackingItem("Passport/ID", ItemCategory.ESSENTIALS),
        PackingItem("Socks", ItemCategory.CLOTHING, 4),
    ))
    assert "Socks" in packing
    assert packing.get("Umbrella") is None
    assert packing.total_quantity() == 5
    assert packing.names() == ["Passport/ID", "Socks"]
