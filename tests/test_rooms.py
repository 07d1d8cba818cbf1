from hotelbook.services.catalog import list_rooms
from hotelbook.services.seed import DEFAULT_ROOMS, seed_rooms


def test_list_all_rooms(client, db):
    seed_rooms(db, DEFAULT_ROOMS)
    response = client.get("/rooms")
    assert response.status_code == 200
    rooms = response.json()
    assert len(rooms) == len(DEFAULT_ROOMS)
    assert {(r["hotel_name"], r["name"]) for r in rooms} == {(r["hotel_name"], r["name"]) for r in DEFAULT_ROOMS}


def test_room_shape_and_amenities_list(client, room):
    rooms = client.get("/rooms").json()
    assert rooms == [{
        "id": room.id,
        "hotel_name": "Hotel Sea View",
        "location": "Puri",
        "name": "Standard Room",
        "price": 1500,
        "available": 5,
        "image": "/images/Puri/Hotel Sea View/room_standard.jpg",
        "amenities": ["Wi-Fi", "TV", "AC"],
    }]


def test_location_filter_is_case_insensitive(client, db):
    seed_rooms(db, DEFAULT_ROOMS)
    expected = sorted(r["name"] + r["hotel_name"] for r in DEFAULT_ROOMS if r["location"].lower() == "puri")
    assert expected

    for location in ("Puri", "puri", "PURI"):
        rooms = client.get("/rooms", params={"location": location}).json()
        assert sorted(r["name"] + r["hotel_name"] for r in rooms) == expected
        assert all(r["location"] == "Puri" for r in rooms)


def test_location_filter_is_exact_match(db):
    seed_rooms(db, DEFAULT_ROOMS)
    assert list_rooms(db, "Pur") == []
    assert list_rooms(db, "Atlantis") == []


def test_all_location_means_no_filter(db):
    seed_rooms(db, DEFAULT_ROOMS)
    assert len(list_rooms(db, "all")) == len(DEFAULT_ROOMS)
    assert len(list_rooms(db, "")) == len(DEFAULT_ROOMS)
    assert len(list_rooms(db, None)) == len(DEFAULT_ROOMS)


def test_storage_failure_is_a_json_500(monkeypatch, client):
    from sqlalchemy.exc import OperationalError

    from hotelbook.db import get_db
    from hotelbook.main import app

    class BrokenSession:
        def query(self, *args, **kwargs):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        get = query

    def broken_get_db():
        yield BrokenSession()

    monkeypatch.setitem(app.dependency_overrides, get_db, broken_get_db)

    response = client.get("/rooms")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}


def test_corrupt_amenities_is_a_json_500(lenient_client, db):
    from conftest import make_room

    make_room(db, amenities="{not json")
    response = lenient_client.get("/rooms")
    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
