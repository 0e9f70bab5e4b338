"""
Tests for trip endpoints: window management, cascade delete and sharing.
"""
from decimal import Decimal
from app.models import Activity, Destination, Expense, Trip


def test_create_trip(client, auth_headers):
    response = client.post(
        "/api/trips",
        json={"title": "Tokyo", "start_date": "2024-04-01", "end_date": "2024-04-07"},
        headers=auth_headers
    )
    assert response.status_code == 201
    data = response.json()
    assert data["title"] == "Tokyo"
    assert Decimal(data["budget_limit"]) == 0
    assert data["is_public"] is False
    assert len(data["share_token"]) == 64


def test_create_trip_assigns_unique_share_tokens(client, auth_headers):
    payload = {"title": "A", "start_date": "2024-04-01", "end_date": "2024-04-01"}
    first = client.post("/api/trips", json=payload, headers=auth_headers).json()
    second = client.post("/api/trips", json=payload, headers=auth_headers).json()
    assert first["share_token"] != second["share_token"]


def test_create_trip_inverted_range(client, auth_headers):
    response = client.post(
        "/api/trips",
        json={"title": "Backwards", "start_date": "2024-04-07", "end_date": "2024-04-01"},
        headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["error"] == "Start date must be before end date"


def test_create_trip_blank_title(client, auth_headers):
    response = client.post(
        "/api/trips",
        json={"title": "  ", "start_date": "2024-04-01", "end_date": "2024-04-02"},
        headers=auth_headers
    )
    assert response.status_code == 400


def test_create_trip_negative_budget_rejected(client, auth_headers):
    response = client.post(
        "/api/trips",
        json={"title": "Broke", "start_date": "2024-04-01", "end_date": "2024-04-02", "budget_limit": -5},
        headers=auth_headers
    )
    assert response.status_code == 422


def test_list_trips_summary(client, auth_headers, trip, add_destination):
    add_destination(trip["id"], "2024-06-02", "2024-06-04")
    add_destination(trip["id"], "2024-06-05", "2024-06-08", city="Rome", country="Italy")
    client.post(
        "/api/trips",
        json={"title": "Later", "start_date": "2024-09-01", "end_date": "2024-09-03"},
        headers=auth_headers
    )

    response = client.get("/api/trips", headers=auth_headers)
    assert response.status_code == 200
    trips = response.json()
    assert [t["title"] for t in trips] == ["Later", "Summer in Europe"]
    assert trips[1]["city_count"] == 2
    assert "share_token" not in trips[1]


def test_list_trips_only_own(client, trip, other_headers):
    assert client.get("/api/trips", headers=other_headers).json() == []


def test_get_trip_with_children(client, auth_headers, trip, add_destination):
    later = add_destination(trip["id"], "2024-06-06", "2024-06-08", city="Rome", order_index=1).json()
    earlier = add_destination(trip["id"], "2024-06-02", "2024-06-05", order_index=0).json()
    client.post(
        f"/api/trips/destinations/{earlier['id']}/activities",
        json={"name": "Louvre", "category": "sightseeing", "cost": 17},
        headers=auth_headers
    )
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={"category": "meals", "amount": 40, "date": "2024-06-02"},
        headers=auth_headers
    )

    response = client.get(f"/api/trips/{trip['id']}", headers=auth_headers)
    assert response.status_code == 200
    data = response.json()
    assert [d["id"] for d in data["destinations"]] == [earlier["id"], later["id"]]
    assert data["destinations"][0]["activities"][0]["name"] == "Louvre"
    assert data["expenses"][0]["category"] == "meals"


def test_get_trip_of_other_user_is_not_found(client, trip, other_headers):
    response = client.get(f"/api/trips/{trip['id']}", headers=other_headers)
    assert response.status_code == 404
    assert response.json()["error"] == "Trip not found"


def test_update_trip_partial(client, auth_headers, trip):
    response = client.put(
        f"/api/trips/{trip['id']}",
        json={"title": "Renamed", "is_public": True},
        headers=auth_headers
    )
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Renamed"
    assert data["is_public"] is True
    assert data["start_date"] == "2024-06-01"
    assert data["end_date"] == "2024-06-10"
    assert Decimal(data["budget_limit"]) == 1000


def test_update_trip_widening_window_succeeds(client, auth_headers, trip, add_destination):
    add_destination(trip["id"], "2024-06-02", "2024-06-05")
    response = client.put(
        f"/api/trips/{trip['id']}",
        json={"start_date": "2024-05-20", "end_date": "2024-06-30"},
        headers=auth_headers
    )
    assert response.status_code == 200
    assert response.json()["start_date"] == "2024-05-20"


def test_update_trip_shrinking_below_destination_conflicts(client, auth_headers, trip, add_destination):
    destination = add_destination(trip["id"], "2024-06-02", "2024-06-05").json()
    response = client.put(
        f"/api/trips/{trip['id']}",
        json={"end_date": "2024-06-04"},
        headers=auth_headers
    )
    assert response.status_code == 409
    assert response.json()["details"]["destination_ids"] == [destination["id"]]

    unchanged = client.get(f"/api/trips/{trip['id']}", headers=auth_headers).json()
    assert unchanged["end_date"] == "2024-06-10"


def test_update_trip_moving_start_past_destination_conflicts(client, auth_headers, trip, add_destination):
    destination = add_destination(trip["id"], "2024-06-02", "2024-06-05").json()
    response = client.put(
        f"/api/trips/{trip['id']}",
        json={"start_date": "2024-06-03"},
        headers=auth_headers
    )
    assert response.status_code == 409
    assert response.json()["details"]["destination_ids"] == [destination["id"]]

    unchanged = client.get(f"/api/trips/{trip['id']}", headers=auth_headers).json()
    assert unchanged["start_date"] == "2024-06-01"


def test_update_trip_of_other_user(client, auth_headers, trip, other_headers):
    response = client.put(
        f"/api/trips/{trip['id']}",
        json={"title": "Hijacked"},
        headers=other_headers
    )
    assert response.status_code == 404

    unchanged = client.get(f"/api/trips/{trip['id']}", headers=auth_headers).json()
    assert unchanged["title"] == trip["title"]


def test_update_trip_single_date_inverting_range(client, auth_headers, trip):
    response = client.put(
        f"/api/trips/{trip['id']}",
        json={"start_date": "2024-06-15"},
        headers=auth_headers
    )
    assert response.status_code == 400


def test_delete_trip_cascades(client, auth_headers, trip, add_destination, db_session):
    destination = add_destination(trip["id"], "2024-06-02", "2024-06-05").json()
    client.post(
        f"/api/trips/destinations/{destination['id']}/activities",
        json={"name": "Seine cruise", "category": "tour", "cost": 30},
        headers=auth_headers
    )
    client.post(
        f"/api/trips/{trip['id']}/expenses",
        json={"category": "hotel", "amount": 200, "date": "2024-06-02"},
        headers=auth_headers
    )

    response = client.delete(f"/api/trips/{trip['id']}", headers=auth_headers)
    assert response.status_code == 200

    assert db_session.query(Trip).count() == 0
    assert db_session.query(Destination).filter(Destination.trip_id == trip["id"]).count() == 0
    assert db_session.query(Expense).filter(Expense.trip_id == trip["id"]).count() == 0
    assert db_session.query(Activity).count() == 0


def test_delete_trip_of_other_user(client, trip, other_headers):
    assert client.delete(f"/api/trips/{trip['id']}", headers=other_headers).status_code == 404


def test_shared_trip_hides_owner_and_token(client, auth_headers, trip, add_destination):
    add_destination(trip["id"], "2024-06-02", "2024-06-05")
    client.put(f"/api/trips/{trip['id']}", json={"is_public": True}, headers=auth_headers)

    response = client.get(f"/api/trips/shared/{trip['share_token']}")
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "Summer in Europe"
    assert len(data["destinations"]) == 1
    assert "owner_id" not in data
    assert "share_token" not in data
    assert "expenses" not in data


def test_shared_trip_private_is_not_found(client, trip):
    response = client.get(f"/api/trips/shared/{trip['share_token']}")
    assert response.status_code == 404


def test_shared_trip_unknown_token(client):
    assert client.get("/api/trips/shared/does-not-exist").status_code == 404
