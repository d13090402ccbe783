"""Locations, cars, flights and hotels: public reads and admin writes."""
import pytest

from conftest import bearer
from travelvibe.seed import LOCATIONS


def test_locations_are_names_in_seed_order(client):
    resp = client.get("/api/locations")
    assert resp.status_code == 200
    assert resp.json() == LOCATIONS


class TestCars:
    def test_list(self, client):
        cars = client.get("/api/cars").json()
        assert [c["id"] for c in cars] == [1, 2, 3, 4, 5]

    def test_get_by_id(self, client):
        resp = client.get("/api/cars/3")
        assert resp.status_code == 200
        assert resp.json()["brand"] == "Ford"

    @pytest.mark.parametrize("car_id", ["999", "abc"])
    def test_get_unknown(self, client, car_id):
        resp = client.get(f"/api/cars/{car_id}")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Car not found"

    def test_search_by_location_substring(self, client):
        cars = client.get("/api/cars/search", params={"location": "new"}).json()
        assert [c["model"] for c in cars] == ["Camry"]

    def test_search_max_price(self, client):
        cars = client.get("/api/cars/search", params={"maxPrice": "50"}).json()
        assert sorted(c["model"] for c in cars) == ["Camry", "Civic"]
        assert all(c["price_per_day"] <= 50 for c in cars)

    def test_search_without_params_returns_all(self, client):
        assert len(client.get("/api/cars/search").json()) == 5

    def test_search_bad_max_price(self, client):
        assert client.get("/api/cars/search", params={"maxPrice": "cheap"}).status_code == 400


class TestFlights:
    def test_search_by_origin(self, client):
        flights = client.get("/api/flights/search", params={"origin": "los"}).json()
        assert [f["flight_number"] for f in flights] == ["UA303"]

    def test_search_orders_by_departure(self, client):
        flights = client.get("/api/flights/search").json()
        assert [f["flight_number"] for f in flights] == ["AA101", "UA303", "DL202", "SW404"]

    def test_search_by_date(self, client):
        flights = client.get("/api/flights/search", params={"date": "2025-12-20"}).json()
        assert [f["flight_number"] for f in flights] == ["DL202"]

    def test_search_by_origin_destination_and_date_without_match(self, client):
        params = {"origin": "new york", "destination": "angeles", "date": "2025-12-16"}
        assert client.get("/api/flights/search", params=params).json() == []

    def test_get_unknown(self, client):
        assert client.get("/api/flights/42").status_code == 404


class TestHotels:
    def test_search_orders_by_price_and_filters(self, client):
        hotels = client.get("/api/hotels/search", params={"maxPrice": 180}).json()
        assert [h["name"] for h in hotels] == ["City Center Inn", "Mountain View Lodge", "Downtown Business Hotel"]

    def test_search_by_location(self, client):
        hotels = client.get("/api/hotels/search", params={"location": "DENVER"}).json()
        assert [h["name"] for h in hotels] == ["Mountain View Lodge"]

    def test_get_by_id(self, client):
        assert client.get("/api/hotels/1").json()["name"] == "Grand Plaza Hotel"


NEW_CAR = {
    "model": "Corolla", "brand": "Toyota", "location": "Austin", "price_per_day": 39.5,
    "car_type": "Sedan", "seating_capacity": 5, "available_cars": 4,
}
NEW_FLIGHT = {
    "airline": "JetBlue", "flight_number": "B6100", "origin": "Boston", "destination": "Austin",
    "departure_time": "2026-01-05T07:15:00Z", "arrival_time": "2026-01-05T11:00:00Z",
    "price": 210.0, "available_seats": 90,
}
NEW_HOTEL = {"name": "Harbor Inn", "location": "Seattle", "rating": 4.1, "price_per_night": 140.0}


class TestAdminCatalog:
    @pytest.mark.parametrize("path,body", [
        ("/api/cars", NEW_CAR),
        ("/api/flights", NEW_FLIGHT),
        ("/api/hotels", NEW_HOTEL),
    ])
    def test_admin_creates_item(self, client, admin, path, body):
        resp = client.post(path, json=body, headers=bearer(admin))
        assert resp.status_code == 201
        created = resp.json()
        assert isinstance(created["id"], int)
        assert client.get(f"{path}/{created['id']}").status_code == 200

    def test_created_flight_is_searchable_by_date(self, client, admin):
        client.post("/api/flights", json=NEW_FLIGHT, headers=bearer(admin))
        flights = client.get("/api/flights/search", params={"date": "2026-01-05"}).json()
        assert [f["flight_number"] for f in flights] == ["B6100"]

    def test_create_requires_token(self, client):
        assert client.post("/api/cars", json=NEW_CAR).status_code == 401

    def test_create_requires_admin(self, client, user):
        resp = client.post("/api/hotels", json=NEW_HOTEL, headers=bearer(user))
        assert resp.status_code == 403
        assert resp.json()["detail"] == "Admin access required"

    def test_create_missing_field(self, client, admin):
        body = {k: v for k, v in NEW_CAR.items() if k != "brand"}
        assert client.post("/api/cars", json=body, headers=bearer(admin)).status_code == 400

    @pytest.mark.parametrize("path", ["/api/cars/2", "/api/flights/2", "/api/hotels/2"])
    def test_admin_deletes_item(self, client, admin, path):
        resp = client.delete(path, headers=bearer(admin))
        assert resp.status_code == 200
        assert client.get(path).status_code == 404

    @pytest.mark.parametrize("path", ["/api/cars/999", "/api/flights/999", "/api/hotels/999"])
    def test_delete_unknown_item_is_not_found(self, client, admin, path):
        assert client.delete(path, headers=bearer(admin)).status_code == 404

    def test_delete_requires_admin(self, client, user):
        assert client.delete("/api/cars/1", headers=bearer(user)).status_code == 403
        assert client.get("/api/cars/1").status_code == 200
