"""Tests for the /api/regions resource."""

from __future__ import annotations

import json


class TestRegionList:
    """List endpoint: pagination, sorting, filtering and Content-Range."""

    def test_empty_list(self, client) -> None:
        response = client.get("/api/regions")
        assert response.status_code == 200
        assert response.json() == []
        assert response.headers["Content-Range"] == "regions 0--1/0"

    def test_range_window(self, client, make_region) -> None:
        for title in ("A", "B", "C"):
            make_region(title=title)

        response = client.get("/api/regions", params={"range": "[0, 1]", "sort": '["title", "ASC"]'})
        assert response.status_code == 200
        assert [r["title"] for r in response.json()] == ["A", "B"]
        assert response.headers["Content-Range"] == "regions 0-1/3"

    def test_default_range_clamped_to_total(self, client, make_region) -> None:
        for title in ("A", "B", "C"):
            make_region(title=title)

        response = client.get("/api/regions")
        assert len(response.json()) == 3
        assert response.headers["Content-Range"] == "regions 0-2/3"

    def test_sort_desc(self, client, make_region) -> None:
        for title in ("B", "C", "A"):
            make_region(title=title)

        response = client.get("/api/regions", params={"sort": '["title", "desc"]'})
        assert [r["title"] for r in response.json()] == ["C", "B", "A"]

    def test_filter_title_case_insensitive(self, client, make_region) -> None:
        make_region(title="Swiss Alps")
        make_region(title="ALPS of Italy")
        make_region(title="Caucasus")

        response = client.get("/api/regions", params={"filter": json.dumps({"title": "alps"})})
        titles = sorted(r["title"] for r in response.json())
        assert titles == ["ALPS of Italy", "Swiss Alps"]
        assert response.headers["Content-Range"] == "regions 0-1/2"

    def test_unknown_filter_field(self, client) -> None:
        response = client.get("/api/regions", params={"filter": '{"secret": 1}'})
        assert response.status_code == 400
        assert response.json() == {"error": "Unknown filter field: secret"}

    def test_unknown_sort_field(self, client) -> None:
        response = client.get("/api/regions", params={"sort": '["nope", "ASC"]'})
        assert response.status_code == 400
        assert "error" in response.json()

    def test_malformed_json_is_generic_500(self, lenient_client) -> None:
        response = lenient_client.get("/api/regions", params={"range": "[0,"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}

    def test_children_are_included(self, client, region) -> None:
        hotel = {
            "title": "Chalet",
            "city": "Zermatt",
            "img": ["h.jpg"],
            "regionId": region["id"],
        }
        assert client.post("/api/hotels", json=hotel).status_code == 201

        listed = client.get("/api/regions").json()[0]
        assert [h["title"] for h in listed["hotels"]] == ["Chalet"]
        for key in ("multiDayTours", "oneDayTours", "autorTours", "events", "places"):
            assert listed[key] == []


class TestRegionCrud:
    """Get, create, update and delete."""

    def test_create_and_fetch_round_trip(self, client) -> None:
        payload = {
            "title": "Altai",
            "description": "Lakes",
            "img": ["a.jpg", "b.jpg"],
            "link": "https://altai.example",
        }
        created = client.post("/api/regions", json=payload)
        assert created.status_code == 201

        fetched = client.get(f"/api/regions/{created.json()['id']}")
        assert fetched.status_code == 200
        body = fetched.json()
        for key, value in payload.items():
            assert body[key] == value
        assert "createdAt" in body and "updatedAt" in body

    def test_create_requires_fields(self, client) -> None:
        for payload in (
            {"description": "x", "img": ["a.jpg"]},
            {"title": "x", "img": ["a.jpg"]},
            {"title": "x", "description": "x"},
            {"title": "x", "description": "x", "img": "a.jpg"},
            {"title": "x", "description": "x", "img": []},
        ):
            response = client.post("/api/regions", json=payload)
            assert response.status_code == 400
            assert response.json() == {"error": "Title, description, and img (array) are required"}

        assert client.get("/api/regions").json() == []

    def test_get_missing(self, client) -> None:
        response = client.get("/api/regions/999")
        assert response.status_code == 404
        assert response.json() == {"error": "Region not found!"}

    def test_get_non_integer_id(self, client) -> None:
        response = client.get("/api/regions/abc")
        assert response.status_code == 400
        assert "error" in response.json()

    def test_empty_update_changes_nothing(self, client, region) -> None:
        response = client.put(f"/api/regions/{region['id']}", json={})
        assert response.status_code == 200
        body = response.json()
        for key in ("title", "description", "img", "link"):
            assert body[key] == region[key]

    def test_partial_update(self, client, region) -> None:
        response = client.put(f"/api/regions/{region['id']}", json={"title": "Bernese Alps"})
        body = response.json()
        assert body["title"] == "Bernese Alps"
        assert body["description"] == region["description"]
        assert body["img"] == region["img"]

    def test_update_ignores_non_list_img_and_null_title(self, client, region) -> None:
        response = client.put(
            f"/api/regions/{region['id']}",
            json={"img": "single.jpg", "title": None},
        )
        assert response.status_code == 200
        assert response.json()["img"] == region["img"]
        assert response.json()["title"] == region["title"]

    def test_update_explicit_null_clears_optional_field(self, client, region) -> None:
        response = client.put(f"/api/regions/{region['id']}", json={"link": None})
        assert response.status_code == 200
        assert response.json()["link"] is None

    def test_update_missing(self, client) -> None:
        response = client.put("/api/regions/999", json={"title": "x"})
        assert response.status_code == 404
        assert response.json() == {"error": "Region not found!"}

    def test_delete(self, client, region) -> None:
        response = client.delete(f"/api/regions/{region['id']}")
        assert response.status_code == 200
        assert response.json() == {"message": "Region deleted successfully!"}

        again = client.delete(f"/api/regions/{region['id']}")
        assert again.status_code == 404
        assert again.json() == {"error": "Region not found!"}

    def test_delete_detaches_children(self, client, region) -> None:
        event = client.post(
            "/api/events",
            json={"title": "Fest", "description": "Music", "img": ["e.jpg"], "regionId": region["id"]},
        ).json()

        assert client.delete(f"/api/regions/{region['id']}").status_code == 200

        fetched = client.get(f"/api/events/{event['id']}").json()
        assert fetched["regionId"] is None
        assert fetched["region"] is None
