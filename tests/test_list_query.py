"""Tests for range/sort/filter parsing and the list query builder."""

from __future__ import annotations

import json

import pytest
from fastapi import HTTPException
from sqlalchemy import event

from travel_admin.models import MultiDayTour, Region
from travel_admin.services.list_query import (
    build_where,
    content_range,
    fetch_page,
    field_map,
    parse_list_params,
)


class TestParseListParams:
    """Tests for parse_list_params."""

    def test_defaults(self) -> None:
        """Missing parameters fall back to [0, 10], createdAt desc, no filter."""
        params = parse_list_params(None, None, None)
        assert (params.start, params.end) == (0, 10)
        assert (params.sort_field, params.sort_order) == ("createdAt", "desc")
        assert params.filters == {}

    def test_resource_default_sort(self) -> None:
        params = parse_list_params(None, None, None, default_sort=("order", "asc"))
        assert (params.sort_field, params.sort_order) == ("order", "asc")

    def test_sort_direction_is_case_insensitive(self) -> None:
        params = parse_list_params("[5, 9]", '["title", "ASC"]', '{"title": "alps"}')
        assert (params.start, params.end) == (5, 9)
        assert params.sort_order == "asc"
        assert params.filters == {"title": "alps"}

    def test_unknown_sort_direction_rejected(self) -> None:
        with pytest.raises(HTTPException) as exc_info:
            parse_list_params(None, '["title", "sideways"]', None)
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize("raw_range", ["[1]", '["a", "b"]', "{}", "[-1, 4]"])
    def test_bad_range_shape_rejected(self, raw_range: str) -> None:
        with pytest.raises(HTTPException) as exc_info:
            parse_list_params(raw_range, None, None)
        assert exc_info.value.status_code == 400

    def test_malformed_json_propagates(self) -> None:
        """Broken JSON is not handled here; the app answers it with a generic 500."""
        with pytest.raises(json.JSONDecodeError):
            parse_list_params("[0,", None, None)


class TestFieldMap:
    """Tests for field_map."""

    def test_scalar_columns_in_camel_case(self) -> None:
        fields = field_map(MultiDayTour)
        for name in ("id", "title", "regionId", "createdAt", "minNumPeople", "order"):
            assert name in fields

    def test_json_columns_excluded(self) -> None:
        fields = field_map(MultiDayTour)
        for name in ("img", "tourDates", "places", "checklists"):
            assert name not in fields


class TestBuildWhere:
    """Tests for build_where."""

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(HTTPException) as exc_info:
            build_where(field_map(Region), {"password": "x"})
        assert exc_info.value.status_code == 400
        assert "password" in exc_info.value.detail

    def test_text_search_on_numeric_column_rejected(self) -> None:
        with pytest.raises(HTTPException) as exc_info:
            build_where(field_map(MultiDayTour), {"price": "100"})
        assert exc_info.value.status_code == 400

    def test_non_string_value_on_text_column_rejected(self) -> None:
        for value in (5, 1.5, True):
            with pytest.raises(HTTPException) as exc_info:
                build_where(field_map(Region), {"title": value})
            assert exc_info.value.status_code == 400
            assert "title" in exc_info.value.detail

    def test_one_clause_per_filter_entry(self) -> None:
        clauses = build_where(field_map(MultiDayTour), {"id": [1, 2], "title": "x", "price": 10})
        assert len(clauses) == 3


class TestContentRange:
    """Tests for content_range."""

    def test_end_clamped_to_last_row(self) -> None:
        assert content_range("regions", 0, 24, 3) == "regions 0-2/3"

    def test_end_inside_total(self) -> None:
        assert content_range("hotels", 10, 19, 42) == "hotels 10-19/42"

    def test_empty_result(self) -> None:
        assert content_range("events", 0, 9, 0) == "events 0--1/0"


class TestFetchPage:
    """Tests for fetch_page against a real session."""

    @pytest.fixture
    def regions(self, db_session) -> list:
        rows = [
            Region(title="Swiss Alps", description="a", img=["1.jpg"]),
            Region(title="French ALPS", description="b", img=["2.jpg"]),
            Region(title="Caucasus", description="c", img=["3.jpg"]),
            Region(title="Altai", description="d", img=["4.jpg"]),
        ]
        db_session.add_all(rows)
        db_session.commit()
        return rows

    def test_page_size_is_min_of_window_and_total(self, db_session, regions) -> None:
        params = parse_list_params("[1, 2]", '["title", "ASC"]', None)
        rows, header = fetch_page(db_session, Region, params, resource="regions", fields=field_map(Region))
        assert [r.title for r in rows] == ["Caucasus", "French ALPS"]
        assert header == "regions 1-2/4"

    def test_window_past_total(self, db_session, regions) -> None:
        params = parse_list_params("[0, 99]", None, None)
        rows, header = fetch_page(db_session, Region, params, resource="regions", fields=field_map(Region))
        assert len(rows) == 4
        assert header == "regions 0-3/4"

    def test_count_uses_filtered_set(self, db_session, regions) -> None:
        params = parse_list_params("[0, 9]", None, '{"title": "alps"}')
        rows, header = fetch_page(db_session, Region, params, resource="regions", fields=field_map(Region))
        assert sorted(r.title for r in rows) == ["French ALPS", "Swiss Alps"]
        assert header == "regions 0-1/2"

    def test_membership_filter(self, db_session, regions) -> None:
        wanted = [regions[0].id, regions[3].id]
        params = parse_list_params(None, None, json.dumps({"id": wanted}))
        rows, _ = fetch_page(db_session, Region, params, resource="regions", fields=field_map(Region))
        assert sorted(r.id for r in rows) == sorted(wanted)

    def test_equality_filter(self, db_session, regions) -> None:
        params = parse_list_params(None, None, json.dumps({"id": regions[2].id}))
        rows, _ = fetch_page(db_session, Region, params, resource="regions", fields=field_map(Region))
        assert [r.title for r in rows] == ["Caucasus"]

    def test_like_wildcards_match_literally(self, db_session) -> None:
        db_session.add_all(
            Region(title=title, description="x", img=["x.jpg"])
            for title in ("Sale 50% off", "Sale 500 off", "a_b", "axb")
        )
        db_session.commit()

        for needle, expected in (("50%", ["Sale 50% off"]), ("A_B", ["a_b"])):
            params = parse_list_params(None, None, json.dumps({"title": needle}))
            rows, header = fetch_page(db_session, Region, params, resource="regions", fields=field_map(Region))
            assert [r.title for r in rows] == expected
            assert header == "regions 0-0/1"

    def test_leading_field_not_repeated(self, db_session) -> None:
        db_session.add_all(
            MultiDayTour(title=title, img=["x.jpg"], order=order) for title, order in (("B", 2), ("A", 1))
        )
        db_session.commit()

        statements = []

        def record(conn, cursor, statement, parameters, context, executemany):
            statements.append(statement)

        engine = db_session.get_bind()
        event.listen(engine, "before_cursor_execute", record)
        try:
            params = parse_list_params(None, None, None, default_sort=("order", "asc"))
            rows, _ = fetch_page(
                db_session,
                MultiDayTour,
                params,
                resource="multiDayTours",
                fields=field_map(MultiDayTour),
                leading_fields=("order",),
            )
        finally:
            event.remove(engine, "before_cursor_execute", record)

        assert [r.title for r in rows] == ["A", "B"]
        order_by = statements[-1].split("ORDER BY", 1)[1]
        assert order_by.count('"order"') == 1
