"""Tests for URL decomposition and product slots."""

import pytest

from ga_universal.domains.events import Page, Track
from ga_universal.domains.mapping import (
    format_products,
    location_fields,
    page_context_fields,
    split_url,
)


class TestSplitUrl:
    @pytest.mark.parametrize(
        "url, include_query, expected",
        [
            ("https://segment.com/docs?x=1", True, ("segment.com", "/docs?x=1")),
            ("https://segment.com/docs?x=1", False, ("segment.com", "/docs")),
            ("https://Segment.COM", True, ("segment.com", "/")),
            ("http://segment.com?a=b", True, ("segment.com", "/?a=b")),
            ("/relative/path", True, (None, "/relative/path")),
            ("", True, (None, None)),
            (None, True, (None, None)),
            (42, True, (None, None)),
            ("http://[::1", True, (None, None)),
        ],
    )
    def test_split(self, url, include_query, expected):
        assert split_url(url, include_query) == expected


class TestLocationFields:
    def test_property_url_overrides_context(self):
        track = Track(
            {
                "properties": {"url": "https://a.example.com/from-props"},
                "context": {"page": {"url": "https://b.example.com/from-context"}},
            }
        )
        assert location_fields(track) == {"dh": "a.example.com", "dp": "/from-props"}

    def test_context_url(self):
        page = Page({"context": {"page": {"url": "https://b.example.com/x?y=z"}}})
        assert location_fields(page) == {"dh": "b.example.com", "dp": "/x?y=z"}

    def test_no_url_omits_keys(self):
        assert location_fields(Track({})) == {}

    def test_non_string_url_omits_keys(self):
        assert location_fields(Track({"properties": {"url": {"href": "x"}}})) == {}


class TestPageContextFields:
    def test_all_fields(self):
        track = Track(
            {"context": {"page": {"url": "https://shop.example.com/cart?step=1", "title": "Cart"}}}
        )
        assert page_context_fields(track) == {
            "dh": "shop.example.com",
            "dp": "/cart",
            "dt": "Cart",
        }

    def test_title_without_url(self):
        assert page_context_fields(Track({"context": {"page": {"title": "Cart"}}})) == {"dt": "Cart"}

    def test_ignores_property_url(self):
        assert page_context_fields(Track({"properties": {"url": "https://x.com/"}})) == {}


class TestFormatProducts:
    def test_slots_follow_list_order(self):
        form = format_products(
            [
                {"id": "507f1f77", "name": "Monopoly", "price": 19, "quantity": 1},
                {"id": "505bd76785", "name": "Uno", "price": 3, "quantity": 2},
                {"id": "9", "name": "Chess", "brand": "Hasbro", "variant": "travel"},
            ]
        )
        assert form == {
            "pr1id": "507f1f77",
            "pr1nm": "Monopoly",
            "pr1pr": 19,
            "pr1qty": 1,
            "pr2id": "505bd76785",
            "pr2nm": "Uno",
            "pr2pr": 3,
            "pr2qty": 2,
            "pr3id": "9",
            "pr3nm": "Chess",
            "pr3br": "Hasbro",
            "pr3va": "travel",
        }

    def test_missing_name_keeps_other_fields(self):
        form = format_products([{"id": "1", "name": "A"}, {"id": "2", "category": "Games"}])
        assert "pr2nm" not in form
        assert form["pr2id"] == "2"
        assert form["pr2ca"] == "Games"

    def test_no_quantity_default(self):
        assert "pr1qty" not in format_products([{"id": "1"}])

    def test_unknown_fields_dropped(self):
        assert format_products([{"sku": "s", "coupon": "c"}]) == {}

    def test_start_slot(self):
        assert format_products([{"id": "1"}], start=4) == {"pr4id": "1"}

    def test_empty(self):
        assert format_products([]) == {}
