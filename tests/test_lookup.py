"""
Tests for name lookup
"""
import pytest

from pizza_api.app.schemas.pizza import Pizza
from pizza_api.app.services.catalog_service import Catalog
from pizza_api.app.services.lookup_service import Found, LookupService, NameMissing, NotFound


@pytest.mark.parametrize("name, price", [("veggie", 10), ("regina", 12), ("deluxe", 14)])
def test_find_seeded_pizzas(catalog, name, price):
    outcome = LookupService.find(name, catalog)
    assert isinstance(outcome, Found)
    assert outcome.pizza.name == name
    assert outcome.pizza.price == price


def test_find_without_name_reports_missing(catalog):
    assert LookupService.find(None, catalog) == NameMissing()


def test_find_without_name_on_empty_catalog():
    assert LookupService.find(None, Catalog([])) == NameMissing()


def test_find_unknown_name(catalog):
    assert LookupService.find("unknown", catalog) == NotFound()


def test_find_is_case_sensitive(catalog):
    assert LookupService.find("Regina", catalog) == NotFound()
    assert LookupService.find("regina ", catalog) == NotFound()


def test_empty_name_is_an_ordinary_miss(catalog):
    assert LookupService.find("", catalog) == NotFound()


def test_find_returns_first_match():
    first = Pizza(name="a", price=1)
    outcome = LookupService.find("a", [first, Pizza(name="b", price=2)])
    assert outcome == Found(first)
