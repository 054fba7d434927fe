"""Tests for the filter -> sort -> paginate pipeline."""

import pytest

from homestay.mappers.catalog_query import query_catalog, resolve_page
from homestay.schemas.catalog import CatalogItem, FilterCriteria, SortOption


@pytest.fixture
def catalog():
    return [
        CatalogItem(id=i, name=f"Place {i}", price=p, rating=r)
        for i, (p, r) in enumerate(
            [(100, 4.5), (200, 3.0), (300, 4.8), (400, 4.1), (500, 2.5)], start=1
        )
    ]


def test_empty_criteria_no_sort_returns_everything_in_order(catalog):
    page = query_catalog(catalog)
    assert page.items == catalog
    assert page.total_items == 5
    assert page.total_pages == 1


def test_filter_then_sort(catalog):
    page = query_catalog(catalog, FilterCriteria(min_rating=4), SortOption.price_high_low)
    assert [i.id for i in page.items] == [4, 3, 1]
    assert page.total_items == 3


def test_price_window_keeps_order(catalog):
    page = query_catalog(catalog, FilterCriteria(price_min=150, price_max=450))
    assert [i.price for i in page.items] == [200, 300, 400]


def test_sort_only(catalog):
    page = query_catalog(catalog, sort_option="price-high-low")
    assert [i.price for i in page.items] == [500, 400, 300, 200, 100]


def test_empty_source():
    page = query_catalog([], FilterCriteria(search_term="x"))
    assert page.items == []
    assert page.total_items == 0
    assert page.total_pages == 0


# --- pagination ---


def test_first_page(catalog):
    page = query_catalog(catalog, page=1, page_size=2)
    assert [i.id for i in page.items] == [1, 2]
    assert page.total_items == 5
    assert page.total_pages == 3
    assert page.page == 1
    assert page.page_size == 2


def test_last_partial_page(catalog):
    page = query_catalog(catalog, page=3, page_size=2)
    assert [i.id for i in page.items] == [5]


def test_page_past_the_end_is_empty(catalog):
    page = query_catalog(catalog, page=9, page_size=2)
    assert page.items == []
    assert page.total_pages == 3


def test_page_defaults_to_first(catalog):
    page = query_catalog(catalog, page_size=10)
    assert page.page == 1
    assert page.total_pages == 1
    assert len(page.items) == 5


def test_pagination_applies_after_filtering(catalog):
    page = query_catalog(catalog, FilterCriteria(min_rating=4), "price-low-high", page=2, page_size=2)
    assert [i.id for i in page.items] == [4]
    assert page.total_items == 3
    assert page.total_pages == 2


# --- resolve_page ---


def test_resolve_page_keeps_page_when_nothing_changed():
    criteria = FilterCriteria(price_min=100)
    assert resolve_page((criteria, "most-rated"), (FilterCriteria(price_min=100), "most-rated"), 3) == 3


def test_resolve_page_resets_on_criteria_change():
    assert resolve_page((FilterCriteria(), None), (FilterCriteria(search_term="a"), None), 3) == 1


def test_resolve_page_resets_on_sort_change():
    criteria = FilterCriteria()
    assert resolve_page((criteria, None), (criteria, "price-low-high"), 4) == 1


def test_resolve_page_treats_unknown_sort_as_none():
    criteria = FilterCriteria()
    assert resolve_page((criteria, None), (criteria, "bogus"), 2) == 2


def test_resolve_page_first_query():
    assert resolve_page(None, (FilterCriteria(), None), 5) == 1


def test_new_search_goes_back_to_first_page(catalog):
    # The listing screen's flow: page 3 open, then the user types a search
    criteria, sort_option = FilterCriteria(), SortOption.price_low_high
    assert query_catalog(catalog, criteria, sort_option, page=3, page_size=2).items[0].id == 5

    searched = FilterCriteria(search_term="place")
    page = resolve_page((criteria, sort_option), (searched, sort_option), 3)
    result = query_catalog(catalog, searched, sort_option, page=page, page_size=2)

    assert result.page == 1
    assert [i.id for i in result.items] == [1, 2]


def test_blank_form_criteria_behave_as_none(catalog):
    criteria = FilterCriteria.model_validate({"searchTerm": "", "priceMin": " "})
    assert criteria.is_empty()
    assert query_catalog(catalog, criteria).items == catalog
