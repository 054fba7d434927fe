import math
from collections.abc import Iterable

from homestay.mappers.catalog_filter import filter_items
from homestay.mappers.catalog_sort import parse_sort_option, sort_items
from homestay.schemas.catalog import CatalogItem, CatalogPage, FilterCriteria, SortOption

# Everything is recomputed on each call with no caching or debouncing. Fine
# for the few hundred listings the app loads at once; revisit beyond that.


def query_catalog(
    items: Iterable[CatalogItem],
    criteria: FilterCriteria | None = None,
    sort_option: SortOption | str | None = None,
    page: int | None = None,
    page_size: int | None = None,
) -> CatalogPage:
    """Filter, then sort, then slice one page out of the result.

    Without a page_size the whole result comes back as a single page.

    Nothing is remembered between calls. A caller that keeps a page open
    across input changes passes it through ``resolve_page`` first, so a new
    search or sort starts again on page 1. ``FilterCriteria.is_empty`` tells
    it when no filter is active (e.g. to show the "clear filters" control).
    """
    if criteria is None or criteria.is_empty():
        results = list(items)
    else:
        results = filter_items(items, criteria)
    results = sort_items(results, sort_option)
    total = len(results)

    if page_size is None:
        return CatalogPage(items=results, total_items=total, total_pages=1 if total else 0)

    page = page or 1
    start = (page - 1) * page_size
    return CatalogPage(
        items=results[start:start + page_size],
        total_items=total,
        total_pages=math.ceil(total / page_size),
        page=page,
        page_size=page_size,
    )


def resolve_page(
    previous: tuple[FilterCriteria, SortOption | str | None] | None,
    current: tuple[FilterCriteria, SortOption | str | None],
    page: int,
) -> int:
    """Page to show after an input change: back to 1 whenever criteria or sort changed."""
    if previous is None:
        return 1
    prev_criteria, prev_sort = previous
    criteria, sort_option = current
    if prev_criteria != criteria or parse_sort_option(prev_sort) != parse_sort_option(sort_option):
        return 1
    return page
