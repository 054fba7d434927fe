from collections.abc import Iterable
from functools import cmp_to_key

from homestay.schemas.catalog import CatalogItem, SortOption

# option -> (attribute, descending)
_SORT_KEYS: dict[SortOption, tuple[str, bool]] = {
    SortOption.most_rated: ("num_of_rating", True),
    SortOption.least_rated: ("num_of_rating", False),
    SortOption.highest_rating: ("rating", True),
    SortOption.lowest_rating: ("rating", False),
    SortOption.price_low_high: ("price", False),
    SortOption.price_high_low: ("price", True),
}


def parse_sort_option(value: str | SortOption | None) -> SortOption | None:
    """Map a raw sort value to a SortOption; unknown values mean no sorting."""
    if value is None or isinstance(value, SortOption):
        return value
    try:
        return SortOption(value.strip().lower())
    except ValueError:
        return None


def compare(a: CatalogItem, b: CatalogItem, option: SortOption | str | None) -> int:
    """Three-way comparison returning -1, 0 or 1."""
    option = parse_sort_option(option)
    if option is None:
        return 0

    attr, descending = _SORT_KEYS[option]
    left, right = getattr(a, attr), getattr(b, attr)
    if descending:
        left, right = right, left
    return (left > right) - (left < right)


def sort_items(items: Iterable[CatalogItem], option: SortOption | str | None) -> list[CatalogItem]:
    """Return a new list ordered by option. Items with equal keys keep input order."""
    option = parse_sort_option(option)
    items = list(items)
    if option is None:
        return items
    # sorted() is stable
    return sorted(items, key=cmp_to_key(lambda a, b: compare(a, b, option)))
