from collections.abc import Callable, Iterable

from homestay.schemas.catalog import CatalogItem, FilterCriteria

Predicate = Callable[[CatalogItem], bool]


def _contains(field: str | None, needle: str) -> bool:
    return needle in (field or "").lower()


def build_predicate(criteria: FilterCriteria) -> Predicate:
    """Compile criteria into one predicate; every provided dimension must hold.

    Unset dimensions add no check, so empty criteria match everything.
    """
    checks: list[Predicate] = []

    if criteria.search_term is not None:
        term = criteria.search_term.lower()
        checks.append(
            lambda item: _contains(item.name, term)
            or _contains(item.address, term)
            or _contains(item.description, term)
        )

    if criteria.category is not None:
        category = criteria.category.lower()
        checks.append(lambda item: (item.category or "").lower() == category)

    if criteria.price_min is not None:
        price_min = criteria.price_min
        checks.append(lambda item: item.price >= price_min)

    if criteria.price_max is not None:
        price_max = criteria.price_max
        checks.append(lambda item: item.price <= price_max)

    if criteria.min_rating is not None:
        min_rating = criteria.min_rating
        checks.append(lambda item: item.rating >= min_rating)

    if criteria.min_guests is not None:
        min_guests = criteria.min_guests
        checks.append(lambda item: item.max_guests >= min_guests)

    def predicate(item: CatalogItem) -> bool:
        return all(check(item) for check in checks)

    return predicate


def filter_items(items: Iterable[CatalogItem], criteria: FilterCriteria) -> list[CatalogItem]:
    predicate = build_predicate(criteria)
    return [item for item in items if predicate(item)]
