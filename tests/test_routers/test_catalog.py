ITEMS = [
    {"id": i, "name": f"Place {i}", "price": p, "rating": r, "numOfRating": n, "maxGuests": g}
    for i, (p, r, n, g) in enumerate(
        [(100, 4.5, 12, 2), (200, 3.0, 40, 4), (300, 4.8, 7, 6), (400, 4.1, 25, 2), (500, 2.5, 3, 8)],
        start=1,
    )
]


def _ids(resp):
    return [item["id"] for item in resp.json()["items"]]


async def test_query_without_criteria(client):
    resp = await client.post("/catalog/query", json={"items": ITEMS})

    assert resp.status_code == 200
    assert _ids(resp) == [1, 2, 3, 4, 5]
    assert resp.json()["totalItems"] == 5


async def test_query_price_window(client):
    resp = await client.post(
        "/catalog/query",
        json={"items": ITEMS, "criteria": {"priceMin": 150, "priceMax": 450}},
    )
    assert [item["price"] for item in resp.json()["items"]] == [200, 300, 400]


async def test_query_sorted(client):
    resp = await client.post("/catalog/query", json={"items": ITEMS, "sort": "price-high-low"})
    assert _ids(resp) == [5, 4, 3, 2, 1]


async def test_query_form_strings_and_sort(client):
    resp = await client.post(
        "/catalog/query",
        json={
            "items": ITEMS,
            "criteria": {"searchTerm": "", "minGuests": "4", "priceMax": ""},
            "sort": "most-rated",
        },
    )
    assert _ids(resp) == [2, 3, 5]


async def test_query_unknown_sort_keeps_order(client):
    resp = await client.post("/catalog/query", json={"items": ITEMS, "sort": "newest"})
    assert _ids(resp) == [1, 2, 3, 4, 5]


async def test_query_page_uses_configured_page_size(client):
    resp = await client.post("/catalog/query", json={"items": ITEMS, "page": 2})

    data = resp.json()
    assert _ids(resp) == [3, 4]
    assert data["totalItems"] == 5
    assert data["totalPages"] == 3
    assert data["pageSize"] == 2


async def test_query_explicit_page_size(client):
    resp = await client.post(
        "/catalog/query",
        json={"items": ITEMS, "sort": "highest-rating", "page": 1, "pageSize": 3},
    )
    assert _ids(resp) == [3, 1, 4]
    assert resp.json()["totalPages"] == 2


async def test_query_unparseable_price_is_ignored(client):
    resp = await client.post(
        "/catalog/query", json={"items": ITEMS, "criteria": {"priceMin": "abc", "priceMax": "250"}}
    )
    assert resp.status_code == 200
    assert _ids(resp) == [1, 2]


async def test_query_items_with_null_numbers(client):
    items = [
        {"id": 1, "price": 100, "rating": None, "numOfRating": None, "maxGuests": None},
        {"id": 2, "price": 200, "rating": 4.0, "numOfRating": 5, "maxGuests": 3},
    ]
    resp = await client.post("/catalog/query", json={"items": items, "sort": "most-rated"})

    assert resp.status_code == 200
    assert _ids(resp) == [2, 1]
    assert resp.json()["items"][1]["rating"] == 0


async def test_query_rejects_negative_price_item(client):
    resp = await client.post("/catalog/query", json={"items": [{"id": 1, "price": -5}]})
    assert resp.status_code == 422
