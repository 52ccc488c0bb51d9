# tests/test_products.py


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "catalog-api"}


def test_create_product_with_defaults(client):
    resp = client.post("/products", json={"name": "Pro plan", "price": 49})
    assert resp.status_code == 201
    assert resp.json() == {
        "product": {"id": "p1", "name": "Pro plan", "price": 49, "category": "general"}
    }


def test_create_product_price_defaults_to_zero(client):
    resp = client.post("/products", json={"name": "Free tier", "category": "subscriptions"})
    assert resp.status_code == 201
    product = resp.json()["product"]
    assert product["price"] == 0
    assert product["category"] == "subscriptions"


def test_create_product_keeps_float_price(client):
    resp = client.post("/products", json={"name": "Addon", "price": 9.99})
    assert resp.status_code == 201
    assert resp.json()["product"]["price"] == 9.99


def test_product_ids_are_unique_and_increasing(client):
    ids = [
        client.post("/products", json={"name": f"item {i}"}).json()["product"]["id"]
        for i in range(5)
    ]
    assert ids == ["p1", "p2", "p3", "p4", "p5"]
    assert len(set(ids)) == 5


def test_create_product_requires_name(client, store):
    for body in ({}, {"name": ""}, {"price": 10}):
        resp = client.post("/products", json=body)
        assert resp.status_code == 400
        assert resp.json() == {"error": "name is required"}
    assert store.products == {}


def test_create_product_without_body(client, store):
    resp = client.post("/products")
    assert resp.status_code == 400
    assert resp.json() == {"error": "name is required"}
    assert store.products == {}


def test_create_product_rejects_non_numeric_price(client, store):
    for price in ("49", None, True, [1], {"amount": 1}):
        resp = client.post("/products", json={"name": "Bad", "price": price})
        assert resp.status_code == 400
        assert resp.json() == {"error": "price must be a number"}
    assert store.products == {}


def test_create_product_rejects_nan_price(client, store):
    resp = client.post(
        "/products",
        content='{"name": "Bad", "price": NaN}',
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json() == {"error": "price must be a number"}
    assert store.products == {}


def test_rejected_product_does_not_consume_an_id(client):
    client.post("/products", json={"name": "Bad", "price": "x"})
    resp = client.post("/products", json={"name": "Good"})
    assert resp.json()["product"]["id"] == "p1"


def test_malformed_json_is_a_validation_error(client):
    resp = client.post(
        "/products", content="{not json", headers={"Content-Type": "application/json"}
    )
    assert resp.status_code == 400
    assert "error" in resp.json()


def test_list_all_products_in_insertion_order(client):
    for name in ("b", "a", "c"):
        client.post("/products", json={"name": name})

    resp = client.get("/products/all")
    assert resp.status_code == 200
    assert [p["name"] for p in resp.json()["products"]] == ["b", "a", "c"]


def test_list_products_empty(client):
    assert client.get("/products/all").json() == {"products": []}
    assert client.get("/products").json() == {"products": []}


def test_filter_by_category(client):
    client.post("/products", json={"name": "Pro", "category": "subscriptions"})
    client.post("/products", json={"name": "Mug"})
    client.post("/products", json={"name": "Team", "category": "subscriptions"})
    client.post("/products", json={"name": "Shirt", "category": "Subscriptions"})

    resp = client.get("/products", params={"category": "subscriptions"})
    assert resp.status_code == 200
    assert [p["id"] for p in resp.json()["products"]] == ["p1", "p3"]

    # filtering does not change what is stored
    assert [p["id"] for p in client.get("/products/all").json()["products"]] == [
        "p1", "p2", "p3", "p4",
    ]


def test_filter_without_category_returns_all(client):
    client.post("/products", json={"name": "Pro", "category": "subscriptions"})
    client.post("/products", json={"name": "Mug"})

    assert len(client.get("/products").json()["products"]) == 2
    assert len(client.get("/products", params={"category": ""}).json()["products"]) == 2


def test_get_product(client):
    client.post("/products", json={"name": "Pro plan", "price": 49})

    resp = client.get("/products/p1")
    assert resp.status_code == 200
    assert resp.json()["product"]["name"] == "Pro plan"


def test_get_product_not_found(client):
    resp = client.get("/products/p404")
    assert resp.status_code == 404
    assert resp.json() == {"error": "product not found"}


def test_create_product_with_huge_integer_price(client):
    price = int("9" * 400)
    resp = client.post("/products", json={"name": "Big", "price": price})
    assert resp.status_code == 201
    assert resp.json()["product"]["price"] == price


def test_create_product_rejects_non_string_fields(client, store):
    resp = client.post("/products", json={"name": 123})
    assert resp.status_code == 400
    assert resp.json() == {"error": "name must be a string"}

    resp = client.post("/products", json={"name": "Mug", "category": 5})
    assert resp.status_code == 400
    assert resp.json() == {"error": "category must be a string"}
    assert store.products == {}
