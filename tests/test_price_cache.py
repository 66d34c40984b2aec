import json
from unittest.mock import patch

from redis.exceptions import ConnectionError as RedisConnectionError

from barbatch.services.price_table import PRICE_CACHE_KEY, load_price_map


def test_liquor_prices_crud(client):
    response = client.put("/api/liquor-prices/Vodka", json={"price": 22})
    assert response.status_code == 200
    assert response.json() == {"name": "Vodka", "price": 22, "bottle_size_ml": 750}

    client.put("/api/liquor-prices/Angostura Bitters", json={"price": 12, "bottle_size_ml": 118})
    client.put("/api/liquor-prices/Vodka", json={"price": 25})

    data = client.get("/api/liquor-prices").json()
    assert set(data) == {"vodka", "angostura bitters"}
    assert data["vodka"]["price"] == 25
    assert data["angostura bitters"]["bottle_size_ml"] == 118


def test_price_table_is_cached(db_session, vodka_price, mock_redis):
    prices = load_price_map(db_session)
    assert prices["vodka"].price == 22

    cached = json.loads(mock_redis.get(PRICE_CACHE_KEY))
    assert cached["vodka"] == {"price": 22.0, "bottle_size_ml": 750.0}


def test_upsert_invalidates_cache(client, vodka_soda, vodka_price):
    body = {"lines": [{"cocktail_id": vodka_soda.id, "servings": 100}], "misc_cost_percent": 0}
    before = client.post("/api/batch/financials", json=body).json()["cost"]

    client.put("/api/liquor-prices/Vodka", json={"price": 44})
    after = client.post("/api/batch/financials", json=body).json()["cost"]

    assert abs(after - 2 * before) < 1e-6


def test_price_table_falls_back_to_database(db_session, vodka_price):
    with patch("barbatch.services.price_table.get_or_set_json_sync", side_effect=RedisConnectionError("down")):
        prices = load_price_map(db_session)
    assert prices["vodka"].price == 22


def test_ready(client):
    assert client.get("/api/ready").json() == {"ok": True, "redis_ok": True}


def test_dev_seed(client):
    response = client.post("/api/dev/seed")
    assert response.status_code == 200
    data = response.json()
    assert len(data["cocktails_created"]) == 5
    assert data["prices_upserted"] == 15

    # Second run leaves existing cocktails alone
    assert client.post("/api/dev/seed").json()["cocktails_created"] == []

    assert client.get("/api/cocktails").json()["total"] == 5
    assert client.get("/api/liquor-prices").json()["pisco"]["price"] == 25


def test_upsert_matches_names_case_insensitively(client, vodka_soda):
    client.put("/api/liquor-prices/Vodka", json={"price": 22})
    client.put("/api/liquor-prices/vodka", json={"price": 30})
    response = client.put("/api/liquor-prices/VODKA", json={"price": 40})
    assert response.json()["name"] == "Vodka"

    data = client.get("/api/liquor-prices").json()
    assert data == {"vodka": {"name": "Vodka", "price": 40, "bottle_size_ml": 750}}

    body = {"lines": [{"cocktail_id": vodka_soda.id, "servings": 1}], "misc_cost_percent": 0}
    cost = client.post("/api/batch/financials", json=body).json()["cost"]
    assert abs(cost - 2 * 29.5735 / 750 * 40) < 1e-6
