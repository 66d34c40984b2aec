import pytest

from barbatch.models import Cocktail
from barbatch.settings import settings

MULE = {
    "name": "Moscow Mule",
    "method": "Build",
    "glass_type": "Highball",
    "menu_price": 14,
    "ingredients": [
        {"name": "Vodka", "amount": "2", "unit": "oz", "order_unit": "liters"},
        {"name": "Ginger Beer", "amount": "4", "unit": "oz", "preferred_unit": "12oz can"},
        {"name": "Lime Wedge", "amount": "1", "unit": "each", "preferred_unit": "each"},
    ],
}


def test_create_cocktail_estimates_abv(client):
    response = client.post("/api/cocktails", json=MULE)
    assert response.status_code == 201, response.text

    data = response.json()
    assert data["name"] == "Moscow Mule"
    assert data["abv"] == 13.3
    assert data["is_active"] is True
    assert [i["name"] for i in data["ingredients"]] == ["Vodka", "Ginger Beer", "Lime Wedge"]
    # order_unit is accepted as an alias
    assert data["ingredients"][0]["preferred_unit"] == "liters"


def test_create_cocktail_keeps_explicit_abv(client):
    response = client.post("/api/cocktails", json={**MULE, "abv": 11.5})
    assert response.json()["abv"] == 11.5


def test_create_duplicate_name_conflicts(client):
    assert client.post("/api/cocktails", json=MULE).status_code == 201
    response = client.post("/api/cocktails", json=MULE)
    assert response.status_code == 409


def test_create_requires_ingredients(client):
    response = client.post("/api/cocktails", json={**MULE, "ingredients": []})
    assert response.status_code == 422


def test_list_and_filter(client, vodka_soda):
    client.post("/api/cocktails", json=MULE)

    data = client.get("/api/cocktails").json()
    assert data["total"] == 2
    assert [c["name"] for c in data["cocktails"]] == ["Moscow Mule", "Vodka Soda"]

    data = client.get("/api/cocktails", params={"liquor": "ginger"}).json()
    assert [c["name"] for c in data["cocktails"]] == ["Moscow Mule"]


def test_search_matches_ingredients(client, vodka_soda):
    client.post("/api/cocktails", json=MULE)

    data = client.get("/api/cocktails/search", params={"q": "soda"}).json()
    assert [c["name"] for c in data["cocktails"]] == ["Vodka Soda"]

    data = client.get("/api/cocktails/search", params={"q": "vodka"}).json()
    assert data["total"] == 2


def test_liquors_excludes_mixers(client):
    client.post("/api/cocktails", json=MULE)
    data = client.get("/api/cocktails/liquors").json()
    assert data["liquors"] == ["Vodka"]


def test_get_cocktail(client, vodka_soda):
    response = client.get(f"/api/cocktails/{vodka_soda.id}")
    assert response.status_code == 200
    assert response.json()["menu_price"] == 12

    assert client.get("/api/cocktails/9999").status_code == 404


def test_patch_ingredients_reestimates_abv(client):
    created = client.post("/api/cocktails", json=MULE).json()

    response = client.patch(
        f"/api/cocktails/{created['id']}",
        json={"ingredients": [{"name": "Vodka", "amount": "2 oz"}]},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["abv"] == 40.0
    assert len(data["ingredients"]) == 1


def test_patch_only_set_fields(client):
    created = client.post("/api/cocktails", json=MULE).json()

    data = client.patch(f"/api/cocktails/{created['id']}", json={"featured": True}).json()
    assert data["featured"] is True
    assert data["menu_price"] == 14
    assert data["abv"] == 13.3


def test_delete_without_configured_password(client, vodka_soda, monkeypatch):
    monkeypatch.setattr(settings, "delete_recipe_password", None)
    response = client.request("DELETE", f"/api/cocktails/{vodka_soda.id}", json={"password": "anything"})
    assert response.status_code == 500


def test_delete_with_wrong_password(client, vodka_soda, delete_password):
    response = client.request("DELETE", f"/api/cocktails/{vodka_soda.id}", json={"password": "nope"})
    assert response.status_code == 401

    response = client.delete(f"/api/cocktails/{vodka_soda.id}")
    assert response.status_code == 401


def test_delete_cocktail(client, db_session, vodka_soda, delete_password):
    cocktail_id = vodka_soda.id
    response = client.request("DELETE", f"/api/cocktails/{cocktail_id}", json={"password": delete_password})
    assert response.status_code == 200
    assert response.json() == {"success": True}

    db_session.expire_all()
    assert db_session.query(Cocktail).filter_by(id=cocktail_id).first() is None
    assert client.get(f"/api/cocktails/{cocktail_id}").status_code == 404


def test_delete_missing_cocktail(client, delete_password):
    response = client.request("DELETE", "/api/cocktails/9999", json={"password": delete_password})
    assert response.status_code == 404


def test_ingredient_suggestions(client, vodka_soda):
    client.post("/api/cocktails", json=MULE)

    data = client.get("/api/ingredients").json()["ingredients"]
    by_name = {i["name"]: i["order_unit"] for i in data}
    assert by_name["Vodka"] == "liters"
    assert by_name["Ginger Beer"] == "12oz can"
    assert by_name["Lime Wedge"] == "each"


@pytest.mark.parametrize("field", ["name", "method", "featured", "is_active"])
def test_patch_rejects_null_for_required_fields(client, field):
    created = client.post("/api/cocktails", json=MULE).json()

    response = client.patch(f"/api/cocktails/{created['id']}", json={field: None})
    assert response.status_code == 422

    data = client.get(f"/api/cocktails/{created['id']}").json()
    assert data["name"] == "Moscow Mule"
    assert data["method"] == "Build"


def test_patch_allows_null_for_optional_fields(client):
    created = client.post("/api/cocktails", json=MULE).json()

    response = client.patch(f"/api/cocktails/{created['id']}", json={"glass_type": None, "menu_price": None})
    assert response.status_code == 200
    assert response.json()["glass_type"] is None
    assert response.json()["menu_price"] is None


def test_order_unit_must_be_known(client):
    bad = {**MULE, "ingredients": [{"name": "Vodka", "amount": "2 oz", "order_unit": "barrels"}]}
    assert client.post("/api/cocktails", json=bad).status_code == 422


def test_order_unit_is_normalized(client):
    body = {
        **MULE,
        "ingredients": [
            {"name": "Vodka", "amount": "2 oz", "order_unit": "Liters"},
            {"name": "Ginger Beer", "amount": "4 oz", "order_unit": "12oz cans"},
            {"name": "Lime Wedge", "amount": "1 each", "order_unit": ""},
        ],
    }
    data = client.post("/api/cocktails", json=body).json()
    assert [i["preferred_unit"] for i in data["ingredients"]] == ["liters", "12oz can", None]
