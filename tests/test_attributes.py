def test_create_attribute_defaults(client, admin):
    r = client.post("/api/attributes", json={"characterId": 1, "name": "Strength"}, headers=admin)
    assert r.status_code == 200
    attr = r.json()
    assert (attr["value"], attr["minValue"], attr["maxValue"]) == (10, 0, 15)
    stored = client.get(f"/api/attributes/{attr['id']}").json()
    assert (stored["value"], stored["minValue"], stored["maxValue"]) == (10, 0, 15)


def test_create_attribute_with_overrides(client, admin):
    r = client.post("/api/attributes", json={
        "characterId": 1, "name": "Dexterity", "value": 15, "minValue": 3, "maxValue": 18,
    }, headers=admin)
    attr = r.json()
    assert (attr["value"], attr["minValue"], attr["maxValue"]) == (15, 3, 18)


def test_create_and_delete_forbidden_for_user(client, admin, player):
    r = client.post("/api/attributes", json={"characterId": 1, "name": "Test", "value": 10}, headers=player)
    assert r.status_code == 403
    attr = client.post("/api/attributes", json={"characterId": 1, "name": "Wisdom"}, headers=admin).json()
    assert client.delete(f"/api/attributes/{attr['id']}", headers=player).status_code == 403
    assert client.get(f"/api/attributes/{attr['id']}").json() is not None


def test_any_user_can_update_attribute_past_bounds(client, admin, player):
    attr = client.post("/api/attributes", json={"characterId": 1, "name": "Strength"}, headers=admin).json()
    r = client.patch(f"/api/attributes/{attr['id']}", json={"value": 18}, headers=player)
    assert r.status_code == 200
    stored = client.get(f"/api/attributes/{attr['id']}").json()
    assert stored["value"] == 18
    assert stored["maxValue"] == 15


def test_user_can_change_attribute_bounds(client, admin, player):
    attr = client.post("/api/attributes", json={"characterId": 1, "name": "Charisma"}, headers=admin).json()
    client.patch(f"/api/attributes/{attr['id']}", json={"minValue": -5, "name": "Presence"}, headers=player)
    stored = client.get(f"/api/attributes/{attr['id']}").json()
    assert stored["minValue"] == -5
    assert stored["name"] == "Presence"
    assert stored["value"] == 10


def test_update_attribute_requires_session(client, admin):
    attr = client.post("/api/attributes", json={"characterId": 1, "name": "Strength"}, headers=admin).json()
    assert client.patch(f"/api/attributes/{attr['id']}", json={"value": 11}).status_code == 401


def test_update_attribute_rejects_null_value(client, admin):
    attr = client.post("/api/attributes", json={"characterId": 1, "name": "Strength"}, headers=admin).json()
    r = client.patch(f"/api/attributes/{attr['id']}", json={"value": None}, headers=admin)
    assert r.status_code == 422


def test_list_by_character(client, admin):
    assert client.get("/api/characters/1/attributes").json() == []
    client.post("/api/attributes", json={"characterId": 1, "name": "Strength"}, headers=admin)
    client.post("/api/attributes", json={"characterId": 2, "name": "Agility"}, headers=admin)
    names = [a["name"] for a in client.get("/api/characters/1/attributes").json()]
    assert names == ["Strength"]
