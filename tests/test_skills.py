def test_create_skill_as_admin(client, admin):
    r = client.post("/api/skills", json={
        "characterId": 1, "name": "Fireball", "description": "A powerful fire spell", "level": 3,
    }, headers=admin)
    assert r.status_code == 200
    assert r.json()["level"] == 3


def test_skill_level_defaults_to_one(client, admin):
    skill = client.post("/api/skills", json={"characterId": 1, "name": "Stealth"}, headers=admin).json()
    assert skill["level"] == 1
    assert skill["description"] is None


def test_create_skill_forbidden_for_user(client, player):
    r = client.post("/api/skills", json={"characterId": 1, "name": "Test", "description": "Test", "level": 1},
                    headers=player)
    assert r.status_code == 403


def test_update_skill(client, admin, player):
    skill = client.post("/api/skills", json={"characterId": 1, "name": "Fireball", "description": "Hot"},
                        headers=admin).json()
    assert client.patch(f"/api/skills/{skill['id']}", json={"level": 5}, headers=player).status_code == 403

    r = client.patch(f"/api/skills/{skill['id']}", json={"level": 5}, headers=admin)
    assert r.json() == {"success": True}
    stored = client.get(f"/api/skills/{skill['id']}").json()
    assert stored["level"] == 5
    assert stored["description"] == "Hot"


def test_delete_skill(client, admin, player):
    skill = client.post("/api/skills", json={"characterId": 1, "name": "Parry"}, headers=admin).json()
    assert client.delete(f"/api/skills/{skill['id']}", headers=player).status_code == 403
    assert client.delete(f"/api/skills/{skill['id']}", headers=admin).json() == {"success": True}
    assert client.get(f"/api/skills/{skill['id']}").json() is None


def test_list_skills_by_character(client, admin):
    assert client.get("/api/characters/7/skills").json() == []
    client.post("/api/skills", json={"characterId": 7, "name": "Tracking"}, headers=admin)
    assert [s["name"] for s in client.get("/api/characters/7/skills").json()] == ["Tracking"]
