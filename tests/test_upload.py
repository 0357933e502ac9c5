import base64
from pathlib import Path

PNG = b"\x89PNG\r\n\x1a\nfake-image"


def upload(client, headers, game_id, file_name="cover.png", data=PNG):
    return client.post("/api/upload/game-cover", json={
        "gameId": game_id,
        "fileData": base64.b64encode(data).decode(),
        "fileName": file_name,
    }, headers=headers)


def test_upload_game_cover(client, settings, admin):
    game = client.post("/api/games", json={"name": "Pathfinder"}, headers=admin).json()
    r = upload(client, admin, game["id"])
    assert r.status_code == 200
    body = r.json()
    assert body["key"].startswith(f"games/{game['id']}/cover-")
    assert body["key"].endswith("-cover.png")
    assert body["url"] == f"{settings.UPLOAD_URL_PREFIX}/{body['key']}"
    assert (Path(settings.UPLOAD_DIR) / body["key"]).read_bytes() == PNG

    assert client.get(f"/api/games/{game['id']}", headers=admin).json()["imageUrl"] == body["url"]
    assert client.get(body["url"]).content == PNG


def test_upload_strips_directories_from_file_name(client, settings, admin):
    r = upload(client, admin, 1, file_name="../../etc/evil.png")
    assert r.status_code == 200
    key = r.json()["key"]
    assert ".." not in key
    assert key.startswith("games/1/cover-") and key.endswith("-evil.png")


def test_upload_forbidden_for_user(client, settings, player):
    r = upload(client, player, 1)
    assert r.status_code == 403
    assert not Path(settings.UPLOAD_DIR, "games").exists()


def test_upload_rejects_bad_base64(client, player):
    r = client.post("/api/upload/game-cover", json={"gameId": 1, "fileData": "%%%not base64", "fileName": "a.jpg"},
                    headers=player)
    assert r.status_code == 422


def test_upload_url_escapes_file_name(client, settings, admin):
    r = upload(client, admin, 1, file_name="my cover #1.png")
    assert r.status_code == 200
    body = r.json()
    assert body["key"].endswith("-my cover #1.png")
    assert "%20" in body["url"] and "%23" in body["url"]
    assert "#" not in body["url"]
    assert (Path(settings.UPLOAD_DIR) / body["key"]).read_bytes() == PNG
    assert client.get(body["url"]).content == PNG
