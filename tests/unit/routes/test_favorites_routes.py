def test_add_favorite(client):
    response = client.post("/favorites/3")

    assert response.status_code == 201
    assert response.json()["message"] == "Added to favorites"
    assert response.json()["exercise"]["id"] == 3


def test_add_favorite_twice_is_rejected(client, favorites_repo):
    client.post("/favorites/3")

    response = client.post("/favorites/3")

    assert response.status_code == 400
    assert response.json()["error"] == "Exercise already in favorites"
    assert favorites_repo.count() == 1


def test_add_favorite_unknown_exercise(client, favorites_repo):
    response = client.post("/favorites/999")

    assert response.status_code == 404
    assert favorites_repo.count() == 0


def test_list_favorites_in_catalog_order(client):
    client.post("/favorites/7")
    client.post("/favorites/2")

    body = client.get("/favorites").json()

    assert [ex["id"] for ex in body["favorites"]] == [2, 7]
    assert body["count"] == 2


def test_remove_favorite(client):
    client.post("/favorites/3")

    response = client.delete("/favorites/3")

    assert response.status_code == 200
    assert response.json() == {"message": "Removed from favorites", "exerciseId": 3}
    assert client.get("/favorites").json()["count"] == 0


def test_remove_missing_favorite(client):
    response = client.delete("/favorites/3")

    assert response.status_code == 404
    assert response.json()["error"] == "Exercise not in favorites"
