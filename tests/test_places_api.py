def _create(client, auth, **body):
    body.setdefault("name", "Sushi Dai")
    r = client.post("/api/places", json=body, headers=auth)
    assert r.status_code == 201, r.text
    return r.json()


def test_create_and_get(client, auth):
    created = _create(
        client, auth,
        address="Toyosu Market", latitude=35.645, longitude=139.785,
        genreParent="japanese", features=["wifi_yes", "wifi_yes", "takeout_yes"],
        googlePlaceId="ChIJ-test", rating=4.5, reviewCount=1200,
    )
    assert created["status"] == "none"
    assert created["features"] == ["wifi_yes", "takeout_yes"]
    assert created["genreParent"] == "japanese"
    assert created["userRating"] is None

    r = client.get(f"/api/places/{created['id']}", headers=auth)
    assert r.status_code == 200
    assert r.json()["googlePlaceId"] == "ChIJ-test"


def test_create_requires_name(client, auth):
    r = client.post("/api/places", json={"address": "somewhere"}, headers=auth)
    assert r.status_code == 422


def test_create_rejects_bad_latitude(client, auth):
    r = client.post("/api/places", json={"name": "x", "latitude": 120}, headers=auth)
    assert r.status_code == 422


def test_list_newest_first_and_scoped(client, auth, other_auth):
    first = _create(client, auth, name="first")
    second = _create(client, auth, name="second")
    _create(client, other_auth, name="other")

    r = client.get("/api/places", headers=auth)
    assert r.status_code == 200
    assert [p["id"] for p in r.json()] == [second["id"], first["id"]]


def test_foreign_place_is_not_found(client, auth, other_auth):
    theirs = _create(client, other_auth)
    assert client.get(f"/api/places/{theirs['id']}", headers=auth).status_code == 404
    assert client.patch(f"/api/places/{theirs['id']}", json={"name": "x"}, headers=auth).status_code == 404
    assert client.delete(f"/api/places/{theirs['id']}", headers=auth).status_code == 404
    assert client.get("/api/places/999", headers=auth).status_code == 404


def test_patch_updates_only_given_fields(client, auth):
    place = _create(client, auth, summary="old", genre="Sushi")
    r = client.patch(f"/api/places/{place['id']}", json={"summary": "new", "features": ["a", "a"]}, headers=auth)
    assert r.status_code == 200
    body = r.json()
    assert body["summary"] == "new"
    assert body["genre"] == "Sushi"
    assert body["features"] == ["a"]


def test_status_visited_stamps_visited_at_once(client, auth):
    place = _create(client, auth)
    r = client.put(f"/api/places/{place['id']}/status", json={"status": "want_to_go"}, headers=auth)
    assert r.status_code == 200
    assert r.json()["visitedAt"] is None

    r = client.put(f"/api/places/{place['id']}/status", json={"status": "visited"}, headers=auth)
    visited_at = r.json()["visitedAt"]
    assert visited_at is not None

    client.put(f"/api/places/{place['id']}/status", json={"status": "none"}, headers=auth)
    r = client.put(f"/api/places/{place['id']}/status", json={"status": "visited"}, headers=auth)
    assert r.json()["visitedAt"] == visited_at


def test_status_rejects_unknown_value(client, auth):
    place = _create(client, auth)
    r = client.put(f"/api/places/{place['id']}/status", json={"status": "loved"}, headers=auth)
    assert r.status_code == 422


def test_rating_set_and_clear(client, auth):
    place = _create(client, auth)
    url = f"/api/places/{place['id']}/rating"

    r = client.put(url, json={"userRating": 4, "userNote": "great tuna"}, headers=auth)
    assert r.status_code == 200
    assert r.json()["userRating"] == 4
    assert r.json()["userNote"] == "great tuna"

    r = client.put(url, json={"userRating": None}, headers=auth)
    assert r.json()["userRating"] is None
    assert r.json()["userNote"] == "great tuna"


def test_rating_out_of_range(client, auth):
    place = _create(client, auth)
    for value in (0, 6):
        r = client.put(f"/api/places/{place['id']}/rating", json={"userRating": value}, headers=auth)
        assert r.status_code == 422


def test_delete_removes_memberships(client, auth):
    place = _create(client, auth)
    lst = client.post("/api/lists", json={"name": "Favourites"}, headers=auth).json()
    client.post(f"/api/lists/{lst['id']}/places", json={"placeId": place["id"]}, headers=auth)

    r = client.delete(f"/api/places/{place['id']}", headers=auth)
    assert r.status_code == 200
    assert r.json() == {"success": True}
    assert client.get(f"/api/places/{place['id']}", headers=auth).status_code == 404

    detail = client.get(f"/api/lists/{lst['id']}", headers=auth).json()
    assert detail["placeCount"] == 0
    assert detail["places"] == []


def test_lists_for_place(client, auth):
    place = _create(client, auth)
    a = client.post("/api/lists", json={"name": "A"}, headers=auth).json()
    client.post("/api/lists", json={"name": "B"}, headers=auth)
    client.post(f"/api/lists/{a['id']}/places", json={"placeId": place["id"]}, headers=auth)

    r = client.get(f"/api/places/{place['id']}/lists", headers=auth)
    assert r.status_code == 200
    assert [lst["name"] for lst in r.json()] == ["A"]
    assert r.json()[0]["placeCount"] == 1
    assert client.get("/api/places/999/lists", headers=auth).status_code == 404


def test_patch_null_name_rejected(client, auth):
    place = _create(client, auth, name="Keep me")
    r = client.patch(f"/api/places/{place['id']}", json={"name": None}, headers=auth)
    assert r.status_code == 422

    r = client.get(f"/api/places/{place['id']}", headers=auth)
    assert r.json()["name"] == "Keep me"
