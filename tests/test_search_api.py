import math

OTHER_USER_ID = 2

ORIGIN = {"lat": 35.6812, "lng": 139.7671}
KM_PER_DEG_LAT = 6371.0 * math.pi / 180.0


def _lat_north(km):
    return ORIGIN["lat"] + km / KM_PER_DEG_LAT


def _search(client, auth, **body):
    r = client.post("/api/search/filter", json=body, headers=auth)
    assert r.status_code == 200, r.text
    return r.json()


def test_requires_user(client):
    assert client.post("/api/search/filter", json={}).status_code == 401


def test_non_integer_user_id_rejected(client):
    r = client.post("/api/search/filter", json={}, headers={"X-User-Id": "alice"})
    assert r.status_code == 422


def test_no_constraints_returns_only_callers_places(client, auth, make_place):
    mine = {make_place(f"mine {i}") for i in range(3)}
    make_place("theirs", user_id=OTHER_USER_ID)

    data = _search(client, auth)
    assert {p["id"] for p in data["places"]} == mine
    assert data["total"] == 3
    assert data["page"] == 1
    assert data["limit"] == 20
    assert data["hasMore"] is False
    assert all(p["distance"] is None for p in data["places"])


def test_total_stable_across_pages(client, auth, make_place):
    for i in range(15):
        make_place(f"place {i:02d}", rating=3.0)

    first = _search(client, auth, page=1, limit=10, sort="rating")
    second = _search(client, auth, page=2, limit=10, sort="rating")
    beyond = _search(client, auth, page=5, limit=10, sort="rating")

    assert first["total"] == second["total"] == beyond["total"] == 15
    assert len(first["places"]) == 10 and first["hasMore"] is True
    assert len(second["places"]) == 5 and second["hasMore"] is False
    assert beyond["places"] == [] and beyond["hasMore"] is False
    ids = [p["id"] for p in first["places"] + second["places"]]
    assert len(set(ids)) == 15
    assert ids == sorted(ids)


def test_status_filter(client, auth, make_place):
    want = make_place("want", status="want_to_go")
    make_place("visited", status="visited")
    make_place("none")

    data = _search(client, auth, status="want_to_go")
    assert [p["id"] for p in data["places"]] == [want]
    assert data["places"][0]["status"] == "want_to_go"


def test_invalid_status_rejected(client, auth):
    r = client.post("/api/search/filter", json={"status": "favourite"}, headers=auth)
    assert r.status_code == 422


def test_radius_keeps_near_drops_far_keeps_unknown(client, auth, make_place):
    near = make_place("near", latitude=_lat_north(0.5), longitude=ORIGIN["lng"])
    make_place("far", latitude=_lat_north(1.5), longitude=ORIGIN["lng"])
    unknown = make_place("unknown")

    data = _search(client, auth, location=ORIGIN, distanceRadius=1000, sort="distance")
    assert [p["id"] for p in data["places"]] == [near, unknown]
    assert abs(data["places"][0]["distance"] - 0.5) < 0.001
    assert data["places"][1]["distance"] is None


def test_distance_sort_unknown_last(client, auth, make_place):
    unknown = make_place("unknown")
    two = make_place("two km", latitude=_lat_north(2.0), longitude=ORIGIN["lng"])
    one = make_place("one km", latitude=_lat_north(1.0), longitude=ORIGIN["lng"])

    data = _search(client, auth, location=ORIGIN, sort="distance")
    assert [p["id"] for p in data["places"]] == [one, two, unknown]
    distances = [p["distance"] for p in data["places"] if p["distance"] is not None]
    assert distances == sorted(distances)


def test_features_contains_all(client, auth, make_place):
    both = make_place("both", features=["wifi_yes", "power_yes", "takeout_yes"])
    make_place("one", features=["wifi_yes"])
    make_place("none")

    data = _search(client, auth, features=["wifi_yes", "power_yes"])
    assert [p["id"] for p in data["places"]] == [both]


def test_genre_prefecture_and_budget(client, auth, make_place):
    match = make_place(
        "sushi", genre_parent="japanese", genre_child="sushi", prefecture="tokyo",
        budget_lunch="lunch_2", budget_dinner="dinner_4",
    )
    make_place("osaka sushi", genre_parent="japanese", genre_child="sushi", prefecture="osaka", budget_lunch="lunch_2")
    make_place("cafe", genre_parent="cafe", prefecture="tokyo", budget_lunch="lunch_2")

    data = _search(
        client, auth,
        genreParent="japanese", genreChild="sushi", prefecture="tokyo",
        budgetType="lunch", budgetBand="lunch_2",
    )
    assert [p["id"] for p in data["places"]] == [match]

    data = _search(client, auth, budgetType="dinner", budgetBand="dinner_1")
    assert data["total"] == 0


def test_query_matches_name_genre_and_summary(client, auth, make_place):
    by_name = make_place("Sushi Dai")
    by_genre = make_place("Counter", genre="sushi bar")
    by_summary = make_place("Omakase", summary="Quiet SUSHI counter")
    make_place("Ramen Jiro")

    data = _search(client, auth, query="sushi")
    assert {p["id"] for p in data["places"]} == {by_name, by_genre, by_summary}


def test_result_shape(client, auth, make_place):
    make_place(
        "Shaped", address="1-1 Marunouchi", latitude=ORIGIN["lat"], longitude=ORIGIN["lng"],
        genre="Italian", rating=4.2, review_count=88, features=["wifi_yes"],
    )
    item = _search(client, auth, location=ORIGIN)["places"][0]
    assert item["name"] == "Shaped"
    assert item["reviewCount"] == 88
    assert item["features"] == ["wifi_yes"]
    assert item["distance"] == 0.0
    assert item["googleMapsUrl"].startswith("https://www.google.com/maps/dir/?api=1&destination=")


def test_simple_search_uses_same_pipeline(client, auth, make_place):
    hit = make_place("Wine bar", status="want_to_go", features=["wifi_yes", "power_yes"])
    make_place("Wine shop", features=["wifi_yes"])
    make_place("Tea house", status="want_to_go")

    r = client.get(
        "/api/places/search",
        params=[("q", "wine"), ("features", "wifi_yes"), ("features", "power_yes"), ("status", "want_to_go")],
        headers=auth,
    )
    assert r.status_code == 200
    assert [p["id"] for p in r.json()["places"]] == [hit]


def test_query_wildcards_match_literally(client, auth, make_place):
    literal = make_place("100% Organic")
    underscore = make_place("Bar_None")
    make_place("Plain Cafe")

    assert [p["id"] for p in _search(client, auth, query="%")["places"]] == [literal]
    assert [p["id"] for p in _search(client, auth, query="_")["places"]] == [underscore]


def test_budget_band_wildcards_match_literally(client, auth, make_place):
    match = make_place("exact", budget_lunch="lunch_2")
    make_place("lookalike", budget_lunch="lunchX2")

    data = _search(client, auth, budgetType="lunch", budgetBand="lunch_2")
    assert [p["id"] for p in data["places"]] == [match]
