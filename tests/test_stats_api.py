from datetime import datetime


def test_me(client, auth):
    r = client.get("/api/users/me", headers=auth)
    assert r.status_code == 200
    assert r.json() == {"id": 1}


def test_me_requires_user(client):
    assert client.get("/api/users/me").status_code == 401


def test_stats_counts(client, auth, make_place):
    make_place("a", status="visited")
    make_place("b", status="want_to_go")
    make_place("c", status="want_to_go")
    make_place("d")
    make_place("theirs", user_id=2, status="visited")
    client.post("/api/lists", json={"name": "L"}, headers=auth)

    r = client.get("/api/users/me/stats", headers=auth)
    assert r.status_code == 200
    assert r.json() == {"totalPlaces": 4, "totalLists": 1, "visitedCount": 1, "wantToGoCount": 2}


def test_stats_empty_user(client, auth):
    r = client.get("/api/users/me/stats", headers=auth)
    assert r.json() == {"totalPlaces": 0, "totalLists": 0, "visitedCount": 0, "wantToGoCount": 0}


def test_detailed_stats(client, auth, make_place):
    make_place("a", genre_parent="japanese", user_rating=5, status="visited", visited_at=datetime(2024, 3, 1))
    make_place("b", genre_parent="japanese", user_rating=3, status="visited", visited_at=datetime(2024, 5, 1))
    make_place("c", genre="Italian", user_rating=4)
    make_place("d", genre_parent="cafe")
    make_place("e", status="visited")

    data = client.get("/api/users/me/detailed-stats", headers=auth).json()

    assert data["ratingDistribution"] == [
        {"range": "1", "count": 0},
        {"range": "2", "count": 0},
        {"range": "3", "count": 1},
        {"range": "4", "count": 1},
        {"range": "5", "count": 1},
    ]
    assert data["genreStats"] == [
        {"genre": "japanese", "count": 2, "avgRating": 4.0},
        {"genre": "Italian", "count": 1, "avgRating": 4.0},
        {"genre": "cafe", "count": 1, "avgRating": None},
    ]
    assert [v["name"] for v in data["visitHistory"]] == ["b", "a"]
    assert data["visitHistory"][0]["visitedAt"].startswith("2024-05-01")
    assert data["avgRating"] == 4.0
    assert data["ratedCount"] == 3


def test_detailed_stats_visit_history_capped(client, auth, make_place):
    for day in range(1, 13):
        make_place(f"visit {day}", status="visited", visited_at=datetime(2024, 1, day))

    history = client.get("/api/users/me/detailed-stats", headers=auth).json()["visitHistory"]
    assert len(history) == 10
    assert history[0]["name"] == "visit 12"


def test_detailed_stats_nothing_rated(client, auth, make_place):
    make_place("a")
    data = client.get("/api/users/me/detailed-stats", headers=auth).json()
    assert data["avgRating"] is None
    assert data["ratedCount"] == 0
    assert data["genreStats"] == []
