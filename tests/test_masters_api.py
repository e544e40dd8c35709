import pytest

from apps.places.masters import PREFECTURES, SORT_KEYS


@pytest.mark.parametrize(
    "path", ["genres", "budgets", "distances", "features", "sort-options", "prefectures"]
)
def test_master_endpoints_respond(client, path):
    r = client.get(f"/api/masters/{path}")
    assert r.status_code == 200
    assert r.json()


def test_genres_children_keyed_by_parent(client):
    data = client.get("/api/masters/genres").json()
    parent_ids = {g["id"] for g in data["parents"]}
    assert set(data["children"]) <= parent_ids


def test_budgets_by_type(client):
    data = client.get("/api/masters/budgets").json()
    assert set(data) == {"lunch", "dinner"}
    assert all(b["id"].startswith("lunch_") for b in data["lunch"])


def test_sort_options_match_ranking_keys(client):
    data = client.get("/api/masters/sort-options").json()
    assert tuple(o["id"] for o in data) == SORT_KEYS


def test_prefectures_complete():
    assert len(PREFECTURES) == 47
    assert len({p["id"] for p in PREFECTURES}) == 47
