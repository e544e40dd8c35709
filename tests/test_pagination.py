from apps.places.services.pagination import paginate


def test_second_page_of_fifteen():
    page = paginate(list(range(1, 16)), page=2, limit=10)
    assert page.items == [11, 12, 13, 14, 15]
    assert page.total == 15
    assert page.has_more is False


def test_first_page_has_more():
    page = paginate(list(range(1, 16)), page=1, limit=10)
    assert page.items == list(range(1, 11))
    assert page.has_more is True


def test_exact_boundary_has_no_more():
    page = paginate(list(range(20)), page=2, limit=10)
    assert len(page.items) == 10
    assert page.has_more is False


def test_page_past_end_is_empty():
    page = paginate(list(range(5)), page=3, limit=10)
    assert page.items == []
    assert page.total == 5
    assert page.has_more is False


def test_empty_input():
    page = paginate([], page=1, limit=20)
    assert page.items == []
    assert page.total == 0
    assert page.has_more is False
