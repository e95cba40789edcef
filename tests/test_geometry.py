import pytest

from delve.geometry import Rect


def test_create_uses_size():
    r = Rect.create(2, 3, 5, 4)
    assert r == (2, 3, 7, 7)
    assert r.width == 5
    assert r.height == 4


@pytest.mark.parametrize("w,h", [(0, 3), (3, 0), (-1, 2)])
def test_create_rejects_empty(w, h):
    with pytest.raises(ValueError):
        Rect.create(0, 0, w, h)


def test_center_truncates():
    assert Rect.create(2, 2, 5, 5).center == (4, 4)
    assert Rect.create(10, 10, 4, 4).center == (12, 12)
    assert Rect.create(0, 0, 1, 1).center == (0, 0)


def test_center_is_inside():
    for w in range(1, 6):
        for h in range(1, 6):
            r = Rect.create(3, 1, w, h)
            assert r.contains(*r.center)


def test_contains_is_half_open():
    r = Rect.create(0, 0, 3, 2)
    assert r.contains(0, 0)
    assert r.contains(2, 1)
    assert not r.contains(3, 0)
    assert not r.contains(0, 2)


def test_cells_cover_interior():
    r = Rect.create(1, 1, 3, 2)
    cells = list(r.cells())
    assert len(cells) == 6
    assert all(r.contains(x, y) for x, y in cells)


def test_overlap_and_gap():
    a = Rect.create(0, 0, 4, 4)
    assert a.overlaps(Rect.create(2, 2, 4, 4))
    assert a.overlaps(a)
    assert not a.overlaps(Rect.create(5, 0, 3, 3))
    assert not a.overlaps(Rect.create(0, 5, 3, 3))


def test_shared_edge_overlaps():
    a = Rect.create(0, 0, 4, 4)
    b = Rect.create(4, 1, 3, 2)
    assert a.x2 == b.x1
    assert a.overlaps(b)
    assert b.overlaps(a)


def test_corner_touch_overlaps():
    a = Rect.create(0, 0, 4, 4)
    b = Rect.create(4, 4, 2, 2)
    assert a.overlaps(b)


def test_overlaps_symmetric():
    rects = [
        Rect.create(0, 0, 4, 4),
        Rect.create(3, 3, 2, 6),
        Rect.create(4, 0, 1, 1),
        Rect.create(10, 10, 3, 3),
        Rect.create(6, 2, 5, 2),
    ]
    for a in rects:
        for b in rects:
            assert a.overlaps(b) == b.overlaps(a)


def test_distance():
    a = Rect.create(2, 2, 5, 5)
    b = Rect.create(10, 10, 4, 4)
    # centers (4, 4) and (12, 12), sqrt(128) ~ 11.31
    assert a.distance(b) == 11
    assert b.distance(a) == 11
    assert a.distance(a) == 0


def test_distance_rounds_to_nearest():
    a = Rect.create(0, 0, 1, 1)
    assert a.distance(Rect.create(3, 4, 1, 1)) == 5
    # sqrt(2) ~ 1.41 and sqrt(8) ~ 2.83
    assert a.distance(Rect.create(1, 1, 1, 1)) == 1
    assert a.distance(Rect.create(2, 2, 1, 1)) == 3
