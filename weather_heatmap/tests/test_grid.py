import pytest

from weather_heatmap.logic.grid import Bounds, SamplePoint, generate_grid, generate_grid_for


def test_grid_size_and_corners():
    points = generate_grid(10, 20, 30, 60, 4)

    assert len(points) == 16
    assert (points[0].lat, points[0].lng) == (10, 20)
    assert points[-1].lat == pytest.approx(10 + 3 / 4 * 20)
    assert points[-1].lng == pytest.approx(20 + 3 / 4 * 40)
    assert all(p.val == 0 for p in points)


def test_world_grid_known_values():
    points = generate_grid(-80, -180, 80, 180, 10)

    assert points[0].to_dict() == {"lat": -80, "lng": -180, "val": 0}
    assert (points[1].lat, points[1].lng) == (-80, -144)
    assert (points[10].lat, points[10].lng) == (-64, -180)


def test_row_major_order():
    n = 3
    points = generate_grid(0, 0, 3, 3, n)

    for i in range(n):
        for j in range(n):
            assert (points[i * n + j].lat, points[i * n + j].lng) == (i, j)


def test_grid_is_deterministic():
    assert generate_grid(-10, 5, 10, 25, 5) == generate_grid(-10, 5, 10, 25, 5)


def test_descending_bounds():
    points = generate_grid(50, 10, 40, 0, 2)
    assert [(p.lat, p.lng) for p in points] == [(50, 10), (50, 5), (45, 10), (45, 5)]


@pytest.mark.parametrize("n", [0, -1, 2.5, True])
def test_invalid_n(n):
    with pytest.raises(ValueError):
        generate_grid(0, 0, 1, 1, n)


def test_bounds_validation():
    with pytest.raises(ValueError):
        Bounds(-91, 0, 10, 10)
    with pytest.raises(ValueError):
        Bounds(0, 0, 10, 181)


def test_generate_grid_for_bounds():
    bounds = Bounds(-80, -180, 80, 180)
    assert generate_grid_for(bounds, 2) == [
        SamplePoint(-80, -180), SamplePoint(-80, 0),
        SamplePoint(0, -180), SamplePoint(0, 0),
    ]
