"""Tests for great-circle distance helpers."""

import itertools
import math

import pytest

from wandermate.domain.errors import InvalidCoordinate
from wandermate.domain.geo import EARTH_RADIUS_METERS, distance_meters, format_distance
from wandermate.domain.models import Coordinate

LONDON = Coordinate(latitude=51.5074, longitude=-0.1278)
PARIS = Coordinate(latitude=48.8566, longitude=2.3522)
SAMPLE_POINTS = [
    LONDON,
    PARIS,
    Coordinate(latitude=0.0, longitude=0.0),
    Coordinate(latitude=-33.8688, longitude=151.2093),  # Sydney
    Coordinate(latitude=89.9, longitude=-45.0),
    Coordinate(latitude=40.7128, longitude=-74.0060),  # New York
    Coordinate(latitude=-0.5, longitude=179.9),
]


def test_distance_to_self_is_zero() -> None:
    """Given any coordinate, when measuring to itself, then distance is 0."""
    for point in SAMPLE_POINTS:
        assert distance_meters(point, point) == 0.0


def test_distance_is_symmetric() -> None:
    """Given two coordinates, when swapping arguments, then distance is unchanged."""
    for a, b in itertools.combinations(SAMPLE_POINTS, 2):
        assert distance_meters(a, b) == pytest.approx(distance_meters(b, a))


def test_triangle_inequality_holds() -> None:
    """Given three coordinates, then d(a, c) <= d(a, b) + d(b, c) within tolerance."""
    for a, b, c in itertools.permutations(SAMPLE_POINTS, 3):
        assert distance_meters(a, c) <= distance_meters(a, b) + distance_meters(b, c) + 1e-6


def test_distance_is_never_negative() -> None:
    """Given any pair of coordinates, then distance is >= 0."""
    for a, b in itertools.product(SAMPLE_POINTS, repeat=2):
        assert distance_meters(a, b) >= 0.0


def test_london_to_nearby_stop_is_about_70_meters() -> None:
    """Given central London and a stop a few streets away, then distance is ~70m."""
    stop = Coordinate(latitude=51.5080, longitude=-0.1275)

    distance = distance_meters(LONDON, stop)

    assert distance == pytest.approx(70, abs=5)


def test_london_to_paris_is_about_344_km() -> None:
    """Given London and Paris, then distance matches the known great-circle distance."""
    assert distance_meters(LONDON, PARIS) == pytest.approx(343_500, rel=0.01)


def test_antipodal_points_are_half_circumference_apart() -> None:
    """Given antipodal points, then distance is pi * R."""
    a = Coordinate(latitude=0.0, longitude=0.0)
    b = Coordinate(latitude=0.0, longitude=180.0)

    assert distance_meters(a, b) == pytest.approx(math.pi * EARTH_RADIUS_METERS)


def test_non_coordinate_input_raises_invalid_coordinate() -> None:
    """Given tuples instead of coordinates, when measuring, then InvalidCoordinate is raised."""
    with pytest.raises(InvalidCoordinate):
        distance_meters((51.5, -0.12), LONDON)  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("meters", "expected"),
    [
        (70.4, "70m"),
        (999.4, "999m"),
        (1000, "1.0km"),
        (1234.0, "1.2km"),
        (None, None),
        (0, None),
        ("350m", "350m"),
    ],
)
def test_format_distance(meters: float | str | None, expected: str | None) -> None:
    """Given a distance, when formatting, then meters below 1km and km above."""
    assert format_distance(meters) == expected
