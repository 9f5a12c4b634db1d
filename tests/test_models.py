"""Tests for domain models."""

import dataclasses

import pytest

from wandermate.domain.errors import InvalidCoordinate
from wandermate.domain.models import (
    Arrival,
    Coordinate,
    ErrorKind,
    NearbyTransportResult,
    Place,
    QueryResult,
    TransitStop,
)


class TestCoordinate:
    """Tests for the Coordinate value object."""

    def test_numeric_strings_are_converted_to_floats(self) -> None:
        """Given numeric strings, when creating a Coordinate, then fields are floats."""
        coordinate = Coordinate(latitude="51.5074", longitude="-0.1278")  # type: ignore[arg-type]

        assert coordinate.latitude == 51.5074
        assert coordinate.longitude == -0.1278

    @pytest.mark.parametrize(
        ("latitude", "longitude"),
        [(90.1, 0.0), (-90.1, 0.0), (0.0, 180.1), (0.0, -180.1)],
    )
    def test_out_of_range_values_raise(self, latitude: float, longitude: float) -> None:
        """Given out-of-range values, then InvalidCoordinate is raised."""
        with pytest.raises(InvalidCoordinate):
            Coordinate(latitude=latitude, longitude=longitude)

    @pytest.mark.parametrize("bad", ["north", None, float("nan"), float("inf"), True])
    def test_non_numeric_values_raise(self, bad: object) -> None:
        """Given non-numeric input, when creating a Coordinate, then InvalidCoordinate is raised."""
        with pytest.raises(InvalidCoordinate):
            Coordinate(latitude=bad, longitude=0.0)  # type: ignore[arg-type]

    def test_invalid_coordinate_is_a_value_error(self) -> None:
        """InvalidCoordinate can be handled as a ValueError."""
        with pytest.raises(ValueError):
            Coordinate(latitude=100.0, longitude=0.0)

    def test_boundaries_are_valid(self) -> None:
        """Given boundary values, when creating a Coordinate, then no error is raised."""
        Coordinate(latitude=90.0, longitude=180.0)
        Coordinate(latitude=-90.0, longitude=-180.0)

    def test_is_immutable(self) -> None:
        """Given a Coordinate, when assigning a field, then FrozenInstanceError is raised."""
        coordinate = Coordinate(latitude=1.0, longitude=2.0)

        with pytest.raises(dataclasses.FrozenInstanceError):
            coordinate.latitude = 3.0  # type: ignore[misc]

    @pytest.mark.parametrize(
        ("latitude", "longitude"), [(None, 1.0), ("", "1.0"), ("abc", 1.0), (91, 0)]
    )
    def test_try_parse_returns_none_for_bad_input(
        self, latitude: object, longitude: object
    ) -> None:
        """Given unusable input, when try_parse is called, then None is returned."""
        assert Coordinate.try_parse(latitude, longitude) is None

    def test_try_parse_returns_coordinate_for_good_input(self) -> None:
        """Given valid strings, when try_parse is called, then a Coordinate is returned."""
        assert Coordinate.try_parse("51.5", "-0.1") == Coordinate(latitude=51.5, longitude=-0.1)


class TestQueryResult:
    """Tests for the explicit result type."""

    def test_ok_result(self) -> None:
        """Given a value, when wrapping it as ok, then it is unwrapped unchanged."""
        result = QueryResult.ok([1, 2])

        assert result.is_ok
        assert result.error is None
        assert result.unwrap_or([]) == [1, 2]

    def test_failure_result(self) -> None:
        """Given a failure, when unwrapping, then the default is returned."""
        result: QueryResult[list[int]] = QueryResult.failure(
            ErrorKind.REMOTE_QUERY_FAILED, "boom", status_code=503
        )

        assert not result.is_ok
        assert result.error is not None
        assert result.error.kind is ErrorKind.REMOTE_QUERY_FAILED
        assert result.error.reason == "boom"
        assert result.error.status_code == 503
        assert result.unwrap_or([]) == []


class TestTransitModels:
    """Tests for transit stop and place models."""

    def test_transit_stop_to_dict(self) -> None:
        """Given a stop with arrivals, when serializing, then the flat shape is produced."""
        stop = TransitStop(
            name="Trafalgar Square",
            coordinate=Coordinate(latitude=51.508, longitude=-0.128),
            distance=70.0,
            code="490000251S",
            arrivals=(Arrival(route="24", destination="Pimlico", time="12:05"),),
        )

        data = stop.to_dict()

        assert data["name"] == "Trafalgar Square"
        assert data["latitude"] == 51.508
        assert data["distance"] == 70.0
        assert data["code"] == "490000251S"
        assert data["arrivals"] == [
            {"route": "24", "destination": "Pimlico", "time": "12:05", "platform": None}
        ]

    def test_place_with_nearby_transport_returns_enriched_copy(self) -> None:
        """Given a place, when enriching, then a new place carries the stops."""
        place = Place(id="1", name="National Gallery", type="museum")
        stop = TransitStop(
            name="Charing Cross",
            coordinate=Coordinate(latitude=51.508, longitude=-0.124),
            distance=300.0,
        )

        enriched = place.with_nearby_transport(
            NearbyTransportResult(bus_stops=[], train_stations=[stop])
        )

        assert enriched.nearby_train_stations == (stop,)
        assert enriched.nearby_bus_stops == ()
        assert place.nearby_train_stations == ()

    def test_nearby_result_to_dict_uses_camel_case_keys(self) -> None:
        """Given an empty result, when serializing, then both keys are present."""
        assert NearbyTransportResult().to_dict() == {"busStops": [], "trainStations": []}
