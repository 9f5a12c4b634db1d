"""Parsers for TransportAPI live departure boards."""

import logging
from typing import Any

from wandermate.domain.models import Arrival

logger = logging.getLogger(__name__)


def _departure_time(entry: dict[str, Any]) -> str:
    return str(
        entry.get("expected_departure_time")
        or entry.get("best_departure_estimate")
        or entry.get("aimed_departure_time")
        or ""
    )


def parse_bus_departures(data: dict[str, Any]) -> list[Arrival]:
    """Parse ``{"departures": {"<line>": [...]}}`` into arrivals sorted by time."""
    departures = data.get("departures")
    if not isinstance(departures, dict):
        return []

    arrivals = []
    for line, entries in departures.items():
        if not isinstance(entries, list):
            continue
        for entry in entries:
            if not isinstance(entry, dict):
                continue
            arrivals.append(
                Arrival(
                    route=str(entry.get("line_name") or entry.get("line") or line),
                    destination=str(entry.get("direction", "")),
                    time=_departure_time(entry),
                )
            )
    arrivals.sort(key=lambda a: a.time)
    return arrivals


def parse_train_departures(data: dict[str, Any]) -> list[Arrival]:
    """Parse ``{"departures": {"all": [...]}}`` keeping the board order."""
    departures = data.get("departures")
    if not isinstance(departures, dict):
        return []
    entries = departures.get("all", [])
    if not isinstance(entries, list):
        return []

    arrivals = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        platform = entry.get("platform")
        arrivals.append(
            Arrival(
                route=str(
                    entry.get("operator_name")
                    or entry.get("service")
                    or entry.get("train_uid")
                    or ""
                ),
                destination=str(entry.get("destination_name", "")),
                time=_departure_time(entry),
                platform=str(platform) if platform is not None else None,
            )
        )
    return arrivals
