"""Command-line interface for the WanderMate transport core."""

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import aiohttp

from wandermate.adapters.auth_api import DummyJsonAuthGateway
from wandermate.adapters.config import AppConfig
from wandermate.adapters.place_parser import place_to_dict
from wandermate.adapters.places_api import MockPlaceRepository
from wandermate.adapters.storage import (
    JsonFavoritesRepository,
    JsonKeyValueStore,
    JsonSessionStore,
    JsonUserRepository,
)
from wandermate.adapters.transport_api import (
    TransportApiArrivalRepository,
    TransportApiHttpClient,
    TransportApiStopRepository,
)
from wandermate.application.auth import AuthService
from wandermate.application.favorites import FavoritesService
from wandermate.application.nearby_search import NearbySearchStrategy
from wandermate.application.place_catalog import (
    PlaceCatalogService,
    is_popular_type,
    nearest_bus_stop_distance,
)
from wandermate.application.transport_aggregator import TransportAggregator
from wandermate.domain.errors import InvalidCoordinate, StorageError
from wandermate.domain.geo import format_distance
from wandermate.domain.models import Arrival, Coordinate, Place, TransitStop, TransitType

logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from wandermate.domain.ports import ArrivalRepository


@dataclass
class AppContext:
    """Wired-up services for one CLI invocation."""

    config: AppConfig
    store: JsonKeyValueStore
    aggregator: TransportAggregator
    catalog: PlaceCatalogService
    favorites: FavoritesService
    auth: AuthService
    arrivals: "ArrivalRepository"
    strategy: NearbySearchStrategy


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_context(config: AppConfig, session: aiohttp.ClientSession) -> AppContext:
    """Create every adapter and service for the given config and HTTP session."""
    http_client = TransportApiHttpClient(
        session=session,
        app_id=config.transport_api_app_id,
        app_key=config.transport_api_app_key,
        base_url=config.transport_api_base_url,
        timeout_seconds=config.transport_api_timeout,
    )
    strategy = NearbySearchStrategy(
        TransportApiStopRepository(http_client),
        default_max_distance_meters=config.default_radius_meters,
    )
    aggregator = TransportAggregator(
        strategy,
        bus_stop_radius_meters=config.bus_stop_radius_meters,
        train_station_radius_meters=config.train_station_radius_meters,
    )

    store = JsonKeyValueStore(config.storage_path)
    catalog = PlaceCatalogService(
        MockPlaceRepository(
            session=session,
            base_url=config.places_api_url,
            timeout_seconds=config.transport_api_timeout,
        )
    )
    auth = AuthService(
        JsonUserRepository(store),
        JsonSessionStore(store),
        DummyJsonAuthGateway(
            session=session,
            base_url=config.auth_api_url,
            timeout_seconds=config.transport_api_timeout,
        ),
    )
    return AppContext(
        config=config,
        store=store,
        aggregator=aggregator,
        catalog=catalog,
        favorites=FavoritesService(JsonFavoritesRepository(store)),
        auth=auth,
        arrivals=TransportApiArrivalRepository(http_client),
        strategy=strategy,
    )


def format_stop(stop: TransitStop) -> str:
    """One-line description of a stop."""
    code = f" [{stop.code}]" if stop.code else ""
    distance = format_distance(stop.distance) or "0m"
    return f"  {stop.name}{code} - {distance}"


def format_arrival(arrival: Arrival) -> str:
    """One-line description of a departure."""
    platform = f" (platform {arrival.platform})" if arrival.platform else ""
    return f"  {arrival.time:>5}  {arrival.route:<8} {arrival.destination}{platform}"


def format_place(place: Place) -> str:
    """One-line description of a place."""
    subtitle = place.type.capitalize() if place.type else "Place"
    distance = format_distance(nearest_bus_stop_distance(place))
    if distance:
        subtitle = f"{subtitle} • bus {distance}"
    marker = " ★ Popular" if is_popular_type(place.type) else ""
    return f"  {place.name} ({subtitle}){marker}\n    ID: {place.id}"


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


async def _nearby_single_type(
    ctx: AppContext, center: Coordinate, args: argparse.Namespace
) -> int:
    transit_type = TransitType.BUS_STOP if args.type == "bus" else TransitType.TRAIN_STATION
    # no explicit radius: the strategy applies default_radius_meters
    result = await ctx.strategy.find_nearby(center, transit_type)
    if not result.is_ok:
        reason = result.error.reason if result.error else "unknown error"
        print(f"Error: {reason}", file=sys.stderr)
        return 1

    stops = result.unwrap_or([])
    if args.json:
        _print_json([stop.to_dict() for stop in stops])
        return 0
    label = "Bus stops" if transit_type is TransitType.BUS_STOP else "Train stations"
    print(f"\n{label} ({len(stops)}):")
    for stop in stops:
        print(format_stop(stop))
    return 0


async def _cmd_nearby(ctx: AppContext, args: argparse.Namespace) -> int:
    center = Coordinate(latitude=args.latitude, longitude=args.longitude)
    if args.type:
        return await _nearby_single_type(ctx, center, args)

    result = await ctx.aggregator.aggregate_nearby_transport(center)
    if args.json:
        _print_json(result.to_dict())
        return 0

    print(f"\nBus stops ({len(result.bus_stops)}):")
    for stop in result.bus_stops:
        print(format_stop(stop))
    print(f"\nTrain stations ({len(result.train_stations)}):")
    for stop in result.train_stations:
        print(format_stop(stop))
    return 0


def _print_places(places: list[Place], as_json: bool, empty_message: str) -> int:
    if as_json:
        _print_json([place_to_dict(place) for place in places])
        return 0
    if not places:
        print(empty_message, file=sys.stderr)
        return 1
    print(f"\nFound {len(places)} place(s):\n")
    for place in places:
        print(format_place(place))
    return 0


async def _cmd_search(ctx: AppContext, args: argparse.Namespace) -> int:
    places = await ctx.catalog.search(args.query)
    return _print_places(places, args.json, f"No places found for '{args.query}'")


async def _cmd_explore(ctx: AppContext, args: argparse.Namespace) -> int:
    page = await ctx.catalog.explore(page=args.page)
    if args.json:
        _print_json(
            {
                "page": page.page,
                "hasMore": page.has_more,
                "places": [place_to_dict(place) for place in page.places],
            }
        )
        return 0
    code = _print_places(page.places, False, f"No places on page {args.page}")
    if page.has_more:
        print(f"\nMore places: --page {args.page + 1}")
    return code


async def _cmd_departures(ctx: AppContext, args: argparse.Namespace) -> int:
    if args.kind == "bus":
        result = await ctx.arrivals.get_bus_stop_arrivals(args.code)
    else:
        result = await ctx.arrivals.get_train_station_arrivals(args.code)

    if not result.is_ok:
        reason = result.error.reason if result.error else "unknown error"
        print(f"Error: {reason}", file=sys.stderr)
        return 1

    arrivals = result.unwrap_or([])
    if args.json:
        _print_json(
            [
                {
                    "route": a.route,
                    "destination": a.destination,
                    "time": a.time,
                    "platform": a.platform,
                }
                for a in arrivals
            ]
        )
        return 0
    print(f"\nDepartures from {args.code} ({len(arrivals)}):")
    for arrival in arrivals:
        print(format_arrival(arrival))
    return 0


async def _cmd_favorites(ctx: AppContext, args: argparse.Namespace) -> int:
    ctx.favorites.load()

    if args.action == "list":
        return _print_places(ctx.favorites.favorites, args.json, "No favorites yet")

    if args.action == "clear":
        ctx.favorites.clear()
        print("Favorites cleared.")
        return 0

    if args.action == "remove":
        if not ctx.favorites.remove(args.place_id):
            print(f"Place {args.place_id} is not a favorite.", file=sys.stderr)
            return 1
        print(f"Removed {args.place_id} from favorites.")
        return 0

    # add
    if ctx.favorites.is_favorite(args.place_id):
        print(f"Place {args.place_id} is already a favorite.")
        return 0
    places = await ctx.catalog.search()
    place = next((p for p in places if p.id == args.place_id), None)
    if place is None:
        print(f"Place {args.place_id} not found.", file=sys.stderr)
        return 1
    place = await ctx.aggregator.enrich_place(place)
    ctx.favorites.add(place)
    print(f"Added {place.name} to favorites.")
    return 0


async def _cmd_register(ctx: AppContext, args: argparse.Namespace) -> int:
    result = await ctx.auth.register(
        args.first_name, args.last_name, args.username, args.email, args.password
    )
    if not result.is_ok or result.value is None:
        reason = result.error.reason if result.error else "Registration failed"
        print(f"Error: {reason}", file=sys.stderr)
        return 1
    print(f"Registered {result.value.username}.")
    return 0


async def _cmd_login(ctx: AppContext, args: argparse.Namespace) -> int:
    result = await ctx.auth.login(args.username, args.password)
    if not result.is_ok or result.value is None:
        print(f"Error: {result.error.reason if result.error else 'Login failed'}", file=sys.stderr)
        return 1
    print(f"Logged in as {result.value.user.username}.")
    return 0


async def _cmd_logout(ctx: AppContext, _args: argparse.Namespace) -> int:
    ctx.auth.logout()
    print("Logged out.")
    return 0


async def _cmd_whoami(ctx: AppContext, _args: argparse.Namespace) -> int:
    result = ctx.auth.restore_session()
    if not result.is_ok or result.value is None:
        print("Not logged in.", file=sys.stderr)
        return 1
    user = result.value.user
    name = f"{user.first_name} {user.last_name}".strip() or user.username
    print(f"{name} ({user.username})")
    return 0


COMMANDS = {
    "nearby": _cmd_nearby,
    "search": _cmd_search,
    "explore": _cmd_explore,
    "departures": _cmd_departures,
    "favorites": _cmd_favorites,
    "register": _cmd_register,
    "login": _cmd_login,
    "logout": _cmd_logout,
    "whoami": _cmd_whoami,
}


def _positive_int(value: str) -> int:
    """Argparse type for integers >= 1."""
    try:
        number = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}") from e
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="wandermate",
        description="WanderMate travel companion",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Bus stops and train stations near Trafalgar Square
  wandermate nearby 51.5080 -0.1281

  # Search places
  wandermate search museum

  # Live departures
  wandermate departures bus 490000251S
  wandermate departures train PAD
        """,
    )
    parser.add_argument("--config", dest="config_file", help="Path to TOML configuration file")
    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    nearby_parser = subparsers.add_parser("nearby", help="Find nearby bus stops and stations")
    nearby_parser.add_argument("latitude", type=float, help="Latitude in decimal degrees")
    nearby_parser.add_argument("longitude", type=float, help="Longitude in decimal degrees")
    nearby_parser.add_argument("--json", action="store_true", help="Output as JSON")
    nearby_parser.add_argument(
        "--type",
        choices=["bus", "train"],
        help="Only one transit type, within the configured default radius",
    )

    search_parser = subparsers.add_parser("search", help="Search places of interest")
    search_parser.add_argument("query", nargs="?", default="", help="Search text")
    search_parser.add_argument("--json", action="store_true", help="Output as JSON")

    explore_parser = subparsers.add_parser("explore", help="Browse popular places")
    explore_parser.add_argument(
        "--page", type=_positive_int, default=1, help="Page number (from 1)"
    )
    explore_parser.add_argument("--json", action="store_true", help="Output as JSON")

    departures_parser = subparsers.add_parser("departures", help="Show live departures")
    departures_parser.add_argument("kind", choices=["bus", "train"], help="Stop kind")
    departures_parser.add_argument("code", help="ATCO code (bus) or CRS code (train)")
    departures_parser.add_argument("--json", action="store_true", help="Output as JSON")

    favorites_parser = subparsers.add_parser("favorites", help="Manage favorite places")
    favorites_sub = favorites_parser.add_subparsers(dest="action", required=True)
    favorites_list = favorites_sub.add_parser("list", help="List favorites")
    favorites_list.add_argument("--json", action="store_true", help="Output as JSON")
    favorites_add = favorites_sub.add_parser("add", help="Add a place by ID")
    favorites_add.add_argument("place_id", help="Place ID")
    favorites_remove = favorites_sub.add_parser("remove", help="Remove a place by ID")
    favorites_remove.add_argument("place_id", help="Place ID")
    favorites_sub.add_parser("clear", help="Remove all favorites")

    register_parser = subparsers.add_parser("register", help="Register a local demo user")
    register_parser.add_argument("first_name")
    register_parser.add_argument("last_name")
    register_parser.add_argument("username")
    register_parser.add_argument("email")
    register_parser.add_argument("password")

    login_parser = subparsers.add_parser("login", help="Log in")
    login_parser.add_argument("username")
    login_parser.add_argument("password")

    subparsers.add_parser("logout", help="Log out")
    subparsers.add_parser("whoami", help="Show the logged-in user")

    return parser


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig() if not args.config_file else AppConfig(config_file=args.config_file)
        config = config.apply_toml_overrides()
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(config.log_level)

    try:
        async with aiohttp.ClientSession() as session:
            ctx = build_context(config, session)
            with ctx.store:
                return await COMMANDS[args.command](ctx, args)
    except InvalidCoordinate as e:
        print(f"Invalid coordinate: {e}", file=sys.stderr)
        return 1
    except StorageError as e:
        print(f"Storage error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        exit_code = asyncio.run(main())
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        exit_code = 130
    sys.exit(exit_code)


if __name__ == "__main__":
    cli_main()
