#!/usr/bin/env python3
"""
timezone-pulse: Timezone Engine Command Line and API Server

Main entry point for the timezone engine. This tool:
1. Resolves map coordinates to the nearest catalog timezone
2. Looks up curated boundary rings and colors for zones
3. Computes the day/night terminator and daylight at a point
4. Scans a year for DST start/end transitions
5. Ranks timezone search results
6. Optionally serves all of the above as a JSON HTTP API

Usage:
    # One-shot queries (JSON on stdout)
    timezone-pulse --resolve 51.5 -0.1
    timezone-pulse --dst America/New_York --year 2024
    timezone-pulse --search london

    # API server
    timezone-pulse --serve --config /etc/timezone-pulse/config.toml
"""

import argparse
import json
import logging
import signal
import sys
import threading
from copy import deepcopy
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional
import toml

# Set up logging before imports that use it
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)
logger = logging.getLogger('timezone-pulse')

from .geo.region_resolver import boundary_for, related_timezones, resolve
from .interfaces.zone_models import GeoPoint
from .search.ranker import rank_with_scores
from .solar.terminator import declination_and_equation_of_center, is_daylight, solar_elevation, terminator
from .zones.dst_scanner import transitions
from .zones.zone_clock import parse_instant
from .zones.zone_listing import all_timezones, describe_zone


DEFAULT_CONFIG: Dict[str, Any] = {
    'server': {
        'bind_address': '0.0.0.0',
        'port': 8080,
    },
    'search': {
        'recent': [],
    },
    'display': {
        'default_timezone': 'UTC',
    },
}


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from TOML file.

    Sections present in the file override the defaults key by key; a
    missing file gives the defaults.
    """
    config = deepcopy(DEFAULT_CONFIG)
    if not config_path:
        return config

    path = Path(config_path)
    if not path.exists():
        logger.warning(f"Config file {config_path} not found, using defaults")
        return config

    with open(path, 'r') as f:
        loaded = toml.load(f)

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values
    logger.debug(f"Loaded config from {config_path}")
    return config


def _instant(args) -> datetime:
    if args.at:
        return parse_instant(args.at)
    return datetime.now(timezone.utc)


def _point(values: List[float]) -> GeoPoint:
    lat, lng = values
    return GeoPoint(lat=lat, lng=lng)


def run_query(args, config: Dict[str, Any]) -> Any:
    """
    Execute the one-shot query selected on the command line.

    Returns:
        JSON-serializable result

    Raises:
        ValueError: malformed instant
        zoneinfo.ZoneInfoNotFoundError: unknown zone identifier
    """
    if args.resolve:
        zone_id = resolve(_point(args.resolve))
        return {
            'timezone': zone_id,
            'related': related_timezones(zone_id),
            'zone': describe_zone(zone_id, _instant(args)).to_dict(),
        }

    if args.boundary:
        return boundary_for(args.boundary).to_dict()

    if args.terminator is not None:
        instant = parse_instant(args.terminator) if args.terminator else _instant(args)
        return {
            'at': instant.isoformat(),
            'sun': declination_and_equation_of_center(instant).to_dict(),
            'points': [{'lat': lat, 'lng': lng} for lat, lng in terminator(instant)],
        }

    if args.daylight:
        point = _point(args.daylight)
        instant = _instant(args)
        return {
            'at': instant.isoformat(),
            'elevation_deg': solar_elevation(point, instant),
            'daylight': is_daylight(point, instant),
        }

    if args.dst:
        year = args.year or _instant(args).year
        return transitions(args.dst, year).to_dict()

    if args.search is not None:
        recent = config.get('search', {}).get('recent', [])
        return [
            dict(candidate.to_dict(), score=score)
            for candidate, score in rank_with_scores(all_timezones(_instant(args)), args.search, recent)
        ]

    if args.list:
        return [c.to_dict() for c in all_timezones(_instant(args))]

    zone_id = config.get('display', {}).get('default_timezone', 'UTC')
    return describe_zone(zone_id, _instant(args)).to_dict()


def serve(config: Dict[str, Any], port: Optional[int] = None):
    """Run the API server until interrupted."""
    from .web import ApiServer

    server_config = config.get('server', {})
    server = ApiServer(
        port=port if port is not None else server_config.get('port', 8080),
        bind_address=server_config.get('bind_address', '0.0.0.0'),
        recent_timezones=tuple(config.get('search', {}).get('recent', [])),
        default_timezone=config.get('display', {}).get('default_timezone', 'UTC'),
    )

    stop_event = threading.Event()

    def _signal_handler(signum, frame):
        logger.info(f"Received signal {signum}, shutting down...")
        stop_event.set()

    signal.signal(signal.SIGTERM, _signal_handler)
    signal.signal(signal.SIGINT, _signal_handler)

    server.start()
    try:
        stop_event.wait()
    finally:
        server.stop()


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description='timezone-pulse: Timezone Engine',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    # Which zone is this map point in?
    timezone-pulse --resolve 35.7 139.7

    # Terminator at a given instant
    timezone-pulse --terminator 2024-03-20T12:00:00Z

    # Is it daylight in Nairobi right now?
    timezone-pulse --daylight -1.29 36.82

    # Serve the JSON API
    timezone-pulse --serve --port 8080
        """
    )

    parser.add_argument(
        '--config', '-c',
        help='Path to TOML configuration file'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    actions = parser.add_mutually_exclusive_group()
    actions.add_argument(
        '--resolve',
        nargs=2, type=float, metavar=('LAT', 'LNG'),
        help='Resolve a coordinate to the nearest catalog timezone'
    )
    actions.add_argument(
        '--boundary',
        metavar='ZONE',
        help='Boundary ring and color for a zone'
    )
    actions.add_argument(
        '--terminator',
        nargs='?', const='', metavar='ISO',
        help='Day/night terminator (default instant: --at or now)'
    )
    actions.add_argument(
        '--daylight',
        nargs=2, type=float, metavar=('LAT', 'LNG'),
        help='Whether the Sun is up at a point'
    )
    actions.add_argument(
        '--dst',
        metavar='ZONE',
        help='DST start/end for a zone'
    )
    actions.add_argument(
        '--search',
        metavar='QUERY',
        help='Rank catalog timezones for a search query'
    )
    actions.add_argument(
        '--list',
        action='store_true',
        help='List the curated timezone catalog'
    )
    actions.add_argument(
        '--serve',
        action='store_true',
        help='Run the JSON API server'
    )

    parser.add_argument(
        '--at',
        metavar='ISO',
        help='Instant for time-dependent queries (default: now)'
    )
    parser.add_argument(
        '--year',
        type=int,
        help='Year for --dst, 1900-2200 (default: year of --at or now)'
    )
    parser.add_argument(
        '--port', '-p',
        type=int,
        help='HTTP port for --serve (overrides config)'
    )

    args = parser.parse_args(argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    # Load configuration
    config = load_config(args.config)

    if args.serve:
        serve(config, port=args.port)
        return 0

    try:
        result = run_query(args, config)
    except ValueError as e:
        logger.error(f"Invalid argument: {e}")
        return 2
    except KeyError as e:
        # zoneinfo.ZoneInfoNotFoundError
        logger.error(f"Unknown timezone: {e}")
        return 1

    print(json.dumps(result, indent=2))
    return 0


if __name__ == '__main__':
    sys.exit(main())
