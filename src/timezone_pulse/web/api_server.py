"""
JSON API server for timezone-pulse.

Exposes the timezone engine over HTTP for the map and dashboard front end.
Runs a threaded ``http.server`` in a background thread.

Endpoints:
    GET /health                         - Basic health check (200 OK if running)
    GET /api/resolve?lat=&lng=          - Nearest catalog zone for a coordinate
    GET /api/boundary?zone=             - Boundary ring and color for a zone
    GET /api/terminator?at=             - Day/night terminator polyline
    GET /api/daylight?lat=&lng=&at=     - Is the Sun up at a point
    GET /api/dst?zone=&year=            - DST start/end for a zone and year
    GET /api/search?q=&recent=a,b       - Ranked timezone search
    GET /api/timezones                  - Curated catalog listing
    GET /api/time?timezone=             - Current time in a zone

Usage:
    from timezone_pulse.web import ApiServer

    server = ApiServer(port=8080)
    server.start()
"""

import json
import logging
import threading
from datetime import datetime, timezone
from http.server import HTTPServer, BaseHTTPRequestHandler
from socketserver import ThreadingMixIn
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qs, urlparse

import numpy as np

from ..geo.region_resolver import boundary_for, related_timezones, resolve
from ..interfaces.zone_models import GeoPoint
from ..search.ranker import rank_with_scores
from ..solar.terminator import declination_and_equation_of_center, is_daylight, solar_elevation, terminator
from ..zones.dst_scanner import MAX_YEAR, MIN_YEAR, transitions
from ..zones.zone_clock import is_valid_zone, localize, parse_instant
from ..zones.zone_listing import all_timezones, describe_zone

logger = logging.getLogger(__name__)

MAX_TIMEZONE_LENGTH = 100


# =============================================================================
# PARAMETER PARSING
# =============================================================================

def _param(query: Dict[str, List[str]], name: str, default: Optional[str] = None) -> Optional[str]:
    values = query.get(name)
    if not values:
        return default
    return values[0].strip()


def _required(query: Dict[str, List[str]], name: str) -> str:
    value = _param(query, name)
    if not value:
        raise ValueError(f"Missing parameter: {name}")
    return value


def _float_param(query: Dict[str, List[str]], name: str) -> float:
    text = _required(query, name)
    try:
        value = float(text)
    except ValueError:
        raise ValueError(f"Parameter {name} must be a number")
    if not np.isfinite(value):
        raise ValueError(f"Parameter {name} must be finite")
    return value


def _instant_param(query: Dict[str, List[str]], name: str = 'at') -> datetime:
    text = _param(query, name)
    if not text:
        return datetime.now(timezone.utc)
    try:
        return parse_instant(text)
    except ValueError:
        raise ValueError(f"Parameter {name} must be an ISO-8601 instant")


def _zone_param(query: Dict[str, List[str]], name: str, default: Optional[str] = None) -> str:
    zone_id = _param(query, name, default) or default
    if not zone_id or len(zone_id) > MAX_TIMEZONE_LENGTH:
        raise ValueError(f"Invalid {name} parameter")
    if not is_valid_zone(zone_id):
        raise ValueError("Invalid timezone identifier")
    return zone_id


def time_info(zone_id: str, instant: Optional[datetime] = None) -> Dict[str, Any]:
    """Current-time payload for ``/api/time``."""
    now = localize(zone_id, instant or datetime.now(timezone.utc))
    offset = now.strftime('%z')
    return {
        'timezone': zone_id,
        'iso': now.isoformat(timespec='milliseconds'),
        'formatted': {
            'time': now.strftime('%H:%M:%S'),
            'date': now.strftime('%Y-%m-%d'),
            'dateTime': now.strftime('%Y-%m-%d %H:%M:%S'),
            'dayOfWeek': now.strftime('%A'),
            'offset': f"{offset[:3]}:{offset[3:5]}",
            'abbreviation': now.tzname() or '',
        },
        'isInDST': bool(now.dst()),
        'isBusinessHours': 9 <= now.hour < 17,
        'isNightTime': now.hour >= 20 or now.hour < 6,
    }


# =============================================================================
# REQUEST HANDLER
# =============================================================================

class ApiRequestHandler(BaseHTTPRequestHandler):
    """HTTP request handler for the JSON API."""

    # Class-level settings, configured by ApiServer
    recent_timezones: Tuple[str, ...] = ()
    default_timezone: str = 'UTC'

    ROUTES = {
        '/health': '_handle_health',
        '/api/resolve': '_handle_resolve',
        '/api/boundary': '_handle_boundary',
        '/api/terminator': '_handle_terminator',
        '/api/daylight': '_handle_daylight',
        '/api/dst': '_handle_dst',
        '/api/search': '_handle_search',
        '/api/timezones': '_handle_timezones',
        '/api/time': '_handle_time',
    }

    def log_message(self, format, *args):
        """Route access logging through the module logger at debug level."""
        logger.debug(f"{self.address_string()} - {format % args}")

    def do_GET(self):
        """Handle GET requests."""
        parsed = urlparse(self.path)
        query = parse_qs(parsed.query)

        handler_name = self.ROUTES.get(parsed.path.rstrip('/') or '/')
        if handler_name is None:
            self._send_json({'error': 'Not Found'}, status=404)
            return

        try:
            payload = getattr(self, handler_name)(query)
        except ValueError as e:
            self._send_json({'error': str(e)}, status=400)
        except KeyError as e:
            # zoneinfo.ZoneInfoNotFoundError
            self._send_json({'error': f"Unknown timezone: {e}"}, status=400)
        except Exception as e:
            logger.error(f"Error handling {parsed.path}: {e}", exc_info=True)
            self._send_json({'error': 'Internal server error'}, status=500)
        else:
            self._send_json(payload)

    def _send_json(self, data: Any, status: int = 200):
        """Send JSON response."""
        self.send_response(status)
        self.send_header('Content-Type', 'application/json')
        self.send_header('Access-Control-Allow-Origin', '*')
        self.send_header('Cache-Control', 'private, no-cache, no-store, must-revalidate')
        self.end_headers()
        self.wfile.write(json.dumps(data, indent=2).encode())

    # -------------------------------------------------------------------------
    # Endpoints
    # -------------------------------------------------------------------------

    def _handle_health(self, query):
        return {'status': 'ok'}

    def _handle_resolve(self, query):
        point = GeoPoint(lat=_float_param(query, 'lat'), lng=_float_param(query, 'lng'))
        zone_id = resolve(point)
        return {
            'lat': point.lat,
            'lng': point.lng,
            'timezone': zone_id,
            'related': related_timezones(zone_id),
        }

    def _handle_boundary(self, query):
        zone_id = _required(query, 'zone')
        if len(zone_id) > MAX_TIMEZONE_LENGTH:
            raise ValueError("Invalid zone parameter")
        result = boundary_for(zone_id).to_dict()
        result['zone'] = zone_id
        return result

    def _handle_terminator(self, query):
        instant = _instant_param(query)
        sun = declination_and_equation_of_center(instant)
        return {
            'at': instant.isoformat(),
            'sun': sun.to_dict(),
            'points': [{'lat': lat, 'lng': lng} for lat, lng in terminator(instant)],
        }

    def _handle_daylight(self, query):
        point = GeoPoint(lat=_float_param(query, 'lat'), lng=_float_param(query, 'lng'))
        instant = _instant_param(query)
        return {
            'lat': point.lat,
            'lng': point.lng,
            'at': instant.isoformat(),
            'elevation_deg': solar_elevation(point, instant),
            'daylight': is_daylight(point, instant),
        }

    def _handle_dst(self, query):
        zone_id = _zone_param(query, 'zone')
        year_text = _param(query, 'year')
        if year_text:
            try:
                year = int(year_text)
            except ValueError:
                raise ValueError("Parameter year must be an integer")
        else:
            year = datetime.now(timezone.utc).year
        if not MIN_YEAR <= year <= MAX_YEAR:
            raise ValueError(f"Parameter year must be between {MIN_YEAR} and {MAX_YEAR}")
        return transitions(zone_id, year).to_dict()

    def _handle_search(self, query):
        text = _param(query, 'q', '') or ''
        recent_text = _param(query, 'recent')
        if recent_text is None:
            recent = self.recent_timezones
        else:
            recent = tuple(z.strip() for z in recent_text.split(',') if z.strip())

        results = []
        for candidate, score in rank_with_scores(all_timezones(), text, recent):
            row = candidate.to_dict()
            row['score'] = score
            results.append(row)
        return {'query': text, 'results': results}

    def _handle_timezones(self, query):
        return {'timezones': [c.to_dict() for c in all_timezones()]}

    def _handle_time(self, query):
        zone_id = _zone_param(query, 'timezone', self.default_timezone)
        info = time_info(zone_id)
        info['zone'] = describe_zone(zone_id).to_dict()
        return info


class ThreadedHTTPServer(ThreadingMixIn, HTTPServer):
    daemon_threads = True


class ApiServer:
    """
    HTTP server for the timezone API.

    Runs in a background thread; each request is handled on its own thread.
    """

    def __init__(
        self,
        port: int = 8080,
        bind_address: str = '0.0.0.0',
        recent_timezones: Tuple[str, ...] = (),
        default_timezone: str = 'UTC'
    ):
        """
        Initialize the API server.

        Args:
            port: HTTP port to listen on
            bind_address: Address to bind to (default: all interfaces)
            recent_timezones: Recently-used ids applied when a search omits ``recent``
            default_timezone: Zone used by /api/time when none is given
        """
        self.port = port
        self.bind_address = bind_address
        self.server: Optional[HTTPServer] = None
        self.thread: Optional[threading.Thread] = None
        self._running = False

        ApiRequestHandler.recent_timezones = tuple(recent_timezones)
        ApiRequestHandler.default_timezone = default_timezone

    @property
    def running(self) -> bool:
        return self._running

    def start(self):
        """
        Start the API server in a background thread.

        Raises:
            OSError: if the address cannot be bound
        """
        if self._running:
            logger.warning("API server already running")
            return

        self.server = ThreadedHTTPServer((self.bind_address, self.port), ApiRequestHandler)
        # Port 0 binds an ephemeral port
        self.port = self.server.server_address[1]
        self._running = True

        self.thread = threading.Thread(
            target=self._serve,
            name="ApiServer",
            daemon=True
        )
        self.thread.start()

        logger.info(f"API server started on http://{self.bind_address}:{self.port}")
        for path in ApiRequestHandler.ROUTES:
            logger.info(f"  GET {path}")

    def _serve(self):
        """Server loop (runs in background thread)."""
        self.server.serve_forever()

    def stop(self):
        """Stop the API server."""
        if not self._running:
            return
        self._running = False
        if self.server:
            self.server.shutdown()
            self.server.server_close()
            self.server = None
        if self.thread:
            self.thread.join(timeout=2.0)
            self.thread = None
        logger.info("API server stopped")
