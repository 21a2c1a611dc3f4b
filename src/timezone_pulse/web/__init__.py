"""
HTTP interface for timezone-pulse.

Provides:
- JSON API over the timezone engine (resolve, boundaries, terminator,
  daylight, DST, search, listing, current time)
"""

from .api_server import ApiServer, ApiRequestHandler, time_info

__all__ = ['ApiServer', 'ApiRequestHandler', 'time_info']
