"""
Flight lookup API endpoints.

Provides endpoints for:
- GET /api/flights/<identifier> - Full flight record
- GET /api/flights/<identifier>/status - Status-only projection
- GET /api/flights/search?query=<identifier> - Search by flight number
- GET /api/airports/<code> - Airport details

Every response uses the envelope {success, data, message}. Flight lookups
never 404: the resolver always produces a record.
"""

import logging
import time
from typing import Optional

from flask import Blueprint, current_app, jsonify, request

logger = logging.getLogger(__name__)

flights_bp = Blueprint('flights', __name__, url_prefix='/api')


def _resolver():
    return current_app.config['FLIGHT_RESOLVER']


def _deadline() -> Optional[float]:
    """Absolute deadline for this request, propagated into provider calls."""
    budget = current_app.config.get('REQUEST_TIMEOUT_SECONDS')
    if not budget:
        return None
    return time.monotonic() + budget


def _ok(data, message: str):
    return jsonify({
        'success': True,
        'data': data,
        'message': message,
    })


def _bad_request(message: str):
    return jsonify({
        'success': False,
        'message': message,
    }), 400


@flights_bp.route('/flights/search', methods=['GET'])
def search_flights():
    """
    Search flights.

    Query parameters:
    - query: flight number (required)

    Only flight-number search is supported; the result list has one entry.
    """
    query = request.args.get('query', '').strip()
    if not query:
        return _bad_request('Search query is required')

    logger.info(f'Searching flights with query: {query}')
    records = _resolver().search_flights(query, deadline=_deadline())
    return _ok([r.to_dict() for r in records], 'Flight search completed successfully')


@flights_bp.route('/flights/<identifier>', methods=['GET'])
def get_flight(identifier: str):
    identifier = identifier.strip()
    if not identifier:
        return _bad_request('Flight number is required')

    logger.info(f'Fetching flight info for: {identifier}')
    record = _resolver().resolve_flight(identifier, deadline=_deadline())
    return _ok(record.to_dict(), 'Flight information retrieved successfully')


@flights_bp.route('/flights/<identifier>/status', methods=['GET'])
def get_flight_status(identifier: str):
    identifier = identifier.strip()
    if not identifier:
        return _bad_request('Flight number is required')

    logger.info(f'Checking flight status for: {identifier}')
    record = _resolver().resolve_flight(identifier, deadline=_deadline())
    return _ok(record.status_summary(), 'Flight status retrieved successfully')


@flights_bp.route('/airports/<code>', methods=['GET'])
def get_airport(code: str):
    code = code.strip()
    if not code:
        return _bad_request('IATA code is required')

    airport = _resolver().resolve_airport(code)
    return _ok(airport.to_dict(), 'Airport information retrieved successfully')
