"""Tests for the REST endpoints using the Flask test client."""

import random
from unittest.mock import MagicMock

import pytest

from flightresolver.app import create_app
from flightresolver.models import FlightStatus, Found, NormalizedFlightRecord, NotFound, SourceTag
from flightresolver.resolver import FlightResolver
from flightresolver.services.synthetic import SyntheticFlightGenerator


def _make_record() -> NormalizedFlightRecord:
    return NormalizedFlightRecord(
        flight_number='QFA104',
        airline='Qantas Airways',
        aircraft='7c6b2d',
        status=FlightStatus.IN_FLIGHT,
        live=True,
        source=SourceTag.OPENSKY,
    )


@pytest.fixture
def live_provider() -> MagicMock:
    provider = MagicMock()
    provider.name = 'opensky'
    provider.resolve.return_value = Found(_make_record())
    return provider


@pytest.fixture
def client(live_provider, clock):
    resolver = FlightResolver(
        schedule_provider=None,
        live_provider=live_provider,
        synthetic=SyntheticFlightGenerator(rng=random.Random(3), clock=clock),
    )
    app = create_app(resolver=resolver)
    return app.test_client()


class TestFlightEndpoints:
    """Tests for /api/flights routes."""

    def test_get_flight(self, client, live_provider) -> None:
        response = client.get('/api/flights/QF104')
        body = response.get_json()

        assert response.status_code == 200
        assert body['success'] is True
        assert body['data'] == _make_record().to_dict()
        assert body['data']['source'] == 'opensky-live'
        assert 'message' in body

        call = live_provider.resolve.call_args
        assert call[0][0] == 'QF104'
        assert isinstance(call[1]['deadline'], float)

    def test_get_flight_status(self, client) -> None:
        response = client.get('/api/flights/QF104/status')
        data = response.get_json()['data']

        assert response.status_code == 200
        assert data['status'] == 'in-flight'
        assert data['live'] is True
        assert 'airline' not in data
        assert 'departure' in data

    def test_unmatched_flight_is_synthetic_not_404(self, client, live_provider) -> None:
        live_provider.resolve.return_value = NotFound('opensky')

        response = client.get('/api/flights/XY123')
        data = response.get_json()['data']

        assert response.status_code == 200
        assert data['source'] == 'mock'
        assert data['flight_number'] == 'XY123'

    def test_search(self, client) -> None:
        response = client.get('/api/flights/search?query=QF104')
        body = response.get_json()

        assert response.status_code == 200
        assert len(body['data']) == 1
        assert body['data'][0]['flight_number'] == 'QFA104'

    def test_search_requires_query(self, client) -> None:
        response = client.get('/api/flights/search?query=%20')
        body = response.get_json()

        assert response.status_code == 400
        assert body['success'] is False


class TestAirportEndpoint:
    """Tests for /api/airports/<code>."""

    def test_known_airport(self, client) -> None:
        response = client.get('/api/airports/syd')
        data = response.get_json()['data']

        assert response.status_code == 200
        assert data['code'] == 'SYD'
        assert data['name'] == 'Sydney Kingsford Smith Airport'

    def test_unknown_airport(self, client) -> None:
        data = client.get('/api/airports/ZZZ').get_json()['data']
        assert data['name'] == 'ZZZ Airport'
        assert data['city'] == 'Unknown'


class TestAppRoutes:
    """Tests for health check and error handlers."""

    def test_health(self, client) -> None:
        response = client.get('/health')
        assert response.status_code == 200
        assert response.get_json() == {'status': 'ok'}

    def test_unknown_route_is_json_404(self, client) -> None:
        response = client.get('/api/nowhere')
        assert response.status_code == 404
        assert response.get_json()['success'] is False
