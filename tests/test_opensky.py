"""Unit tests for the OpenSky live-position provider."""

import time
from datetime import timedelta
from unittest.mock import MagicMock, patch

import pytest
import requests

from flightresolver.models import ErrorKind, FlightStatus, Found, NotFound, ProviderError, SourceTag
from flightresolver.providers.opensky import (
    OpenSkyClient,
    OpenSkyProvider,
    StateVector,
    callsign_search_terms,
    match_state,
)


def _make_state_array(
    icao24: str = '7C6B2D',
    callsign: str = 'QFA104  ',
    origin_country: str = 'Australia',
    on_ground: bool = False,
) -> list:
    return [
        icao24, callsign, origin_country, 1717243200, 1717243201,
        151.17, -33.94, 10668.0, on_ground, 250.0, 90.0, 0.0,
        None, 10700.0, '1234', False, 0,
    ]


def _make_state(**kwargs) -> StateVector:
    return StateVector.from_array(_make_state_array(**kwargs))


class TestStateVector:
    """Tests for StateVector.from_array."""

    def test_parses_and_normalizes(self) -> None:
        state = _make_state()
        assert state.icao24 == '7c6b2d'
        assert state.callsign == 'QFA104'
        assert state.on_ground is False

    def test_rejects_malformed(self) -> None:
        assert StateVector.from_array([]) is None
        assert StateVector.from_array(None) is None
        assert StateVector.from_array(_make_state_array(icao24=None)) is None

    def test_non_string_origin_country_dropped(self) -> None:
        state = _make_state(origin_country=['Australia'])
        assert state.origin_country is None


class TestOpenSkyClient:
    """Tests for OpenSkyClient.get_states with mocked HTTP."""

    @patch('flightresolver.providers.opensky.requests.get')
    def test_get_states(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = {
            'time': 1717243200,
            'states': [_make_state_array(), ['short']],
        }

        states = OpenSkyClient().get_states(timeout=3)

        assert [s.callsign for s in states] == ['QFA104']
        call = mock_get.call_args
        assert call[0][0] == 'https://opensky-network.org/api/states/all'
        assert call[1]['timeout'] == 3
        assert call[1]['auth'] is None

    def test_authenticated_client(self) -> None:
        client = OpenSkyClient(username='user', password='secret')
        assert client.auth is not None

    @patch('flightresolver.providers.opensky.requests.get')
    def test_non_object_body(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = ['not', 'an', 'object']

        with pytest.raises(ValueError):
            OpenSkyClient().get_states(timeout=3)

    @patch('flightresolver.providers.opensky.requests.get')
    def test_states_not_a_list(self, mock_get: MagicMock) -> None:
        mock_get.return_value.json.return_value = {'time': 1717243200, 'states': 5}

        with pytest.raises(ValueError):
            OpenSkyClient().get_states(timeout=3)


class TestCallsignMatching:
    """Tests for callsign search terms and matching."""

    def test_search_terms(self) -> None:
        assert callsign_search_terms('qf104') == ['QF104', 'QFA104', 'QF']

    def test_icao_form_matches_callsign(self) -> None:
        states = [_make_state(callsign='BAW12'), _make_state(callsign='QFA104')]
        assert match_state(states, 'QF104').callsign == 'QFA104'

    def test_carrier_prefix_fallback(self) -> None:
        """A different flight of the same carrier is accepted as a last resort."""
        states = [_make_state(callsign='LH400')]
        assert match_state(states, 'LH-XYZ').callsign == 'LH400'

    def test_no_match(self) -> None:
        states = [_make_state(callsign='BAW12')]
        assert match_state(states, 'QF104') is None


class TestOpenSkyProvider:
    """Tests for OpenSkyProvider.resolve with a mocked client."""

    def test_found_record(self, clock, now) -> None:
        client = MagicMock()
        client.get_states.return_value = [_make_state()]

        provider = OpenSkyProvider(client=client, clock=clock)
        result = provider.resolve('QF104')

        assert isinstance(result, Found)
        record = result.record
        assert record.flight_number == 'QFA104'
        assert record.airline == 'Qantas Airways'
        assert record.aircraft == '7c6b2d'
        assert record.status == FlightStatus.IN_FLIGHT
        assert record.live is True
        assert record.source == SourceTag.OPENSKY
        # No airline or country route for Qantas/Australia
        assert record.departure.iata_code == 'INT'
        assert record.arrival.iata_code == 'DST'
        assert record.departure.scheduled_time == now - timedelta(hours=2)
        assert record.departure.actual_time == now - timedelta(hours=2)
        assert record.arrival.scheduled_time == now + timedelta(hours=2)
        assert record.departure.delay_minutes == 0
        assert record.departure.gate is None

    def test_on_ground_is_landed_with_airline_route(self, clock) -> None:
        client = MagicMock()
        client.get_states.return_value = [
            _make_state(callsign='AIC101', origin_country='India', on_ground=True),
        ]

        provider = OpenSkyProvider(client=client, clock=clock)
        record = provider.resolve('AI101').record

        assert record.status == FlightStatus.LANDED
        assert record.airline == 'Air India'
        assert record.departure.iata_code == 'DEL'
        assert record.arrival.iata_code == 'BOM'

    def test_not_found(self, clock) -> None:
        client = MagicMock()
        client.get_states.return_value = [_make_state(callsign='BAW12')]

        provider = OpenSkyProvider(client=client, clock=clock)
        assert provider.resolve('QF104') == NotFound('opensky')

    def test_errors_are_classified(self, clock) -> None:
        cases = [
            (requests.exceptions.Timeout(), ErrorKind.TIMEOUT),
            (requests.exceptions.HTTPError('429'), ErrorKind.HTTP),
            (requests.exceptions.ConnectionError('refused'), ErrorKind.NETWORK),
            (ValueError('bad json'), ErrorKind.MALFORMED),
        ]
        for error, kind in cases:
            client = MagicMock()
            client.get_states.side_effect = error

            provider = OpenSkyProvider(client=client, clock=clock)
            result = provider.resolve('QF104')

            assert isinstance(result, ProviderError)
            assert result.kind == kind

    @patch('flightresolver.providers.opensky.requests.get')
    def test_malformed_states_payload(self, mock_get: MagicMock, clock) -> None:
        """A states field of the wrong type is a malformed response, not a crash."""
        mock_get.return_value.json.return_value = {'time': 1717243200, 'states': 5}

        provider = OpenSkyProvider(client=OpenSkyClient(), clock=clock)
        result = provider.resolve('QF104')

        assert isinstance(result, ProviderError)
        assert result.kind == ErrorKind.MALFORMED

    def test_unknown_origin_country_uses_default_route(self, clock) -> None:
        client = MagicMock()
        client.get_states.return_value = [_make_state(callsign='ZZ999', origin_country={'x': 1})]

        provider = OpenSkyProvider(client=client, clock=clock)
        record = provider.resolve('ZZ999').record

        assert record.departure.iata_code == 'INT'

    def test_deadline(self, clock) -> None:
        client = MagicMock()
        client.get_states.return_value = []

        provider = OpenSkyProvider(client=client, timeout=5, clock=clock)

        expired = provider.resolve('QF104', deadline=time.monotonic() - 1)
        assert isinstance(expired, ProviderError)
        assert expired.kind == ErrorKind.TIMEOUT
        client.get_states.assert_not_called()

        provider.resolve('QF104', deadline=time.monotonic() + 1)
        assert client.get_states.call_args[1]['timeout'] <= 1
