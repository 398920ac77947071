"""Unit tests for synthetic fallback records."""

import random
from datetime import timedelta

from flightresolver.models import FlightStatus, SourceTag
from flightresolver.services.synthetic import (
    MAX_DELAY_MINUTES,
    RANDOM_AIRLINES,
    RANDOM_AIRPORTS,
    SyntheticFlightGenerator,
)


class TestKnownRoutes:
    """Known identifiers get a fixed route."""

    def test_known_identifier(self, clock, now) -> None:
        record = SyntheticFlightGenerator(clock=clock).generate('QF104')

        assert record.source == SourceTag.SYNTHETIC_KNOWN
        assert record.source.is_synthetic
        assert record.flight_number == 'QF104'
        assert record.airline == 'Qantas Airways'
        assert record.aircraft == 'Boeing 787-9'
        assert record.departure.iata_code == 'HNL'
        assert record.arrival.iata_code == 'SYD'
        assert record.departure.scheduled_time == now + timedelta(hours=2)
        assert record.arrival.scheduled_time == now + timedelta(hours=12, minutes=30)
        assert record.status == FlightStatus.SCHEDULED
        assert record.live is False

    def test_repeated_calls_only_shift_times(self, now) -> None:
        later = now + timedelta(minutes=45)
        first = SyntheticFlightGenerator(clock=lambda: now).generate('QFA104')
        second = SyntheticFlightGenerator(clock=lambda: later).generate('QFA104')

        assert (first.airline, first.aircraft) == (second.airline, second.aircraft)
        assert first.departure.iata_code == second.departure.iata_code
        assert first.arrival.iata_code == second.arrival.iata_code
        assert second.departure.scheduled_time - first.departure.scheduled_time == timedelta(minutes=45)

    def test_icao_form_and_case(self, clock) -> None:
        record = SyntheticFlightGenerator(clock=clock).generate('qfa104')
        assert record.source == SourceTag.SYNTHETIC_KNOWN


class TestRandomRecords:
    """Unknown identifiers get a random but plausible record."""

    def test_random_record_shape(self, clock, now, rng) -> None:
        record = SyntheticFlightGenerator(rng=rng, clock=clock).generate('XY123')

        assert record.source == SourceTag.SYNTHETIC_RANDOM
        assert record.flight_number == 'XY123'
        assert record.airline in RANDOM_AIRLINES
        assert record.status == FlightStatus.SCHEDULED
        assert record.live is False

        codes = {iata for _, iata in RANDOM_AIRPORTS}
        assert record.departure.iata_code in codes
        assert record.arrival.iata_code in codes
        assert record.departure.iata_code != record.arrival.iata_code

        departure = record.departure.scheduled_time
        arrival = record.arrival.scheduled_time
        assert now <= departure <= now + timedelta(hours=2)
        assert timedelta(hours=2) <= arrival - departure <= timedelta(hours=5)

        for endpoint in (record.departure, record.arrival):
            assert 0 <= endpoint.delay_minutes <= MAX_DELAY_MINUTES
            assert 1 <= int(endpoint.terminal) <= 3
            assert 1 <= int(endpoint.gate) <= 20

    def test_seeded_generators_agree(self, clock) -> None:
        first = SyntheticFlightGenerator(rng=random.Random(7), clock=clock).generate('XY123')
        second = SyntheticFlightGenerator(rng=random.Random(7), clock=clock).generate('XY123')
        assert first.to_dict() == second.to_dict()
