"""Unit tests for identifier cleaning and query variants."""

from flightresolver.providers.variants import (
    IdentifierVariants,
    clean_identifier,
    split_flight_code,
)


class TestSplitFlightCode:
    """Tests for split_flight_code."""

    def test_iata_code(self) -> None:
        assert split_flight_code('QF104') == ('QF', '104')

    def test_icao_code_strips_leading_zeros(self) -> None:
        assert split_flight_code('QFA0104') == ('QFA', '104')

    def test_designator_with_digit(self) -> None:
        assert split_flight_code('6E2025') == ('6E', '2025')

    def test_lowercase_and_separators(self) -> None:
        assert clean_identifier(' qf-104 ') == 'QF104'
        assert split_flight_code('qf 104') == ('QF', '104')

    def test_rejects_non_flight_codes(self) -> None:
        assert split_flight_code('HELLO') is None
        assert split_flight_code('123456') is None
        assert split_flight_code('Q1A104') is None


class TestIdentifierVariants:
    """Tests for IdentifierVariants ordering and de-duplication."""

    def test_iata_identifier_order(self) -> None:
        """IATA form equal to the exact form is not repeated."""
        attempts = list(IdentifierVariants('QF104'))

        assert [a.kind for a in attempts] == ['exact', 'icao', 'split']
        assert attempts[0].as_params() == {'flight_iata': 'QF104'}
        assert attempts[1].as_params() == {'flight_icao': 'QFA104'}
        assert attempts[2].as_params() == {'airline_iata': 'QF', 'flight_number': '104'}

    def test_icao_identifier_order(self) -> None:
        attempts = list(IdentifierVariants('QFA104'))

        assert [a.kind for a in attempts] == ['exact', 'iata', 'split']
        assert attempts[0].as_params() == {'flight_icao': 'QFA104'}
        assert attempts[1].as_params() == {'flight_iata': 'QF104'}
        assert attempts[2].as_params() == {'airline_icao': 'QFA', 'flight_number': '104'}

    def test_zero_padded_identifier_keeps_all_variants(self) -> None:
        attempts = list(IdentifierVariants('qf 0104'))

        assert [a.kind for a in attempts] == ['exact', 'icao', 'iata', 'split']
        assert attempts[0].as_params() == {'flight_iata': 'QF0104'}
        assert attempts[2].as_params() == {'flight_iata': 'QF104'}

    def test_unknown_airline_skips_normalised_forms(self) -> None:
        attempts = list(IdentifierVariants('ZZ123'))
        assert [a.kind for a in attempts] == ['exact', 'split']

    def test_unparseable_identifier_tries_exact_only(self) -> None:
        attempts = list(IdentifierVariants('hello'))
        assert len(attempts) == 1
        assert attempts[0].as_params() == {'flight_iata': 'HELLO'}

    def test_empty_identifier_has_no_variants(self) -> None:
        assert list(IdentifierVariants('  ')) == []

    def test_iteration_restarts(self) -> None:
        variants = IdentifierVariants('QF104')
        assert list(variants) == list(variants)
