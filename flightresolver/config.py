"""
Configuration management for the flight resolver.

Loads settings from environment variables with sensible defaults.
Provider credentials and endpoints are treated as opaque configuration;
everything is centralized here to avoid magic strings scattered
throughout the codebase.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

# Placeholder shipped in example .env files; treated as "not configured"
_PLACEHOLDER_API_KEY = 'your_api_key_here'


@dataclass(frozen=True)
class AviationStackConfig:
    """AviationStack API configuration (schedule-capable provider)."""
    api_key: Optional[str] = os.getenv('AVIATIONSTACK_API_KEY') or None
    base_url: str = os.getenv('AVIATIONSTACK_BASE_URL', 'http://api.aviationstack.com/v1')
    timeout_seconds: float = float(os.getenv('AVIATIONSTACK_TIMEOUT_SECONDS', '10'))

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key) and self.api_key != _PLACEHOLDER_API_KEY


@dataclass(frozen=True)
class OpenSkyConfig:
    """OpenSky API configuration (live-position provider)."""
    username: Optional[str] = os.getenv('OPENSKY_USERNAME') or None
    password: Optional[str] = os.getenv('OPENSKY_PASSWORD') or None
    base_url: str = os.getenv('OPENSKY_BASE_URL', 'https://opensky-network.org/api')
    timeout_seconds: float = float(os.getenv('OPENSKY_TIMEOUT_SECONDS', '5'))


@dataclass(frozen=True)
class ResolverConfig:
    """Resolution settings."""
    # Overall budget for one inbound request; propagated into every provider call
    request_timeout_seconds: float = float(os.getenv('FLIGHT_REQUEST_TIMEOUT_SECONDS', '25'))


@dataclass(frozen=True)
class AppConfig:
    """Main application configuration."""
    aviationstack: AviationStackConfig = field(default_factory=AviationStackConfig)
    opensky: OpenSkyConfig = field(default_factory=OpenSkyConfig)
    resolver: ResolverConfig = field(default_factory=ResolverConfig)

    # Flask settings
    debug: bool = False


def load_config() -> AppConfig:
    """Load all configuration."""
    return AppConfig(
        aviationstack=AviationStackConfig(),
        opensky=OpenSkyConfig(),
        resolver=ResolverConfig(),
        debug=os.getenv('FLASK_DEBUG', '0') == '1',
    )


# Singleton instance
config = load_config()
