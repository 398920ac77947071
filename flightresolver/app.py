"""
Flight resolver Flask application.

Main entry point for the web application. Initializes:
- Flight resolver (providers from configuration)
- API routes
- JSON error handlers

Usage:
    python -m flightresolver.app

Or with gunicorn:
    gunicorn "flightresolver.app:create_app()"
"""

import logging
import os
from typing import Optional

from flask import Flask
from flask_cors import CORS

from flightresolver.api import flights_bp
from flightresolver.config import config
from flightresolver.resolver import FlightResolver

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S',
)
logger = logging.getLogger(__name__)


def create_app(resolver: Optional[FlightResolver] = None) -> Flask:
    """
    Application factory for Flask.

    Args:
        resolver: Flight resolver to serve. Built from configuration when
                  None; tests pass one wired to stub providers.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Enable CORS for API endpoints
    CORS(app, resources={r'/api/*': {'origins': '*'}})

    if resolver is None:
        resolver = FlightResolver.from_config()
        if resolver.schedule_provider is None:
            logger.warning('Schedule provider disabled; resolving from OpenSky and synthetic data only')

    app.config['FLIGHT_RESOLVER'] = resolver
    app.config['REQUEST_TIMEOUT_SECONDS'] = config.resolver.request_timeout_seconds

    app.register_blueprint(flights_bp)

    @app.route('/health')
    def health():
        """Simple health check endpoint."""
        return {'status': 'ok'}

    # -------------------------------------------------------------------------
    # Error handlers
    # -------------------------------------------------------------------------

    @app.errorhandler(404)
    def not_found(e):
        return {'success': False, 'message': 'Not found'}, 404

    @app.errorhandler(500)
    def server_error(e):
        logger.error(f'Server error: {e}')
        return {'success': False, 'message': 'Internal server error'}, 500

    return app


def run_development_server():
    """Run the development server."""
    app = create_app()

    port = int(os.environ.get('PORT', 5000))

    logger.info(f'Starting flight resolver on http://localhost:{port}')

    app.run(
        host='0.0.0.0',
        port=port,
        debug=config.debug,
    )


if __name__ == '__main__':
    run_development_server()
