"""Flask application setup for the find-a-doctor test server"""

import logging
from typing import Optional

from flask import Flask
from flask_cors import CORS

from findadoc_core.browser_setup import BrowserLauncher
from findadoc_core.config import Config, config as default_config
from findadoc_core.progress import ProgressChannel
from findadoc_server.routes.health import health_bp
from findadoc_server.routes.main import main_bp
from findadoc_server.routes.specialties import specialties_bp
from findadoc_server.routes.run_test import run_test_bp
from findadoc_server.routes.progress import progress_bp

# Configure logging
logging.basicConfig(
    level=getattr(logging, default_config.log_level, logging.INFO),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def create_app(
    cfg: Optional[Config] = None,
    launcher: Optional[BrowserLauncher] = None,
    channel: Optional[ProgressChannel] = None,
) -> Flask:
    """Build the app; `launcher` overrides browser acquisition for every run"""
    app = Flask(__name__, static_folder="static")
    CORS(app)

    app.extensions['findadoc'] = {
        'config': cfg or default_config,
        'launcher': launcher,
        'channel': channel or ProgressChannel(),
    }

    # Register blueprints
    app.register_blueprint(main_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(specialties_bp)
    app.register_blueprint(run_test_bp)
    app.register_blueprint(progress_bp)
    return app


app = create_app()
