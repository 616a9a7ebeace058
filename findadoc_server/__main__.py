"""Main entry point for the find-a-doctor test server"""

import logging

from findadoc_core.config import config
from findadoc_server.app import app

logger = logging.getLogger(__name__)


def main():
    """Run the API server"""
    logger.info(f"Find a Doctor testing tool running on http://localhost:{config.api_port}")
    logger.info(f"Target page: {config.target_url}")
    logger.info(f"Browser: {'remote CDP at ' + config.cdp_url if config.use_cdp else 'local Chromium'}")
    app.run(host='0.0.0.0', port=config.api_port, debug=False, use_reloader=False, threaded=True)


if __name__ == '__main__':
    main()
