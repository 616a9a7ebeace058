"""Routes module for Flask endpoints"""

from findadoc_server.routes.health import health_bp
from findadoc_server.routes.main import main_bp
from findadoc_server.routes.specialties import specialties_bp
from findadoc_server.routes.run_test import run_test_bp
from findadoc_server.routes.progress import progress_bp

__all__ = ['health_bp', 'main_bp', 'specialties_bp', 'run_test_bp', 'progress_bp']
