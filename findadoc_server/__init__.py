"""
findadoc_server - HTTP API for running find-a-doctor relevance tests
"""

from findadoc_server.app import app, create_app

__all__ = [
    'app',
    'create_app',
]
