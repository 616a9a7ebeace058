"""Health check endpoint"""

from flask import Blueprint, current_app, jsonify

from findadoc_core import __version__

health_bp = Blueprint('health', __name__)


@health_bp.route('/health', methods=['GET'])
def health_check():
    """Health check endpoint"""
    cfg = current_app.extensions['findadoc']['config']
    return jsonify({
        "status": "healthy",
        "target_url": cfg.target_url,
        "version": __version__
    })
