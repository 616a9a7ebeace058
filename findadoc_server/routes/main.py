"""Front-end page"""

from flask import Blueprint, current_app

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Serve the static front end"""
    return current_app.send_static_file('index.html')
