"""Specialty registry endpoint"""

from flask import Blueprint, jsonify

from findadoc_core.specialties import SPECIALTIES

specialties_bp = Blueprint('specialties', __name__)


@specialties_bp.route('/api/specialties', methods=['GET'])
def list_specialties():
    """List the built-in specialties and their terms"""
    return jsonify([s.to_dict() for s in SPECIALTIES])
