"""
Specialty Registry - built-in specialties and their synonym terms.

Usage:
    from findadoc_core.specialties import resolve

    cfg = resolve("Cardiology")
    custom = resolve("Custom", "heart, cardiac")
"""

from typing import List, Optional, Tuple

from .errors import InvalidSpecialtyError
from .models import SpecialtyConfig

CUSTOM = "Custom"

SPECIALTIES: Tuple[SpecialtyConfig, ...] = (
    SpecialtyConfig(
        name="Cardiology",
        terms=("cardiology", "cardiologist", "heart", "cardiac", "cardiovascular"),
        description="Heart and cardiovascular specialists",
    ),
    SpecialtyConfig(
        name="Dermatology",
        terms=("dermatology", "dermatologist", "skin", "dermatologic"),
        description="Skin specialists",
    ),
    SpecialtyConfig(
        name="Orthopedics",
        terms=("orthopedic", "orthopedics", "orthopaedic", "bone", "joint", "sports medicine"),
        description="Bone and joint specialists",
    ),
    SpecialtyConfig(
        name="Pediatrics",
        terms=("pediatric", "pediatrics", "child", "children", "adolescent"),
        description="Children's health specialists",
    ),
    SpecialtyConfig(
        name="Neurology",
        terms=("neurology", "neurologist", "brain", "nerve", "neurological"),
        description="Brain and nervous system specialists",
    ),
)


def parse_custom_terms(raw: Optional[str]) -> List[str]:
    """Split comma-separated terms, trimming each and dropping empty ones"""
    if not raw:
        return []
    if not isinstance(raw, str):
        raise InvalidSpecialtyError("Invalid specialty selected")
    return [t.strip() for t in raw.split(",") if t.strip()]


def resolve(name: Optional[str], custom_terms: Optional[str] = None) -> SpecialtyConfig:
    """Look up a specialty by exact name, or build one from custom terms"""
    if name == CUSTOM:
        terms = parse_custom_terms(custom_terms)
        if not terms:
            raise InvalidSpecialtyError("Invalid specialty selected")
        return SpecialtyConfig(
            name="Custom Search",
            terms=tuple(terms),
            description="Custom specialty search",
            custom=True,
        )

    for spec in SPECIALTIES:
        if spec.name == name:
            return spec
    raise InvalidSpecialtyError("Invalid specialty selected")
