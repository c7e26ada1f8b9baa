"""coordspace: Cartesian and spherical 3-D coordinates.

Core Objects: CartesianCoordinate, SphericalCoordinate
"""

from coordspace.config import Settings, settings
from coordspace.conversion import cartesian_to_spherical, spherical_to_cartesian
from coordspace.coordinates import (
    HALF_PI,
    PI,
    TWO_PI,
    CartesianCoordinate,
    SphericalCoordinate,
)
from coordspace.errors import CoordspaceError, ValidationError
from coordspace.protocols import ComponentsLike, Coordinate

__all__ = [
    "HALF_PI",
    "PI",
    "TWO_PI",
    "CartesianCoordinate",
    "ComponentsLike",
    "Coordinate",
    "CoordspaceError",
    "Settings",
    "SphericalCoordinate",
    "ValidationError",
    "cartesian_to_spherical",
    "settings",
    "spherical_to_cartesian",
]

__title__ = "coordspace"
__version__ = "0.1.0"
__license__ = "Apache 2.0"
