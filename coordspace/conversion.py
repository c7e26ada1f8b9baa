"""Conversion between Cartesian and spherical coordinates.

Both conversions are total: they never raise for a valid input and NaN
components propagate instead of being rejected.

Angles follow the physics convention: theta is the inclination from the
positive z-axis and phi the azimuth from the positive x-axis. Where an angle
is undefined (theta at the origin, phi anywhere on the z-axis) it is 0.

``cartesian_to_spherical`` returns phi within [0, 2 * pi]. The arctangent
gives a value in (-pi, pi], so negative azimuths are shifted up by one full
turn; e.g. the point (0, -3, 0) has phi = 3 * pi / 2, not -pi / 2. Every
result therefore passes the checks of ``SphericalCoordinate.new``.
"""

from __future__ import annotations

import math

from coordspace.coordinates import (
    HALF_PI,
    PI,
    TWO_PI,
    CartesianCoordinate,
    SphericalCoordinate,
)
from coordspace.coordspace_logging import function_logger

__all__ = ["cartesian_to_spherical", "spherical_to_cartesian"]


def _polar_angle(delta: float, z: float) -> float:
    """Return the inclination from the positive z-axis.

    Args:
        delta: length of the projection onto the x-y plane
        z: height above the x-y plane

    """
    if z > 0.0:
        return math.atan2(delta, z)
    elif z < 0.0:
        # pi plus a non-positive arctangent, which lands in (pi / 2, pi]
        return PI - math.atan2(delta, -z)
    elif delta != 0.0:
        return HALF_PI
    else:
        return 0.0


def _azimuth(x: float, y: float) -> float:
    """Return the azimuth from the positive x-axis, within [0, 2 * pi]."""
    if x != 0.0:
        phi = math.atan2(y, x)
    elif y > 0.0:
        phi = HALF_PI
    elif y < 0.0:
        phi = -HALF_PI
    else:
        phi = 0.0

    if phi < 0.0:
        phi += TWO_PI
    return phi


@function_logger(__name__)
def cartesian_to_spherical(coordinate: CartesianCoordinate) -> SphericalCoordinate:
    """Convert a Cartesian coordinate into the spherical coordinate of the same point.

    Args:
        coordinate: the point to convert

    Returns:
        SphericalCoordinate: a new coordinate, with theta = phi = 0 at the origin

    Examples:
        >>> cartesian_to_spherical(CartesianCoordinate.new(-1, 0, 0)).round(1)
        SphericalCoordinate(rho=1.0, theta=1.6, phi=3.1)

    """
    x, y, z = coordinate.components()
    delta = math.hypot(x, y)
    rho = math.hypot(x, y, z)

    theta = _polar_angle(delta, z)
    phi = _azimuth(x, y)

    # NaN compares false against every bound, so this cannot raise for NaN input
    return SphericalCoordinate.new(rho, theta, phi)


@function_logger(__name__)
def spherical_to_cartesian(coordinate: SphericalCoordinate) -> CartesianCoordinate:
    """Convert a spherical coordinate into the Cartesian coordinate of the same point.

    Examples:
        >>> spherical_to_cartesian(SphericalCoordinate.new(1, HALF_PI, PI)).round(1)
        CartesianCoordinate(x=-1.0, y=0.0, z=0.0)

    """
    rho, theta, phi = coordinate.components()
    x = rho * math.sin(theta) * math.cos(phi)
    y = rho * math.sin(theta) * math.sin(phi)
    z = rho * math.cos(theta)
    return CartesianCoordinate.new(x, y, z)
