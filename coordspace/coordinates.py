"""Cartesian and spherical coordinates in 3-D space.

Core Objects: CartesianCoordinate, SphericalCoordinate

Both classes are immutable value types. They share their capabilities
through the ``coordspace.protocols.Coordinate`` protocol rather than a
common base class. Conversion between the two lives in
``coordspace.conversion`` and is also exposed as ``from_cartesian`` and
``from_spherical`` class methods.
"""

from __future__ import annotations

import math
import sys
from dataclasses import dataclass
from typing import TYPE_CHECKING, Self, TypeVar

import numpy as np

from coordspace.config import check_precision, settings
from coordspace.coordspace_logging import create_module_logger, method_logger
from coordspace.errors import ValidationError

if TYPE_CHECKING:
    from numpy.typing import NDArray

    from coordspace.protocols import ComponentsLike

__all__ = [
    "HALF_PI",
    "PI",
    "TWO_PI",
    "CartesianCoordinate",
    "SphericalCoordinate",
    "round_half_away_from_zero",
]

PI = math.pi
TWO_PI = PI * 2.0
HALF_PI = PI / 2.0

# beyond this, 10**precision no longer fits in a float
_MAX_PRECISION = sys.float_info.max_10_exp

_logger = create_module_logger()


def round_half_away_from_zero(value: float, precision: int) -> float:
    """Round value to precision decimal digits, ties going away from zero.

    The value is scaled by 10**precision, rounded to the nearest integer and
    scaled back. Non-finite values, and values whose scaled form overflows,
    are returned unchanged.

    Args:
        value: the number to round
        precision: number of decimal digits to keep, must be non-negative

    Returns:
        float: the rounded value

    """
    if precision > _MAX_PRECISION:
        return value
    scale = 10.0**precision
    scaled = value * scale
    if not math.isfinite(scaled):
        return value
    magnitude = abs(scaled)
    # magnitude - floor(magnitude) is exact, magnitude + 0.5 is not
    rounded = math.floor(magnitude)
    if magnitude - rounded >= 0.5:
        rounded += 1.0
    return math.copysign(rounded, scaled) / scale


def _round_components(
    components: tuple[float, float, float], precision: int | None
) -> tuple[float, float, float]:
    if precision is None:
        precision = settings.default_precision
    precision = check_precision(precision)
    a, b, c = (round_half_away_from_zero(v, precision) for v in components)
    return a, b, c


def _components_from_array(values: ComponentsLike) -> tuple[float, float, float]:
    array = np.asarray(values, dtype=np.float64)
    if array.shape != (3,):
        raise ValueError(
            f"expected exactly three components, got an array of shape {array.shape}"
        )
    a, b, c = array.tolist()
    return a, b, c


C = TypeVar("C")


def _origin(cls: type[C]) -> C:
    try:
        return cls.new(0.0, 0.0, 0.0)
    except ValidationError as e:
        raise AssertionError(f"the origin must be a valid {cls.__name__}") from e


@dataclass(frozen=True)
class CartesianCoordinate:
    """A point given by its distances along the x, y and z axes.

    The components are unconstrained. NaN and infinity are not rejected,
    but no operation gives them a meaningful result.

    Attributes:
        x: distance along the x-axis
        y: distance along the y-axis
        z: distance along the z-axis

    """

    x: float
    y: float
    z: float

    @classmethod
    @method_logger(__name__)
    def new(cls, x: float, y: float, z: float) -> Self:
        """Create a new Cartesian coordinate. This never fails."""
        return cls(float(x), float(y), float(z))

    @classmethod
    def zero(cls) -> Self:
        """Return the origin (0, 0, 0)."""
        return _origin(cls)

    @classmethod
    def from_array(cls, values: ComponentsLike) -> Self:
        """Create a coordinate from a sequence or array holding x, y and z.

        Raises:
            ValueError: if values does not hold exactly three numbers

        """
        return cls.new(*_components_from_array(values))

    @classmethod
    def from_spherical(cls, coordinate: SphericalCoordinate) -> CartesianCoordinate:
        """Create the Cartesian coordinate of the same point as ``coordinate``."""
        from coordspace.conversion import spherical_to_cartesian

        return spherical_to_cartesian(coordinate)

    def round(self, precision: int | None = None) -> Self:
        """Return a copy with x, y and z rounded to ``precision`` decimal digits.

        Args:
            precision: number of decimal digits, defaults to
                ``settings.default_precision``

        Raises:
            ValueError: if precision is not a non-negative integer

        """
        return type(self)(*_round_components(self.components(), precision))

    def components(self) -> tuple[float, float, float]:
        """Return (x, y, z)."""
        return self.x, self.y, self.z

    def to_array(self) -> NDArray[np.float64]:
        """Return (x, y, z) as a float64 array of shape (3,)."""
        return np.array(self.components(), dtype=np.float64)


@dataclass(frozen=True)
class SphericalCoordinate:
    """A point given by its distance from the origin and two angles.

    Attributes:
        rho: radial distance from the origin, at least 0
        theta: polar angle from the positive z-axis, within [0, pi]
        phi: azimuthal angle in the x-y plane from the positive x-axis,
            within [0, 2 * pi]

    Notes:
        Always create instances through ``new`` (or ``zero``, ``from_array``,
        ``from_cartesian``), which enforce the ranges above. The generated
        initializer does not validate: ``round`` uses it because rounding may
        nudge an angle just past its bound, e.g. phi = 2 * pi rounded to one
        digit is 6.3. Rounded copies are meant for comparison only.

    """

    rho: float
    theta: float
    phi: float

    @classmethod
    @method_logger(__name__)
    def new(cls, rho: float, theta: float, phi: float) -> Self:
        """Create a new spherical coordinate.

        The checks run in the order rho, theta, phi and the first violation
        is reported.

        Raises:
            ValidationError: if rho is negative, theta lies outside [0, pi]
                or phi lies outside [0, 2 * pi]

        """
        rho, theta, phi = float(rho), float(theta), float(phi)
        if rho < 0.0:
            field, value = "rho", rho
        elif theta < 0.0 or theta > PI:
            field, value = "theta", theta
        elif phi < 0.0 or phi > TWO_PI:
            field, value = "phi", phi
        else:
            return cls(rho, theta, phi)

        _logger.debug(f"rejecting {cls.__name__}: {field} = {value} is out of bounds")
        raise ValidationError(field, value)

    @classmethod
    def zero(cls) -> Self:
        """Return the origin, with both angles 0 by convention."""
        return _origin(cls)

    @classmethod
    def vertical_unit(cls) -> Self:
        """Return the unit point on the positive z-axis."""
        return cls.new(1.0, 0.0, 0.0)

    @classmethod
    def horizontal_unit(cls) -> Self:
        """Return the unit point on the positive x-axis."""
        return cls.new(1.0, HALF_PI, 0.0)

    @classmethod
    def from_array(cls, values: ComponentsLike) -> Self:
        """Create a coordinate from a sequence or array holding rho, theta and phi.

        Raises:
            ValueError: if values does not hold exactly three numbers
            ValidationError: if a component is out of range

        """
        return cls.new(*_components_from_array(values))

    @classmethod
    def from_cartesian(cls, coordinate: CartesianCoordinate) -> SphericalCoordinate:
        """Create the spherical coordinate of the same point as ``coordinate``."""
        from coordspace.conversion import cartesian_to_spherical

        return cartesian_to_spherical(coordinate)

    def round(self, precision: int | None = None) -> Self:
        """Return a copy with rho, theta and phi rounded to ``precision`` decimal digits.

        The copy is not validated again, see the class notes.

        Args:
            precision: number of decimal digits, defaults to
                ``settings.default_precision``

        Raises:
            ValueError: if precision is not a non-negative integer

        """
        return type(self)(*_round_components(self.components(), precision))

    def components(self) -> tuple[float, float, float]:
        """Return (rho, theta, phi)."""
        return self.rho, self.theta, self.phi

    def to_array(self) -> NDArray[np.float64]:
        """Return (rho, theta, phi) as a float64 array of shape (3,)."""
        return np.array(self.components(), dtype=np.float64)
