"""Protocols shared by the coordinate types of coordspace.

This module provides:
- ``Coordinate``: A Protocol defining the capability set every coordinate
  variant offers (validated construction, canonical zero, rounding).
- ``ComponentsLike``: the type of raw input accepted when building a
  coordinate from an existing sequence or array.

Design philosophy:
    - Composition over inheritance: ``CartesianCoordinate`` and
      ``SphericalCoordinate`` share no base class. Each supplies its own
      validation and rounding.
    - Protocol for structural typing: any class exposing the methods below
      satisfies Coordinate, regardless of class hierarchy.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, Self, runtime_checkable

import numpy as np
from numpy.typing import NDArray

# Raw components accepted by ``from_array``.
# - Sequence[float] for plain tuples and lists
# - NDArray[np.floating] for positions coming from numpy based host code
ComponentsLike = Sequence[float] | NDArray[np.floating]


@runtime_checkable
class Coordinate(Protocol):
    """Protocol for a point in 3-D space expressed in some coordinate system.

    Examples:
        Using as a type hint for system-agnostic functions::

            from coordspace.protocols import Coordinate

            def same_point(a: Coordinate, b: Coordinate, precision: int = 1) -> bool:
                return a.round(precision) == b.round(precision)

        Runtime checking::

            from coordspace import CartesianCoordinate

            assert isinstance(CartesianCoordinate.zero(), Coordinate)

    """

    @classmethod
    def new(cls, a: float, b: float, c: float) -> Self:
        """Build a coordinate from three raw components.

        Raises:
            ValidationError: if a component lies outside the legal range of
                the coordinate system.

        """
        ...

    @classmethod
    def zero(cls) -> Self:
        """Return the canonical origin of the coordinate system."""
        ...

    def round(self, precision: int | None = None) -> Self:
        """Return a copy with every component rounded to ``precision`` decimal digits."""
        ...

    def components(self) -> tuple[float, float, float]:
        """Return the three components in declaration order."""
        ...

    def to_array(self) -> NDArray[np.float64]:
        """Return the components as a float64 array of shape (3,)."""
        ...
