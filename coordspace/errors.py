"""Coordspace-specific exception hierarchy."""

import coordspace


class CoordspaceError(Exception):
    """Base class for all coordspace-specific exceptions.
    It automatically prepends the coordspace version to help with debugging reports.
    """

    def __init__(self, message: str):
        self.coordspace_version = getattr(coordspace, "__version__", "unknown")
        # Store the original message cleanly for programmatic access
        self.original_message = message
        full_message = f"[coordspace {self.coordspace_version}] {message}"
        super().__init__(full_message)


class ValidationError(CoordspaceError, ValueError):
    """Raised when a coordinate component lies outside its legal range.

    Examples: a negative radial distance, or a polar angle larger than pi.
    """

    def __init__(self, field: str, value: float):
        self.field = field
        self.value = value
        message = f"{field} = {value} is out of bounds"
        super().__init__(message)
