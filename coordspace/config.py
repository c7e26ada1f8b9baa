"""Package-wide settings for coordspace.

Settings behave like a mutable mapping that also allows attribute access::

    from coordspace.config import settings

    settings.default_precision = 3
    settings["default_precision"]  # 3

Assignments are validated, so a bad value fails where it is set rather
than later inside a rounding call.
"""

from collections.abc import Callable, MutableMapping
from typing import Any, ClassVar

from coordspace.coordspace_logging import create_module_logger

_logger = create_module_logger()


def check_precision(precision: Any) -> int:
    """Return precision if it is a non-negative integer, raise ValueError otherwise."""
    # bool is an int subclass but never a meaningful digit count
    if isinstance(precision, bool) or not isinstance(precision, int):
        raise ValueError(
            f"precision must be a non-negative integer, got {precision!r}"
        )
    if precision < 0:
        raise ValueError(f"precision must be a non-negative integer, got {precision}")
    return precision


class Settings(MutableMapping):
    """Mutable mapping holding coordspace configuration.

    Attributes:
        default_precision: number of decimal digits used by ``round()``
            when it is called without an explicit precision.

    """

    defaults: ClassVar[dict[str, Any]] = {"default_precision": 1}
    validators: ClassVar[dict[str, Callable[[Any], Any]]] = {
        "default_precision": check_precision,
    }

    __slots__ = ("__dict__",)

    def __init__(self, **kwargs):
        """Initialize the settings.

        Args:
            kwargs: overrides for the default values

        """
        self.reset()
        for key, value in kwargs.items():
            self[key] = value

    def __setitem__(self, key, value):  # noqa: D105
        validator = self.validators.get(key)
        if validator is not None:
            value = validator(value)
        _logger.debug(f"setting {key} to {value!r}")
        self.__dict__[key] = value

    def __getitem__(self, key):  # noqa: D105
        return self.__dict__[key]

    def __delitem__(self, key):  # noqa: D105
        if key in self.defaults:
            raise KeyError(f"cannot delete built-in setting {key!r}")
        del self.__dict__[key]

    def __iter__(self):  # noqa: D105
        return iter(self.__dict__)

    def __len__(self):  # noqa: D105
        return len(self.__dict__)

    def __setattr__(self, key, value):  # noqa: D105
        if key not in self.__slots__:
            self.__setitem__(key, value)
        else:
            super().__setattr__(key, value)

    def __delattr__(self, key):  # noqa: D105
        if key not in self.__slots__:
            self.__delitem__(key)
        else:
            super().__delattr__(key)

    def __repr__(self):  # noqa: D105
        return f"{type(self).__name__}({self.__dict__!r})"

    def reset(self) -> None:
        """Restore every setting to its default value."""
        self.__dict__.clear()
        self.__dict__.update(self.defaults)

    def to_dict(self):
        """Return a dict representation of the settings."""
        return self.__dict__.copy()


settings = Settings()
