"""Tests for coordspace.coordspace_logging."""

import logging

import pytest

from coordspace import CartesianCoordinate, SphericalCoordinate, ValidationError
from coordspace.conversion import cartesian_to_spherical
from coordspace.coordspace_logging import (
    LOGGER_NAME,
    _module_loggers,
    create_module_logger,
    function_logger,
    get_module_logger,
    get_rootlogger,
    log_to_stderr,
    method_logger,
)


@pytest.fixture
def rootlogger():
    """Give access to the coordspace root logger and restore its state afterwards."""
    logger = get_rootlogger()
    handlers = list(logger.handlers)
    level = logger.level
    propagate = logger.propagate
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
    logger.propagate = propagate
    for module_logger in _module_loggers.values():
        module_logger.setLevel(logging.NOTSET)


def test_module_logger_naming():
    """Module loggers live below the coordspace root logger."""
    logger = create_module_logger("some.module")
    assert logger.name == f"{LOGGER_NAME}.some.module"
    assert get_module_logger("some.module") is logger

    # the caller's module name is used when no name is given
    assert create_module_logger().name == f"{LOGGER_NAME}.{__name__}"


def test_function_logger(caplog):
    """Decorated functions log their arguments and still return their result."""

    @function_logger(__name__)
    def add(a, b=0):
        return a + b

    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        assert add(1, b=2) == 3

    assert "calling add with (1,) and {'b': 2}" in caplog.text


def test_method_logger(caplog):
    """Decorated methods log the class name and drop self from the arguments."""

    class Point:
        @method_logger(__name__)
        def scale(self, factor):
            return factor * 2

    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        assert Point().scale(3) == 6

    assert "calling Point.scale with (3,) and {}" in caplog.text


def test_conversion_and_validation_are_logged(caplog):
    """Conversions and rejected coordinates show up at debug level."""
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        cartesian_to_spherical(CartesianCoordinate.new(1, 2, 3))
        with pytest.raises(ValidationError):
            SphericalCoordinate.new(-1, 0, 0)

    assert "calling cartesian_to_spherical" in caplog.text
    assert "calling SphericalCoordinate.new with (-1, 0, 0)" in caplog.text
    assert "rejecting SphericalCoordinate: rho = -1.0 is out of bounds" in caplog.text


def test_silent_by_default(caplog):
    """Nothing is recorded at the default warning level."""
    with caplog.at_level(logging.WARNING):
        cartesian_to_spherical(CartesianCoordinate.new(1, 2, 3))
    assert caplog.records == []


def test_log_to_stderr(rootlogger):
    """log_to_stderr adds a single stream handler to the root logger."""
    logger = log_to_stderr(logging.INFO)
    assert logger is rootlogger
    assert logger.level == logging.INFO
    assert not logger.propagate

    stream_handlers = [
        h for h in logger.handlers if isinstance(h, logging.StreamHandler)
    ]
    assert len(stream_handlers) == 1

    # calling again reuses the existing handler
    log_to_stderr(logging.DEBUG, pass_root_logger_level=True)
    stream_handlers = [
        h for h in logger.handlers if isinstance(h, logging.StreamHandler)
    ]
    assert len(stream_handlers) == 1
    assert stream_handlers[0].level == logging.DEBUG
    assert get_module_logger("coordspace.coordinates").level == logging.DEBUG


def test_class_method_conversion_validates_once(caplog):
    """from_cartesian builds its result through a single call to new."""
    with caplog.at_level(logging.DEBUG, logger=LOGGER_NAME):
        SphericalCoordinate.from_cartesian(CartesianCoordinate(1.0, 2.0, 3.0))

    assert caplog.text.count("calling SphericalCoordinate.new") == 1
    assert caplog.text.count("calling cartesian_to_spherical") == 1
