"""This provides logging functionality for coordspace.

It is built on the standard library logging module. All loggers live
under a single root logger named ``COORDSPACE``, so a host application
can switch coordspace output on or off in one place.

The basic idea is that each module creates its own logger through
create_module_logger. Functions and methods can be decorated with
function_logger or method_logger so every call is logged at debug level
together with its arguments.

"""

import inspect
import logging
from functools import wraps
from logging import DEBUG, INFO

__all__ = [
    "DEBUG",
    "DEFAULT_LEVEL",
    "INFO",
    "LOGGER_NAME",
    "create_module_logger",
    "function_logger",
    "get_module_logger",
    "get_rootlogger",
    "log_to_stderr",
    "method_logger",
]
LOGGER_NAME = "COORDSPACE"
DEFAULT_LEVEL = DEBUG

_rootlogger = logging.getLogger(LOGGER_NAME)
_rootlogger.addHandler(logging.NullHandler())

_module_loggers: dict[str, logging.Logger] = {}


def create_module_logger(name: str | None = None) -> logging.Logger:
    """Helper function for creating a module logger.

    Args:
        name (str): The name to be given to the logger. If the name is None, the name defaults to the name of the module.

    """
    if name is None:
        frm = inspect.stack()[1]
        mod = inspect.getmodule(frm[0])
        name = mod.__name__
    logger = logging.getLogger(f"{LOGGER_NAME}.{name}")

    _module_loggers[name] = logger
    return logger


def get_module_logger(name: str) -> logging.Logger:
    """Helper function for getting the module logger.

    Args:
        name (str): The name of the module in which the method being decorated is located

    """
    try:
        logger = _module_loggers[name]
    except KeyError:
        logger = create_module_logger(name)

    return logger


def method_logger(name: str):
    """Decorator for adding logging to a method.

    Args:
        name (str): The name of the module in which the method being decorated is located

    """
    logger = get_module_logger(name)
    classname = inspect.getouterframes(inspect.currentframe())[1][3]

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            # f-strings are formatted eagerly
            if logger.isEnabledFor(DEBUG):
                logger.debug(
                    f"calling {classname}.{func.__name__} with {args[1::]} and {kwargs}"
                )
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def function_logger(name: str):
    """Decorator for adding logging to a function.

    Args:
        name (str): The name of the module in which the function being decorated is located

    """
    logger = get_module_logger(name)

    def real_decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            if logger.isEnabledFor(DEBUG):
                logger.debug(f"calling {func.__name__} with {args} and {kwargs}")
            return func(*args, **kwargs)

        return wrapper

    return real_decorator


def get_rootlogger() -> logging.Logger:
    """Return the root logger of coordspace."""
    return _rootlogger


def log_to_stderr(
    level: int | None = None, pass_root_logger_level: bool = False
) -> logging.Logger:
    """Turn on logging and add a handler which prints to stderr.

    Args:
        level: minimum level of the messages that will be logged
        pass_root_logger_level: bool, optional. Default False
            if True, all module loggers will be set to the same logging level as the root logger.

    """
    if not level:
        level = DEFAULT_LEVEL

    logger = get_rootlogger()

    formatter = logging.Formatter(
        "[%(levelname)s] [%(name)s] [%(funcName)s:%(lineno)d] %(message)s"
    )

    # avoid creating multiple stderr handlers
    if not any(isinstance(h, logging.StreamHandler) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    else:
        for h in logger.handlers:
            h.setLevel(level)

    logger.setLevel(level)
    logger.propagate = False

    if pass_root_logger_level:
        for _, mod_logger in _module_loggers.items():
            mod_logger.setLevel(level)

    return logger
