# conf.py

"""
Configuring typedmap
~~~~~~~~~~~~~~~~~~~~

Various aspects of typedmap's behavior can be configured.

When typedmap is imported, it checks for a YAML file named
``typedmap_config.yml`` in the current directory and automatically loads it if
it exists; otherwise the default configuration is used.

.. only:: never

    This py.test fixture resets typedmap config back to defaults after running
    this doctest. This will not be shown in the output markup.

    >>> getfixture('restore_config_afterwards')

The various settings are listed here with their defaults.

    >>> import typedmap
    >>> defaults = typedmap.config.defaults()

Print the ``config`` object to see the current settings:

    >>> print(typedmap.config)  # doctest: +SKIP
    { 'COPY_STRATEGY': 'shallow',
      'LOG_FILE': 'typedmap.log',
      ...

Setting can be changed on the fly by assigning them a new value:

    >>> typedmap.config.COPY_STRATEGY = 'deep'

It is also possible to manually load a configuration file:

    >>> typedmap.config.load_file('typedmap_config.yml')  # doctest: +SKIP

Or load a dictionary of configuration values:

    >>> typedmap.config.load_dict({'REPR_MAX_ITEMS': 3})


The ``config`` API
~~~~~~~~~~~~~~~~~~
"""

# pylint: disable=protected-access

import contextlib
import functools
import logging
import logging.config
import os
import pprint
from copy import copy
from pathlib import Path

import yaml

from . import __about__
from .exceptions import ConfigurationError

log = logging.getLogger(__name__)

_VALID_LOG_LEVELS = [None, "CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"]


class Option:
    """A descriptor implementing typedmap configuration options.

    Args:
        default: The default value of this ``Option``.

    Keyword Args:
        values (list): Allowed values for this option. A
            ``ConfigurationError`` will be raised if ``values`` is not ``None``
            and the option is set to be a value not in the list.
        type (type | tuple[type]): Required type of the value, if any.
        on_change (function): Optional callback that is called when the value
            of the option is changed. The ``Config`` instance is passed as
            the only argument to the callback.
        doc (str): Optional docstring for the option.
    """

    def __init__(self, default, values=None, type=None, on_change=None, doc=None):
        self.default = default
        self.values = values
        self.type = type
        self.on_change = on_change
        self.doc = doc
        self.__doc__ = self._docstring()

    def __set_name__(self, owner, name):
        self.name = name

    def _docstring(self):
        default = "``default={}``".format(repr(self.default))

        values = (
            ", ``values={}``".format(repr(self.values))
            if self.values is not None
            else ""
        )

        on_change = (
            ", ``on_change={}``".format(self.on_change.__name__)
            if self.on_change is not None
            else ""
        )

        return "{}{}{}\n{}".format(default, values, on_change, self.doc or "")

    def __get__(self, obj, cls=None):
        if obj is None:
            return self
        return obj._values[self.name]

    def __set__(self, obj, value):
        previous = obj._values[self.name]
        try:
            self._validate(value)
            obj._values[self.name] = value
            self._callback(obj)
        except ConfigurationError as e:
            obj._values[self.name] = previous
            raise e

    def _validate(self, value):
        """Validate the new value."""
        # ``bool`` is an ``int``, but ``True`` is never a sensible count
        if self.type is not None and (
            not isinstance(value, self.type)
            or (isinstance(value, bool) and self.type is int)
        ):
            raise ConfigurationError(
                "{} must be of type {} for {}; got {}".format(
                    value, self.type, self.name, type(value)
                )
            )
        if self.values and value not in self.values:
            raise ConfigurationError(
                "{} ({}) is not a valid value for {}; must be one of:\n    {}".format(
                    value,
                    type(value),
                    self.name,
                    "\n    ".join(["{} ({})".format(v, type(v)) for v in self.values]),
                )
            )

    def _callback(self, obj):
        """Trigger any callbacks."""
        if self.on_change is not None:
            self.on_change(obj)


class Config:
    """Base configuration object.

    See ``TypedMapConfig`` for usage.
    """

    def __init__(self, on_change=None):
        self._values = {}
        self._loaded_files = []
        self._on_change = on_change

        # Set the default value of each ``Option``
        for name, opt in self.options().items():
            opt._validate(opt.default)
            self._values[name] = opt.default

        # Call hooks for each Option
        # (This must happen *after* all default values are set so that
        # logging can be properly configured.)
        for opt in self.options().values():
            opt._callback(self)

            # Insert config-wide hook
            def hook(func):
                if func is None:
                    return self._callback

                @functools.wraps(func)
                def wrapper(*args, **kwargs):
                    func(*args, **kwargs)
                    self._callback(self)

                return wrapper

            opt.on_change = hook(opt.on_change)

        # Call config-wide hook
        self._callback(self)

    def __repr__(self):
        return pprint.pformat(self._values, indent=2)

    def __str__(self):
        return repr(self)

    def __setattr__(self, name, value):
        if name.startswith("_") or name in self.options().keys():
            super().__setattr__(name, value)
        else:
            raise ConfigurationError("{} is not a valid config option".format(name))

    def __getitem__(self, name):
        return self._values[name]

    def _callback(self, obj):
        """Called when any option is changed."""
        if self._on_change is not None:
            self._on_change(obj)

    @classmethod
    def options(cls):
        """Return a dictionary of the ``Option`` objects for this config."""
        return {k: v for k, v in cls.__dict__.items() if isinstance(v, Option)}

    def defaults(self):
        """Return the default values of this configuration."""
        return {k: v.default for k, v in self.options().items()}

    def load_dict(self, dct):
        """Load a dictionary of configuration values."""
        for k, v in dct.items():
            setattr(self, k, v)

    def load_file(self, filename):
        """Load config from a YAML file."""
        filename = os.path.abspath(filename)

        with open(filename, mode="rt") as f:
            self.load_dict(yaml.safe_load(f) or {})

        self._loaded_files.append(filename)

    def snapshot(self):
        """Return a snapshot of the current values of this configuration."""
        return copy(self._values)

    to_dict = snapshot

    def override(self, **new_values):
        """Decorator and context manager to override configuration values.

        The initial configuration values are reset after the decorated function
        returns or the context manager completes it block, even if the function
        or block raises an exception. This is intended to be used by tests
        which require specific configuration values.

        Example:
            >>> from typedmap import config
            >>> @config.override(REPR_MAX_ITEMS=2)
            ... def test_something():
            ...     assert config.REPR_MAX_ITEMS == 2
            ...
            >>> test_something()
            >>> with config.override(COPY_STRATEGY='deep'):
            ...     assert config.COPY_STRATEGY == 'deep'
            ...
        """
        return _override(self, **new_values)


class _override(contextlib.ContextDecorator):
    """See ``Config.override`` for usage."""

    def __init__(self, conf, **new_values):
        self.conf = conf
        self.new_values = new_values
        self.initial_values = conf.snapshot()

    def __enter__(self):
        """Save original config values; override with new ones."""
        self.conf.load_dict(self.new_values)

    def __exit__(self, *exc):
        """Reset config to initial values; reraise any exceptions."""
        self.conf.load_dict(self.initial_values)
        return False


def configure_logging(conf):
    """Reconfigure typedmap logging based on the current configuration."""
    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "standard": {
                    "format": "%(asctime)s [%(name)s] %(levelname)s "
                    "%(processName)s: %(message)s"
                }
            },
            "handlers": {
                "file": {
                    "level": conf.LOG_FILE_LEVEL,
                    "filename": str(conf.LOG_FILE),
                    "class": "logging.FileHandler",
                    "formatter": "standard",
                    "delay": True,
                },
                "stdout": {
                    "level": conf.LOG_STDOUT_LEVEL,
                    "class": "logging.StreamHandler",
                    "formatter": "standard",
                },
            },
            "loggers": {
                __about__.__title__: {
                    "level": "DEBUG",
                    "propagate": False,
                    "handlers": (["file"] if conf.LOG_FILE_LEVEL else [])
                    + (["stdout"] if conf.LOG_STDOUT_LEVEL else []),
                },
            },
        }
    )


class TypedMapConfig(Config):
    """``typedmap.config`` is an instance of this class."""

    COPY_STRATEGY = Option(
        "shallow",
        values=["shallow", "deep"],
        doc="""
    Controls how values are copied when they cross the boundary of a
    |TypedMap| (on insertion, on retrieval, and when a map is cloned by a
    transform). With ``'shallow'`` each value is copied with ``copy.copy``,
    so the map owns its top-level value objects but any mutable state nested
    inside a value is shared. With ``'deep'`` values are copied with
    ``copy.deepcopy``, which extends the immutability guarantee to nested
    state at the cost of slower transforms.""",
    )

    REPR_MAX_ITEMS = Option(
        10,
        type=int,
        doc="""
    The maximum number of entries shown in the ``repr`` of a map. Remaining
    entries are elided.""",
    )

    LOG_FILE = Option(
        "typedmap.log",
        type=(str, Path),
        on_change=configure_logging,
        doc="""
    Controls the name of the log file.""",
    )

    LOG_FILE_LEVEL = Option(
        None,
        values=_VALID_LOG_LEVELS,
        on_change=configure_logging,
        doc="""
    Controls the level of log messages written to the log file. This setting
    has the same possible values as ``LOG_STDOUT_LEVEL``. The file is only
    created once a message is written to it.""",
    )

    LOG_STDOUT_LEVEL = Option(
        "WARNING",
        values=_VALID_LOG_LEVELS,
        on_change=configure_logging,
        doc="""
    Controls the level of log messages written to standard error. Can be one
    of ``'DEBUG'``, ``'INFO'``, ``'WARNING'``, ``'ERROR'``, ``'CRITICAL'``, or
    ``None``. If set to ``None``, console logging is disabled entirely.""",
    )

    def log(self):
        """Log current settings."""
        log.info("typedmap v%s", __about__.__version__)
        if self._loaded_files:
            log.info("Loaded configuration from %s", self._loaded_files)
        else:
            log.info("Using default configuration (no configuration file provided)")
        log.info("Current typedmap configuration:\n %s", str(self))


def validate(config):
    if config.REPR_MAX_ITEMS < 0:
        raise ConfigurationError(
            "REPR_MAX_ITEMS must be non-negative; got {}".format(config.REPR_MAX_ITEMS)
        )


TYPEDMAP_USER_CONFIG_PATH = Path("typedmap_config.yml")

# Instantiate the config object
config = TypedMapConfig(on_change=validate)

try:
    config.load_file(TYPEDMAP_USER_CONFIG_PATH)
except FileNotFoundError:
    pass

# Log the typedmap version and loaded configuration
config.log()
