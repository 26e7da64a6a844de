"""Exceptions raised by the shell around the core (config, CLI lookups).

The computational core never raises for documented inputs; these are for
the pieces that touch files and user input.
"""

from __future__ import annotations


class SkytermError(Exception):
    """Base class for skyterm errors."""


class ConfigError(SkytermError):
    """Configuration file exists but cannot be used."""


class UnknownObjectError(SkytermError):
    """A name given on the command line matched no catalog object."""

    def __init__(self, name: str):
        super().__init__(f"no star, planet or deep-sky object matches {name!r}")
        self.name = name
