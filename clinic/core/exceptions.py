from __future__ import annotations


class ClinicError(Exception):
    """Base class for errors that must not be absorbed by the menus."""


class ConfigurationError(ClinicError):
    pass


__all__ = ["ClinicError", "ConfigurationError"]
