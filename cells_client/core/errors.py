"""
Core error types for the Cells model layer.

Model conversion itself never raises; these exceptions cover the
boundaries around it (configuration, Swagger documents, registry lookups)
so that callers such as the CLI can handle them in a consistent way.
"""

from __future__ import annotations


class CellsError(Exception):
    """
    Base exception for all errors raised by this package.
    """


class ConfigError(CellsError):
    """
    Raised when configuration is missing, invalid, or inconsistent.
    """


class SchemaError(CellsError):
    """
    Raised when a Swagger document cannot be read or does not have the
    expected shape.
    """


class UnknownModelError(CellsError):
    """
    Raised when a model name is looked up but was never registered.
    """
