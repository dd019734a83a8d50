"""
Runtime models built from Swagger 2.0 definitions.

``load_swagger`` turns the ``definitions`` section of a Cells (or any
Swagger 2.0) document into ``BaseDTO`` dataclasses and enums, registered
next to the built-in models.
"""

from .loader import build_models, load_swagger, to_snake_case

__all__ = ["build_models", "load_swagger", "to_snake_case"]
