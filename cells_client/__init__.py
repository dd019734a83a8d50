"""
Client-side model layer for the Pydio Cells REST API.

This package holds:
- the shared type-conversion utility (`api_client.py`)
- the generated REST models (`model/`)
- a loader that builds models from Swagger definitions (`swagger/`)
- configuration, errors and logging helpers (`core/`)
"""

__version__ = "1.0.0"
