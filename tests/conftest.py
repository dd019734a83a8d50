"""
Shared fixtures.
"""

import pytest

import cells_client.model  # noqa: F401
from cells_client.api_client import register_model, registered_models, unregister_model


@pytest.fixture
def clean_registry():
    """Restore the model registry after a test that loads definitions."""
    before = registered_models()
    yield
    for name, cls in registered_models().items():
        if name not in before:
            unregister_model(name)
        elif before[name] is not cls:
            register_model(before[name], replace=True)
