"""Pytest configuration for tests.

Sets up Python path and fixtures for all tests.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to Python path so imports work correctly
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


def build_response(status_code=200, json_data=None, text=None):
    """Build a mock httpx response; ``json_data=None`` makes .json() raise."""
    response = MagicMock()
    response.status_code = status_code
    if json_data is None:
        response.json = MagicMock(side_effect=ValueError("Expecting value"))
        response.text = text or ""
    else:
        response.json = MagicMock(return_value=json_data)
        response.text = text or str(json_data)
    return response


@pytest.fixture
def make_response():
    """Factory fixture for mock httpx responses."""
    return build_response
