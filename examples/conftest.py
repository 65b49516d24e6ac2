"""Shared pytest configuration for the sveltefmt examples.

Each example directory holds an ``app.py`` that formats a component at
import time and a test module that checks what it produced.
"""

import runpy
from pathlib import Path
from types import SimpleNamespace

import pytest


@pytest.fixture
def example_app(request: pytest.FixtureRequest) -> SimpleNamespace:
    """Run the app.py beside the requesting test and expose its globals."""
    app_path = Path(request.path).with_name("app.py")
    return SimpleNamespace(**runpy.run_path(str(app_path)))
