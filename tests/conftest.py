import os

import pytest

from cmsfields.config import configure


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch):
    """Isolate every test from CMSFIELDS_* variables and active settings"""
    for key in list(os.environ):
        if key.startswith("CMSFIELDS_"):
            monkeypatch.delenv(key)

    configure(None)
    yield
    configure(None)
