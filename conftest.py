import pytest

from catalog.library import Library
from catalog.ui_helpers import OUTPUT_MODE_ENV


@pytest.fixture
def lib():
    # Every test gets its own empty catalog
    return Library()


@pytest.fixture(autouse=True)
def plain_output(monkeypatch):
    monkeypatch.setenv(OUTPUT_MODE_ENV, "plain")
    yield
