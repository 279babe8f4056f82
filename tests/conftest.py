"""Shared test fixtures for the donut chart engine."""
import pytest
from donut.data import Palette, normalize
from donut.render import render
from donut.settings import DEFAULT_SETTINGS


class RecordingAuthority:
    """Selection authority that records every call."""

    def __init__(self):
        self.calls = []

    def select(self, key, additive):
        self.calls.append(("select", key, additive))

    def clear(self):
        self.calls.append(("clear",))


@pytest.fixture
def authority():
    return RecordingAuthority()


@pytest.fixture(scope="session")
def ab_rows():
    return [("A", 30, None), ("B", 70, None)]


@pytest.fixture(scope="session")
def ab_data(ab_rows):
    return normalize(ab_rows, Palette().get_color)


@pytest.fixture(scope="session")
def ab_result(ab_rows):
    """Default-settings render of A=30, B=70 on a 600x400 viewport."""
    return render(ab_rows, (600, 400), DEFAULT_SETTINGS, Palette())


@pytest.fixture(scope="session")
def filtered_rows():
    """Cross-filtered rows: A half selected, B not at all, C fully."""
    return [("A", 40, 20), ("B", 40, 0), ("C", 20, 20)]
