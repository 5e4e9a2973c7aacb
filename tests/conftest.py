"""Shared pytest fixtures for nice_ticks test suite."""

import pytest
from nice_ticks import StepOptions, TickAxis


# ============== Warning Filters ==============
# Fallback scales are expected in several edge-case tests

def pytest_configure(config):
    """Configure pytest warning filters for expected warnings."""
    config.addinivalue_line(
        "filterwarnings",
        "ignore:No preferred tick count:UserWarning"
    )


# ============== Option Fixtures ==============

@pytest.fixture
def default_options():
    """StepOptions with every field at its default."""
    return StepOptions()


@pytest.fixture
def fine_options():
    """Options allowing steps far below the default 0.01 floor."""
    return StepOptions(min_step=1e-6)


@pytest.fixture
def wide_options():
    """Options allowing steps up to 1e14."""
    return StepOptions(max_step=1e14, max_exponent=14)


# ============== Range Fixtures ==============

@pytest.fixture(params=[(0, 1), (-3.7, 12.2), (17, 18.5), (-1e6, 2.5e6), (0.25, 0.75), (3, 97)])
def value_range(request):
    """A selection of ranges with aligned and unaligned ends."""
    return request.param


@pytest.fixture
def basic_axis():
    """An axis spanning 0 to 1000 with the default preferences."""
    return TickAxis(lo=0, hi=1000)
