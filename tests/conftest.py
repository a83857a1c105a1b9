"""
Pytest configuration and shared fixtures for organisationsnummer tests.
"""

from datetime import date

import pytest

from organisationsnummer.config import settings


def pytest_addoption(parser):
    parser.addoption(
        "--network",
        action="store_true",
        default=False,
        help="Run tests that fetch remote test data",
    )


def pytest_collection_modifyitems(config, items):
    if config.getoption("--network"):
        return
    skip_network = pytest.mark.skip(reason="needs --network to run")
    for item in items:
        if "network" in item.keywords:
            item.add_marker(skip_network)


@pytest.fixture
def today() -> date:
    """Fixed reference date for age and century calculations."""
    return date(2026, 10, 18)


@pytest.fixture(scope="session")
def testdata() -> list[dict]:
    """Shared organisationsnummer test vectors."""
    import httpx

    try:
        response = httpx.get(settings.testdata_url, timeout=settings.testdata_timeout)
        response.raise_for_status()
    except httpx.HTTPError as e:
        pytest.skip(f"Could not fetch test data: {e}")
    return response.json()
