import pytest
from loguru import logger

from geouri import Location


@pytest.fixture
def location() -> Location:
    """Creates the location used in the RFC 5870 examples."""
    return Location(latitude=52.107, longitude=5.134, altitude=3.6, uncertainty=1000.0)


@pytest.fixture
def caplog(caplog):
    """Enable logging for the package"""
    logger.remove()
    logger.enable("geouri")
    handler_id = logger.add(caplog.handler, level="DEBUG", format="{message}")
    yield caplog
    logger.remove(handler_id)
    logger.disable("geouri")
