"""Root test configuration: loguru sink reset between tests"""

import pytest
from loguru import logger


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop sinks added during a test so later tests never log to a closed stream."""
    yield
    logger.remove()
