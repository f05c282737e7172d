import sys

import pytest
from loguru import logger


@pytest.fixture
def clean_logger():
    """모든 sink 제거 후, 종료 시 loguru 기본 stderr sink 복원."""
    logger.remove()
    yield logger
    logger.remove()
    logger.add(sys.stderr)
