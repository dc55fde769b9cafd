"""Shared fixtures."""
import pytest
from proptypes.config import get_config_manager
from proptypes.utils import LoggerFactory


@pytest.fixture(autouse=True)
def reset_global_state():
    """Restore global configuration and logging after each test."""
    yield
    get_config_manager().reset()
    LoggerFactory.configure()


