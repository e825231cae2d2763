import os
import tempfile
import pytest
from ssqr.cache import store as cache_store
from ssqr.core import config

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment with an isolated cache file and mock remote"""
    # Store original values
    original_cache_path = cache_store.CACHE_PATH
    original_use_mock = config.settings.USE_MOCK

    # Point the cache at a fresh temporary directory
    temp_dir = tempfile.TemporaryDirectory()
    cache_store.CACHE_PATH = os.path.join(temp_dir.name, "ss.html")
    config.settings.USE_MOCK = True  # Never reach the real remote from tests

    yield

    # Restore original values
    cache_store.CACHE_PATH = original_cache_path
    config.settings.USE_MOCK = original_use_mock

    temp_dir.cleanup()
