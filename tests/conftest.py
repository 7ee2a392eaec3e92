# pytest configuration for fixedset tests

import os

import psutil
import pytest
from hypothesis import settings


# ============================================================================
# Test Markers
# ============================================================================

def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "fast: Fast tests (<1 second) - run on every commit"
    )
    config.addinivalue_line(
        "markers",
        "property: Randomized property-based tests"
    )


# ============================================================================
# Test Configuration
# ============================================================================

class TestConfig:
    """Configuration for test parameters based on environment."""

    __test__ = False

    @staticmethod
    def test_mode():
        """Get test mode from environment."""
        return os.getenv("FIXEDSET_TEST_MODE", "FAST").upper()

    @classmethod
    def example_count(cls):
        """Number of hypothesis examples per property test."""
        mode = cls.test_mode()
        if mode == "MEDIUM":
            return 500
        elif mode == "STRESS":
            return 5000
        else:
            return 100


settings.register_profile("fixedset", max_examples=TestConfig.example_count(), deadline=None)
settings.load_profile("fixedset")


@pytest.fixture(scope="session")
def test_config():
    """Provide test configuration to all tests."""
    return TestConfig()


# ============================================================================
# Memory Check
# ============================================================================

@pytest.fixture
def low_memory(monkeypatch):
    """Pretend the machine has only 1 KiB of available memory."""

    class _VirtualMemory:
        available = 1024

    monkeypatch.setattr(psutil, "virtual_memory", lambda: _VirtualMemory())
    monkeypatch.delenv("FIXEDSET_CHECK_MEMORY", raising=False)


# ============================================================================
# Pytest Hooks
# ============================================================================

def pytest_report_header(config):
    """Add custom information to test report header."""
    return [
        "fixedset Test Configuration:",
        f"  Mode: {TestConfig.test_mode()}",
        f"  Examples per property: {TestConfig.example_count()}",
    ]
