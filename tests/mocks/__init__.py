"""Mock implementations for testing."""

from tests.mocks.matrix import FakePagesMatrix

__all__ = ["FakePagesMatrix"]
