"""Testing utilities for shellgate applications."""

from shellgate.testing.client import TestClient

__all__ = ["TestClient"]
