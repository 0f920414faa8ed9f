"""Test utilities for nattramn applications.

    from nattramn.testing import TestClient
"""

from nattramn.testing.client import TestClient

__all__ = ["TestClient"]
