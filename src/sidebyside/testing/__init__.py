"""Test utilities for sidebyside sites.

    from sidebyside.testing import TestClient
"""

from sidebyside.testing.client import TestClient

__all__ = ["TestClient"]
