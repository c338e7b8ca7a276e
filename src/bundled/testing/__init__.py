"""Test utilities for bundled applications::

    from bundled.testing import TestClient
"""

from bundled.testing.client import TestClient

__all__ = ["TestClient"]
