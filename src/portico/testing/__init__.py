"""Test utilities for portico applications::

    from portico.testing import TestClient
"""

from portico.testing.client import TestClient

__all__ = ["TestClient"]
