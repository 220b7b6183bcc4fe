"""Test utilities for plumage apps.

::

    from plumage.testing import TestClient
"""

from plumage.testing.client import TestClient

__all__ = ["TestClient"]
