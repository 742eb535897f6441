"""Test utilities for mockroute applications.

::

    from mockroute.testing import TestClient
"""

from mockroute.testing.client import TestClient

__all__ = ["TestClient"]
