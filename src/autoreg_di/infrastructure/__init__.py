"""
Infrastructure layer - External integrations.

This layer contains environment-driven settings and testing helpers.
It depends on both Application and Domain layers.
"""

from . import settings, testing

__all__ = [
    "settings",
    "testing",
]
