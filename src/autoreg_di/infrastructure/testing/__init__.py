"""
Testing utilities module.

Provides helpers for testing applications that rely on autoreg-di scanning.
"""

from .utilities import RecordingSink, create_scanned_container

__all__ = [
    "RecordingSink",
    "create_scanned_container",
]
