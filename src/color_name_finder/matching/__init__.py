"""
matching.
========

Does: Group the color core (`color`), shared helpers (`general`), settings,
      and the finder orchestration.
"""

from __future__ import annotations

__all__: list[str] = []
__docformat__ = "google"
