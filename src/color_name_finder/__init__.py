"""
color_name_finder
=================

Does: Root package initializer for the nearest named-color finder.
Returns: Exposes internal subpackages (`matching`, `cli`) through a stable namespace.
Used by: All higher-level imports starting from `color_name_finder.*`.
"""

__all__: list[str] = []
__version__ = "0.1.0"
__docformat__ = "google"
