"""
general.
=======

Shared general-purpose modules (config loading, debug logging) used across
the matching package.
"""

__all__: list[str] = []
