"""
Package version.

Read by hatchling at build time through ``[tool.hatch.version]``.
"""

__version__ = "0.1.0"
