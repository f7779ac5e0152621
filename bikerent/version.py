"""
Version
-------

The version reported in the API docs and to sentry.

.. autodata:: bikerent.version.__version__
"""

__version__ = "1.0.0"
"""The current version."""

name = "bikerent"
