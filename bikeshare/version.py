"""
Version
-------

Defines the version of the package.

.. autodata:: bikeshare.version.__version__
"""

__version__ = "1.0.0"
"""The current version."""

name = "bikeshare"
