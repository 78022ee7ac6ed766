"""
Exposes the version of zgdist
"""

__version__ = '0.1.0'

__all__ = ["__version__"]
