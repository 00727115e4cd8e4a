"""Arbitrary-precision signed integer calculator working on decimal digit sequences."""

__version__ = "0.1.0"
__all__ = ["__version__"]