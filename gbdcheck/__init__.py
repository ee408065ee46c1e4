"""Growable vector container and the catalogue of display-list diagnostics."""

__version__ = "0.1.0"
__all__ = ["diagnostics", "vector"]