"""Command line interface for the site core."""

from .site import site

__all__ = ["site"]
