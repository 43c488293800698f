"""Publish/subscribe simulator for video addresses and GPS car tracks."""

__version__ = "1.0.0"
__all__ = ["__version__"]