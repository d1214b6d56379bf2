"""A grid-based snake arcade game built with pygame."""

__version__ = "0.1.0"
__all__ = ["__version__"]