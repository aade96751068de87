"""chessmoves — pseudo-legal move listing for static chess positions."""

__version__ = "0.1.0"
