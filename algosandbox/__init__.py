"""Data structures and Linux namespace and networking helpers."""

__version__ = "0.1.0"