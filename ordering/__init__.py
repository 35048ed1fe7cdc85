"""Functional order lifecycle domain model."""

__version__ = "0.1.0"
