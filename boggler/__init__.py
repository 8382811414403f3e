"""Boggler: seeded word-grid generation and word validation."""

__version__ = "0.1.0"
