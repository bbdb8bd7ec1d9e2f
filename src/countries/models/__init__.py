"""Domain models."""

from .country import Country

__all__ = ["Country"]
