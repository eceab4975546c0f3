"""Domain models for the property catalog."""

from prop_catalog.models.base import Address

__all__ = ["Address"]
