"""In-memory store for the unit catalog."""

from prop_catalog.store.catalog import CatalogStore

__all__ = ["CatalogStore"]
