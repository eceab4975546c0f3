"""Sample data generators."""

from prop_catalog.generators.address import AddressFactory, DepthDistribution
from prop_catalog.generators.catalog import CatalogGenerator

__all__ = ["AddressFactory", "CatalogGenerator", "DepthDistribution"]
