"""Sample catalog generator producing flat, unordered records."""

from __future__ import annotations

import logging
from decimal import Decimal

from faker import Faker

from prop_catalog.generators.address import AddressFactory, DepthDistribution
from prop_catalog.generators.base import BaseGenerator
from prop_catalog.models.base import Address
from prop_catalog.models.catalog import Status, UnitRecord

logger = logging.getLogger(__name__)


class CatalogGenerator(BaseGenerator):
    """Generate the flat file of a synthetic city.

    Each site is a single parcel or a building split into units, some of
    which may be split again. Subdivided units only sometimes have a row
    of their own, so the output exercises both group synthesis and
    superseded rows in ``HierarchyBuilder``.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    num_sites : int
        Number of main addresses.
    max_depth : int
        Deepest address path generated (>= 2).
    distribution : DepthDistribution | None
        Site depth distribution. Defaults to ``DepthDistribution.default()``.
    shuffle : bool
        Shuffle the records so that they are not depth-sorted.
    fake : Faker | None
        Shared Faker instance.
    """

    # (min, max) square meters per unit
    AREA_RANGE = (30, 400)
    PARCEL_AREA_RANGE = (200, 10000)
    # (min, max) price per square meter
    PRICE_RANGE = (1000, 9000)
    MAX_UNITS_PER_GROUP = 5
    SOLD_RATE = 0.3
    GROUP_ROW_RATE = 0.5

    def __init__(
        self,
        seed: int | None = None,
        num_sites: int = 10,
        max_depth: int = 4,
        distribution: DepthDistribution | None = None,
        shuffle: bool = True,
        fake: Faker | None = None,
    ) -> None:
        if max_depth < 2:
            raise ValueError(f"max_depth must be at least 2, got {max_depth}")
        super().__init__(seed=seed, fake=fake)
        self.num_sites = num_sites
        self.max_depth = max_depth
        self.distribution = (distribution or DepthDistribution.default()).clipped(max_depth)
        self.shuffle = shuffle
        self._addresses = AddressFactory(fake=self.fake)

    def generate(self) -> list[UnitRecord]:
        """Generate all records.

        Returns
        -------
        list[UnitRecord]
            Records with ``Decimal`` amounts and storage-form addresses.
        """
        records: list[UnitRecord] = []
        for _ in range(self.num_sites):
            address = self._addresses.main_address()
            depth = self.distribution.pick(self.fake)
            price_per_area = Decimal(self.fake.random_int(*self.PRICE_RANGE))
            records.extend(self._site(address, depth, price_per_area))

        if self.shuffle:
            self.fake.random.shuffle(records)

        logger.info("Generated %d records for %d sites", len(records), self.num_sites)
        return records

    def _site(self, address: Address, depth: int, price_per_area: Decimal) -> list[UnitRecord]:
        if address.depth >= depth:
            low, high = self.PARCEL_AREA_RANGE if address.depth == 2 else self.AREA_RANGE
            return [self._record(address, self.fake.random_int(low, high), price_per_area)]

        records = []
        if address.depth == 2 or self.fake.random.random() < self.GROUP_ROW_RATE:
            records.append(
                self._record(address, self.fake.random_int(*self.PARCEL_AREA_RANGE), price_per_area)
            )

        num_units = self.fake.random_int(2, self.MAX_UNITS_PER_GROUP)
        for index in range(1, num_units + 1):
            child = self._addresses.sub_address(address, index)
            # Not every unit of a building is split further
            child_depth = depth if self.fake.boolean() else child.depth
            records.extend(self._site(child, child_depth, price_per_area))
        return records

    def _record(self, address: Address, area: int, price_per_area: Decimal) -> UnitRecord:
        status = Status.SOLD if self.fake.random.random() < self.SOLD_RATE else Status.FOR_SALE
        return UnitRecord(
            area=Decimal(area),
            total_price=Decimal(area) * price_per_area,
            status=status.value,
            address=address.to_file_string(),
        )
