"""Address path generation for sample catalogs."""

from __future__ import annotations

from dataclasses import dataclass, field

from faker import Faker

from prop_catalog.generators.base import BaseGenerator
from prop_catalog.models.base import MAIN_DEPTH, Address


@dataclass(frozen=True)
class DepthDistribution:
    """Weighted distribution of how deep a site is subdivided.

    Parameters
    ----------
    weights : dict[int, float]
        Mapping of maximum address depth to weight. Depth 2 is a single
        parcel, depth 3 a building with units, depth 4 a building whose
        units are themselves split. Weights are relative.
    """

    weights: dict[int, float] = field(default_factory=lambda: {2: 0.4, 3: 0.4, 4: 0.2})

    @classmethod
    def default(cls) -> DepthDistribution:
        """40% parcels, 40% buildings, 20% buildings with split units."""
        return cls()

    @classmethod
    def flat(cls) -> DepthDistribution:
        """Parcels only, no subdivision."""
        return cls(weights={MAIN_DEPTH: 1.0})

    def clipped(self, max_depth: int) -> DepthDistribution:
        """Drop depths deeper than ``max_depth`` (falls back to flat)."""
        weights = {depth: w for depth, w in self.weights.items() if depth <= max_depth}
        return DepthDistribution(weights=weights) if weights else DepthDistribution.flat()

    def pick(self, fake: Faker) -> int:
        """Draw a depth."""
        depths = list(self.weights.keys())
        return fake.random.choices(depths, weights=list(self.weights.values()), k=1)[0]


class AddressFactory(BaseGenerator):
    """Generate distinct main addresses and the paths below them.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    max_street : int
        Highest street number.
    max_avenue : int
        Highest avenue number.
    fake : Faker | None
        Shared Faker instance.
    """

    def __init__(
        self,
        seed: int | None = None,
        max_street: int = 99,
        max_avenue: int = 99,
        fake: Faker | None = None,
    ) -> None:
        super().__init__(seed=seed, fake=fake)
        self.max_street = max_street
        self.max_avenue = max_avenue
        self._used: set[Address] = set()

    @property
    def capacity(self) -> int:
        return self.max_street * self.max_avenue

    def main_address(self) -> Address:
        """A depth-2 address not handed out before by this factory.

        Raises
        ------
        ValueError
            If every street/avenue pair has been used.
        """
        if len(self._used) >= self.capacity:
            raise ValueError(f"All {self.capacity} main addresses are in use")
        while True:
            address = Address(
                self.fake.random_int(min=1, max=self.max_street),
                self.fake.random_int(min=1, max=self.max_avenue),
            )
            if address not in self._used:
                self._used.add(address)
                return address

    def sub_address(self, parent: Address, index: int) -> Address:
        """Path of the ``index``-th unit inside ``parent``."""
        return Address(*parent.parts, index)
