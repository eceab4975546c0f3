"""Base generator class for sample data generators."""

from __future__ import annotations

from abc import ABC

from faker import Faker


class BaseGenerator(ABC):
    """Base class for sample data generators.

    Provides a Faker instance, seeded per instance so that two generators
    built with the same seed produce the same catalog without touching
    the global ``random`` state.

    Parameters
    ----------
    seed : int | None
        Random seed for reproducibility.
    locale : str
        Faker locale (default ``en_US``).
    fake : Faker | None
        Shared Faker instance. When provided, ``seed`` and ``locale`` are
        ignored.
    """

    def __init__(
        self,
        seed: int | None = None,
        locale: str = "en_US",
        fake: Faker | None = None,
    ) -> None:
        if fake is None:
            fake = Faker(locale)
            if seed is not None:
                fake.seed_instance(seed)
        self.fake = fake
        self.seed = seed
