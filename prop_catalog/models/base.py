"""Base models shared across the catalog."""

from __future__ import annotations

import re
from dataclasses import dataclass

from prop_catalog.exceptions import MalformedAddress, NoParent

# Depth of a main (street, avenue) address
MAIN_DEPTH = 2

_SEPARATORS = re.compile(r"[\s,]+")


@dataclass(frozen=True, init=False)
class Address:
    """Integer path locating a unit on the real-estate map.

    The first two components are the street and the avenue of a main
    address. Every further component narrows one nesting level down
    (a building's apartment, a subdivided apartment's room, and so on):

    - ``(5, 1)``: main address
    - ``(5, 1, 2)``: unit 2 inside ``(5, 1)``
    - ``(5, 1, 2, 1)``: unit 1 inside ``(5, 1, 2)``

    Equality and hashing are structural. Build one from integers,
    ``Address(5, 1, 2)``, or from text with :meth:`parse`.
    """

    parts: tuple[int, ...]

    def __init__(self, *parts: int) -> None:
        if not parts:
            raise MalformedAddress("Address must contain at least one part")
        for part in parts:
            if isinstance(part, bool) or not isinstance(part, int):
                raise MalformedAddress(f"Address parts must be integers, got {part!r}")
            if part < 0:
                raise MalformedAddress(f"Address parts must be non-negative, got {part}")
        object.__setattr__(self, "parts", tuple(parts))

    @classmethod
    def of(cls, parts: list[int] | tuple[int, ...]) -> Address:
        """Build an address from a sequence of integers."""
        return cls(*parts)

    @classmethod
    def parse(cls, text: str) -> Address:
        """Parse ``"5 1 2"`` (storage form) or ``"(5,1,2)"`` (display form).

        Raises
        ------
        MalformedAddress
            If the text is empty or a component is not a non-negative integer.
        """
        stripped = text.strip()
        if stripped.startswith("(") and stripped.endswith(")"):
            stripped = stripped[1:-1].strip()
        if not stripped:
            raise MalformedAddress(f"Invalid address format: {text!r}")

        parts = []
        for token in _SEPARATORS.split(stripped):
            try:
                parts.append(int(token))
            except ValueError:
                raise MalformedAddress(f"Invalid address format: {text!r}") from None
        return cls(*parts)

    @property
    def depth(self) -> int:
        return len(self.parts)

    @property
    def street(self) -> int:
        return self.parts[0]

    @property
    def avenue(self) -> int:
        return self.parts[1] if self.depth > 1 else 0

    @property
    def is_sub_address(self) -> bool:
        """True for addresses nested below a main address."""
        return self.depth > MAIN_DEPTH

    def path(self) -> list[int]:
        """Return a copy of the integer components."""
        return list(self.parts)

    def parent_address(self) -> Address:
        """Drop the last component.

        Raises
        ------
        NoParent
            If this is a main address (depth <= 2).
        """
        if not self.is_sub_address:
            raise NoParent(f"Address {self} has no parent address")
        return Address(*self.parts[:-1])

    def main_address(self) -> Address:
        """Return the depth-2 projection (self for main addresses)."""
        if not self.is_sub_address:
            return self
        return Address(*self.parts[:MAIN_DEPTH])

    def is_ancestor_of(self, other: Address) -> bool:
        """True if this path is a strict prefix of ``other``."""
        return other.depth > self.depth and other.parts[: self.depth] == self.parts

    def to_file_string(self) -> str:
        """Storage form: space separated components."""
        return " ".join(str(part) for part in self.parts)

    def __str__(self) -> str:
        return "(" + ",".join(str(part) for part in self.parts) + ")"

    def __repr__(self) -> str:
        return f"Address{self}"
