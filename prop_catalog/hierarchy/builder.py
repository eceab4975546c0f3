"""Rebuild a forest of units from flat, unordered records."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Iterable, Union

from prop_catalog.exceptions import CatalogError, MalformedRecord
from prop_catalog.hierarchy.ids import stable_id
from prop_catalog.models.base import Address
from prop_catalog.models.catalog import GroupUnit, LeafUnit, Status, Unit, UnitRecord
from prop_catalog.models.catalog.unit import ZERO, to_decimal

logger = logging.getLogger(__name__)

RawRecord = Union[UnitRecord, Sequence]


@dataclass(frozen=True)
class ParsedRecord:
    """A validated record, ready to become a leaf unit.

    A record with zero area and zero total price stands for a group that
    had no sub-units when it was saved.
    """

    area: Decimal
    total_price: Decimal
    price_per_area: Decimal
    status: Status
    address: Address

    @property
    def key(self) -> str:
        return self.address.to_file_string()

    @property
    def is_placeholder(self) -> bool:
        return self.area == 0 and self.total_price == 0


def parse_record(raw: RawRecord) -> ParsedRecord:
    """Validate a raw ``(area, total_price, status, address)`` record.

    Raises
    ------
    MalformedRecord
        If the record has the wrong shape or values.
    MalformedAddress
        If the address cannot be parsed.
    """
    if isinstance(raw, UnitRecord):
        fields = (raw.area, raw.total_price, raw.status, raw.address)
    elif isinstance(raw, (str, bytes)) or not isinstance(raw, Sequence):
        raise MalformedRecord(f"Expected a 4-field record, got {raw!r}")
    else:
        fields = tuple(raw)
    if len(fields) < 4:
        raise MalformedRecord(f"Expected 4 fields, got {len(fields)}: {raw!r}")

    area_raw, price_raw, status_raw, address_raw = fields[:4]
    try:
        area = to_decimal(area_raw, "area")
        total_price = to_decimal(price_raw, "total price")
    except CatalogError as exc:
        raise MalformedRecord(str(exc)) from exc
    if area < 0 or (area == 0 and total_price != 0):
        raise MalformedRecord(f"Area must be positive, got {area}")
    if total_price < 0:
        raise MalformedRecord(f"Total price must not be negative, got {total_price}")

    if isinstance(status_raw, Status):
        status = status_raw
    else:
        try:
            status = Status.parse(str(status_raw))
        except ValueError as exc:
            raise MalformedRecord(str(exc)) from exc

    address = address_raw if isinstance(address_raw, Address) else Address.parse(str(address_raw))
    return ParsedRecord(
        area=area,
        total_price=total_price,
        price_per_area=total_price / area if area else ZERO,
        status=status,
        address=address,
    )


class HierarchyBuilder:
    """Turn flat records into top-level units.

    Records at a main address become leaves; records at a sub-address are
    attached to the group at their parent address. Missing groups are
    synthesized on demand, climbing one level at a time up to the main
    address, so a record at ``(5,1,2,3)`` creates groups ``(5,1,2)`` and
    ``(5,1)`` if nobody else did.

    A group that received sub-units replaces any leaf record at the same
    address: the building at ``(5,1)`` supersedes the ``"5 1"`` row once
    apartments ``(5,1,1)``, ``(5,1,2)`` exist. Main-address groups that
    never received sub-units are dropped and the leaf stays free-standing.

    A record with zero area and zero total price is not a leaf: it keeps an
    empty group at its address, which is how ``flatten`` writes a group
    without sub-units. Next to a leaf record at the same address the leaf
    wins.

    Parameters
    ----------
    id_generator : Callable[[str], int]
        Maps an address in storage form to a unit id. Must be
        deterministic.
    """

    def __init__(self, id_generator: Callable[[str], int] = stable_id) -> None:
        self._id_generator = id_generator
        self._reset()

    def _reset(self) -> None:
        self._groups: dict[str, GroupUnit] = {}
        self._main_leaves: dict[str, list[LeafUnit]] = {}
        self._root_order: dict[str, None] = {}
        self._placeholders: set[str] = set()
        self.skipped = 0
        self.synthesized = 0

    def build(self, records: Iterable[RawRecord]) -> list[Unit]:
        """Build the forest described by ``records``.

        Parameters
        ----------
        records : Iterable[RawRecord]
            ``UnitRecord`` instances or 4-sequences, in any order.

        Returns
        -------
        list[Unit]
            Top-level units in order of first appearance of their main
            address.
        """
        self._reset()
        count = 0
        for count, raw in enumerate(records, start=1):
            try:
                parsed = parse_record(raw)
                if parsed.is_placeholder:
                    self._place_empty_group(parsed)
                    continue
                leaf = LeafUnit.priced(
                    self._id_generator(parsed.key),
                    parsed.address,
                    parsed.status,
                    parsed.area,
                    parsed.total_price,
                )
            except CatalogError as exc:
                self.skipped += 1
                logger.warning("Skipping record %d (%r): %s", count, raw, exc)
                continue
            self._place(leaf)

        roots = self._collect_roots()
        logger.info(
            "Built %d top-level units from %d records (%d skipped, %d groups synthesized)",
            len(roots),
            count,
            self.skipped,
            self.synthesized,
        )
        return roots

    def _place(self, leaf: LeafUnit) -> None:
        address = leaf.address
        self._root_order.setdefault(address.main_address().to_file_string())
        if not address.is_sub_address:
            key = address.to_file_string()
            self._main_leaves.setdefault(key, []).append(leaf)
            # Placeholder for sub-unit records that may follow
            self._group_at(address, leaf.status)
            return
        self._group_at(address.parent_address(), leaf.status).add(leaf)

    def _place_empty_group(self, parsed: ParsedRecord) -> None:
        self._root_order.setdefault(parsed.address.main_address().to_file_string())
        self._placeholders.add(parsed.key)
        self._group_at(parsed.address, parsed.status, synthesized=False)

    def _group_at(self, address: Address, status: Status, synthesized: bool = True) -> GroupUnit:
        """Look up the group at ``address``, creating its missing ancestors."""
        key = address.to_file_string()
        group = self._groups.get(key)
        if group is not None:
            return group

        group = GroupUnit(self._id_generator(key), address, status)
        self._groups[key] = group
        if address.is_sub_address:
            if synthesized:
                self.synthesized += 1
                logger.debug("Synthesized group %s", address)
            self._group_at(address.parent_address(), status).add(group)
        return group

    def _collect_roots(self) -> list[Unit]:
        # Sub-address leaves superseded by a group at the same address
        for group in self._groups.values():
            if group.parent is None:
                continue
            siblings = [
                unit
                for unit in group.parent.children()
                if unit.is_leaf and unit.address == group.address
            ]
            if not siblings:
                continue
            if group.children():
                for sibling in siblings:
                    logger.debug("Record at %s superseded by its group", sibling.address)
                    group.parent.remove(sibling)
            else:
                # Empty group row next to a leaf row: the leaf wins
                group.parent.remove(group)

        roots: list[Unit] = []
        for key in self._root_order:
            group = self._groups.get(key)
            if group is not None and group.children():
                roots.append(group)
            elif key in self._main_leaves:
                roots.extend(self._main_leaves[key])
            elif key in self._placeholders and group is not None:
                roots.append(group)

        nested = {
            unit.address
            for root in roots
            if not root.is_leaf
            for unit in root.walk()
        }
        return [root for root in roots if not (root.is_leaf and root.address in nested)]


def build_forest(records: Iterable[RawRecord]) -> list[Unit]:
    """Build top-level units from flat records with default settings."""
    return HierarchyBuilder().build(records)
