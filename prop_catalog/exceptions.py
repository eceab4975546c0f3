"""Custom exception hierarchy for prop-catalog."""


class CatalogError(Exception):
    """Base exception for all prop-catalog errors."""


# ---------------------------------------------------------------------------
# Addresses
# ---------------------------------------------------------------------------

class AddressError(CatalogError):
    """Base class for address path errors."""


class MalformedAddress(AddressError):
    """Raised when an address string cannot be parsed into integer parts."""


class NoParent(AddressError):
    """Raised when the parent of a main (depth <= 2) address is requested."""


# ---------------------------------------------------------------------------
# Aggregate queries
# ---------------------------------------------------------------------------

class MeasurementError(CatalogError):
    """Base class for area/price queries that cannot be answered."""


class NonPositiveArea(MeasurementError):
    """Raised when a leaf unit is queried while its area is zero."""


class NonPositiveMeasurement(MeasurementError):
    """Raised when a leaf unit's area or price per area is zero."""


class EmptyAggregate(MeasurementError):
    """Raised when a group unit with no children is queried."""


# ---------------------------------------------------------------------------
# Mutation
# ---------------------------------------------------------------------------

class InvalidAssignment(CatalogError):
    """Raised when a setter or constructor receives an out-of-range value."""


class UnsupportedOperation(CatalogError):
    """Base class for operations invalid for a unit's variant."""


class UnsupportedForLeaf(UnsupportedOperation):
    """Raised when a leaf unit is asked to hold children."""


class UnsupportedForGroup(UnsupportedOperation):
    """Raised when a derived field of a group unit is set directly."""


# ---------------------------------------------------------------------------
# Group membership
# ---------------------------------------------------------------------------

class MembershipError(CatalogError):
    """Base class for group membership violations."""


class NullChild(MembershipError):
    """Raised when ``None`` is added as a child."""


class DuplicateChild(MembershipError):
    """Raised when a unit is already a direct child of the group."""


class ChildNotFound(MembershipError):
    """Raised when removing a unit that is not a direct child."""


class AlreadyOwned(MembershipError):
    """Raised when a unit is added while it still belongs to another group."""


class CyclicChild(MembershipError):
    """Raised when adding a unit would make a group contain itself."""


class MisplacedChild(MembershipError):
    """Raised when a unit's address is not nested under the group's address."""


# ---------------------------------------------------------------------------
# Records, configuration and I/O
# ---------------------------------------------------------------------------

class RecordError(CatalogError):
    """Base class for flat record errors."""


class MalformedRecord(RecordError):
    """Raised when a flat record cannot be turned into a unit."""


class UnitNotFoundError(CatalogError):
    """Raised when a referenced unit does not exist in the catalog."""


class ConfigurationError(CatalogError):
    """Raised when configuration is invalid or missing."""


class SinkError(CatalogError):
    """Raised when a sink operation fails."""
