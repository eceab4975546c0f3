"""Enumeration types for catalog entities."""

from enum import Enum


class Status(str, Enum):
    FOR_SALE = "FOR_SALE"
    SOLD = "SOLD"

    @property
    def label(self) -> str:
        """Human readable form ("For sale", "Sold")."""
        return _STATUS_LABELS[self]

    @classmethod
    def parse(cls, text: str) -> "Status":
        """Accept the enum name (``FOR_SALE``) or the label (``For sale``)."""
        key = text.strip().upper().replace(" ", "_")
        try:
            return cls[key]
        except KeyError:
            raise ValueError(f"Unknown status: {text!r}") from None


_STATUS_LABELS = {
    Status.FOR_SALE: "For sale",
    Status.SOLD: "Sold",
}
