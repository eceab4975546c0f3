"""Deterministic identifiers for units built from flat records."""

import zlib


def stable_id(address_key: str) -> int:
    """Positive 31-bit identifier for an address in storage form.

    Same address, same id, in every process (unlike ``hash()``, which is
    salted per interpreter run).
    """
    return zlib.crc32(address_key.strip().encode("utf-8")) & 0x7FFFFFFF
