"""
Identifier generation.

Replay, mission and history identifiers are random 128-bit values.
"""

import uuid


def new_identifier() -> uuid.UUID:
    """
    Generate a fresh random 128-bit identifier (UUID version 4).

    Returns:
        uuid.UUID
    """
    return uuid.uuid4()


def identifier_bytes(identifier: uuid.UUID) -> bytes:
    """
    Encode identifier for the blob header.

    Uses the little-endian GUID layout: the first three fields are byte-swapped,
    the trailing eight bytes are kept in order.
    """
    return identifier.bytes_le
