"""Record id parsing shared by the services."""

import uuid


def parse_id(record_id: str | uuid.UUID) -> uuid.UUID | None:
    """
    Turn a path id into a UUID.

    A string that is not a UUID cannot name any record, so it
    maps to None and the lookup reports "not found".
    """
    if isinstance(record_id, uuid.UUID):
        return record_id
    try:
        return uuid.UUID(record_id)
    except ValueError:
        return None
