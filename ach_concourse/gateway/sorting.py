"""
Ordering and paging for the merged unified record set.
"""

from typing import Callable

from ach_concourse.schemas.gateway import UnifiedRecord

DEFAULT_SORT_BY = "created_at"
DEFAULT_SORT_ORDER = "desc"

# Raw field comparison: strings compare lexicographically,
# amounts numerically.
SORT_KEYS: dict[str, Callable[[UnifiedRecord], str | int]] = {
    "created_at": lambda record: record.created_at,
    "status": lambda record: record.status,
    "amount": lambda record: record.amount_cents,
    "amount_cents": lambda record: record.amount_cents,
    "trace_number": lambda record: record.trace_number,
    "side": lambda record: record.side.value,
}

SORT_ORDERS = ("asc", "desc")


def sort_records(
    records: list[UnifiedRecord],
    sort_by: str = "",
    sort_order: str = "",
) -> list[UnifiedRecord]:
    """
    Return the records ordered by one field.

    Defaults to created_at descending. An unknown field sorts
    by created_at. The sort is stable in both directions:
    records with equal keys keep their incoming order.
    """
    key = SORT_KEYS.get(sort_by or DEFAULT_SORT_BY, SORT_KEYS[DEFAULT_SORT_BY])
    descending = (sort_order or DEFAULT_SORT_ORDER) != "asc"
    return sorted(records, key=key, reverse=descending)


def paginate(
    records: list[UnifiedRecord], limit: int, offset: int
) -> list[UnifiedRecord]:
    """
    Slice one page out of an already sorted list.

    limit == 0 means "everything from offset on". An offset
    past the end yields an empty page rather than an error.
    """
    total = len(records)
    start = min(max(offset, 0), total)
    end = start + limit
    if limit <= 0 or end > total:
        end = total
    return records[start:end]
