"""
Upgrade step for plan documents written by the oldest app revision.

There is no version tag in the document, so the old layout is recognised by
shape:
  - numeric ids on guests, plus-ones, tables, wishlist and media items
    (the current schema uses text ids)
  - tables holding a fixed list of numbered `seats` instead of
    `assignedGuests` + `seatAssignments`

Everything else is passed through untouched and left to schema validation.
"""

import copy
import logging

logger = logging.getLogger(__name__)

_TEXT_ID_COLLECTIONS = ("guests", "tables", "wishlist", "media")


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _text_id(value):
    if _is_number(value):
        return str(int(value)) if float(value).is_integer() else str(value)
    return value


def _get(d: dict, camel: str, snake: str, default=None):
    if camel in d:
        return d[camel]
    return d.get(snake, default)


def _upgrade_ids(records: list) -> int:
    changed = 0
    for rec in records:
        if isinstance(rec, dict) and _is_number(rec.get("id")):
            rec["id"] = _text_id(rec["id"])
            changed += 1
    return changed


def _upgrade_guest(guest: dict) -> None:
    for key in ("plusOnes", "plus_ones"):
        plus_ones = guest.get(key)
        if isinstance(plus_ones, list):
            _upgrade_ids(plus_ones)


def _upgrade_table(table: dict) -> bool:
    """Convert a numbered-seat table in place. Returns True if it had seats."""
    for key in ("assignedGuests", "assigned_guests"):
        assigned = table.get(key)
        if isinstance(assigned, list):
            table[key] = [_text_id(g) for g in assigned]

    seats = table.pop("seats", None)
    if not isinstance(seats, list):
        return False

    table_id = table.get("id")
    assigned_guests = []
    seat_assignments = []
    for seat in seats:
        if not isinstance(seat, dict):
            continue
        guest_id = _get(seat, "guestId", "guest_id")
        if guest_id is None or guest_id == "":
            continue
        guest_id = _text_id(guest_id)
        assigned_guests.append(guest_id)
        seat_assignments.append({
            "tableId": table_id,
            "seatNumber": seat.get("id", len(seat_assignments) + 1),
            "guestId": guest_id,
            "guestName": _get(seat, "guestName", "guest_name", "") or "",
        })

    table.setdefault("capacity", len(seats))
    if "assignedGuests" not in table and "assigned_guests" not in table:
        table["assignedGuests"] = assigned_guests
    if "seatAssignments" not in table and "seat_assignments" not in table:
        table["seatAssignments"] = seat_assignments
    return True


def upgrade_document(raw: dict) -> dict:
    """
    Return a copy of a stored plan document rewritten to the current layout.
    The input is not modified. Non-dict input is returned as-is.
    """
    if not isinstance(raw, dict):
        return raw
    doc = copy.deepcopy(raw)

    changed_ids = 0
    for key in _TEXT_ID_COLLECTIONS:
        records = doc.get(key)
        if isinstance(records, list):
            changed_ids += _upgrade_ids(records)

    for guest in doc.get("guests") or []:
        if isinstance(guest, dict):
            _upgrade_guest(guest)

    seated_tables = 0
    for table in doc.get("tables") or []:
        if isinstance(table, dict) and _upgrade_table(table):
            seated_tables += 1

    if changed_ids or seated_tables:
        logger.info(
            "Upgraded legacy plan document: %d numeric ids, %d seat-list tables",
            changed_ids,
            seated_tables,
        )
    return doc
