import re
from datetime import date, datetime
from typing import Optional

from sqlalchemy.orm import Session
from sqlalchemy import func

from app.core.models import IdSequence

TIME_PATTERN = re.compile(r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9]$")
ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}([T ][\d:.]+(Z|[+-]\d{2}:?\d{2})?)?$")


def generate_custom_id(db: Session, model, prefix: str, id_field: str):
    """
    Generate a human-readable unique ID with a prefix from a per-prefix counter.

    Numbers are never reused, even after the newest row is deleted.

    :param db: SQLAlchemy session
    :param model: SQLAlchemy model class
    :param prefix: String prefix for the ID (e.g., "T" for team, "L" for league)
    :param id_field: Field name storing the custom ID
    :return: Generated custom ID (e.g., "T1", "T9999", "L10000")
    """
    sequence = db.query(IdSequence).filter(IdSequence.prefix == prefix).with_for_update().first()
    if sequence is None:
        # Seed from the existing rows on first use
        row_count = db.query(func.count()).select_from(model).scalar()
        sequence = IdSequence(prefix=prefix, last_value=row_count)
        db.add(sequence)

    new_id = sequence.last_value + 1
    new_id_str = f"{prefix}{new_id}"

    # Skip numbers already taken by rows written outside the counter
    while db.query(model).filter(getattr(model, id_field) == new_id_str).first():
        new_id += 1
        new_id_str = f"{prefix}{new_id}"

    sequence.last_value = new_id
    return new_id_str


def collapse_whitespace(value: Optional[str]) -> str:
    """Trim a string and collapse runs of internal whitespace to one space."""
    if not isinstance(value, str):
        return ""
    return " ".join(value.split())


def parse_iso_date(value) -> Optional[date]:
    """Parse 'YYYY-MM-DD' (optionally followed by a time part) into a date.

    Returns None for anything that is not a real calendar date.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not ISO_DATE_PATTERN.match(value.strip()):
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None


def normalize_time(value) -> Optional[str]:
    """Validate a 24-hour HH:MM string and return it zero-padded, else None."""
    if not isinstance(value, str):
        return None
    value = value.strip()
    if not TIME_PATTERN.match(value):
        return None
    hours, minutes = value.split(":")
    return f"{int(hours):02d}:{minutes}"
