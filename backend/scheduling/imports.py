#scheduling/imports.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Any, Dict, List, Optional
import logging

import pandas as pd
from django.contrib.auth import get_user_model
from django.db import transaction
from rest_framework import serializers

from users.models import Role
from .models import HHMM_RX
from .services import add_availability

logger = logging.getLogger(__name__)
User = get_user_model()

# =========================
# Header validation helpers
# =========================

REQUIRED_COLUMNS = {"tutor_email", "day_of_week", "start_time", "end_time"}

# Flexible synonyms so slightly different headers still map correctly
HEADER_SYNONYMS: Dict[str, set[str]] = {
    "tutor_email": {"TutorEmail", "Email", "Tutor", "tutor"},
    "day_of_week": {"Day", "DayOfWeek", "Hari"},
    "start_time": {"Start", "StartTime", "From"},
    "end_time": {"End", "EndTime", "To", "Until"},
}

DAY_ALIASES = {
    "sun": 0, "sunday": 0, "minggu": 0,
    "mon": 1, "monday": 1, "senin": 1,
    "tue": 2, "tues": 2, "tuesday": 2, "selasa": 2,
    "wed": 3, "wednesday": 3, "rabu": 3,
    "thu": 4, "thur": 4, "thurs": 4, "thursday": 4, "kamis": 4,
    "fri": 5, "friday": 5, "jumat": 5,
    "sat": 6, "saturday": 6, "sabtu": 6,
}


def _normalise_headers(df: pd.DataFrame) -> Dict[str, str]:
    """
    Returns a mapping {wanted_key -> actual_column_name_in_df}
    """
    mapping: Dict[str, str] = {}
    dfcols = [str(c).strip() for c in df.columns]
    lower_to_actual = {c.lower(): c for c in dfcols}

    for want in REQUIRED_COLUMNS:
        if want in lower_to_actual:
            mapping[want] = lower_to_actual[want]
            continue
        for syn in HEADER_SYNONYMS.get(want, set()):
            if syn in dfcols:
                mapping[want] = syn
                break
    return mapping


def _validate_headers(df: pd.DataFrame) -> Dict[str, str]:
    mapping = _normalise_headers(df)
    missing = sorted(c for c in REQUIRED_COLUMNS if c not in mapping)
    if missing:
        raise ValueError(f"File is missing required columns: {', '.join(missing)}")
    return mapping


# ============
# Conversions
# ============

def _as_day(cell: Any) -> Optional[int]:
    if cell is None or (isinstance(cell, float) and pd.isna(cell)):
        return None
    s = str(cell).strip().lower()
    if s.isdigit():
        day = int(s)
        return day if 0 <= day <= 6 else None
    return DAY_ALIASES.get(s)


def _as_hhmm(cell: Any) -> Optional[str]:
    """'HH:MM' from strings like '9:00', '09:00:00' or time/datetime cells."""
    if cell is None or (isinstance(cell, float) and pd.isna(cell)):
        return None
    if isinstance(cell, (time, datetime)):
        return cell.strftime("%H:%M")
    s = str(cell).strip()
    parts = s.split(":")
    if len(parts) < 2 or not parts[0].isdigit() or not parts[1].isdigit():
        return None
    value = f"{int(parts[0]):02d}:{int(parts[1]):02d}"
    return value if HHMM_RX.match(value) else None


@dataclass
class ImportStats:
    ok: int = 0
    err: int = 0
    errors: List[str] = field(default_factory=list)

    def log(self, msg: str):
        self.errors.append(msg)
        self.err += 1

    def inc(self):
        self.ok += 1


def import_availability_csv(file_like, dry_run: bool = False) -> ImportStats:
    """
    Load tutor availability windows from a CSV with
    ``tutor_email, day_of_week, start_time, end_time`` columns.

    Rows for unknown tutors, malformed times or windows overlapping an
    existing window are skipped and reported; the rest are created.
    With ``dry_run`` nothing is written.
    """
    df = pd.read_csv(file_like, dtype=str)
    df.columns = [str(c).strip() for c in df.columns]
    col = _validate_headers(df)
    stats = ImportStats()

    with transaction.atomic():
        for idx, row in df.iterrows():
            line = idx + 2  # header is line 1
            email = str(row[col["tutor_email"]] or "").strip().lower()
            tutor = User.objects.filter(email__iexact=email, role=Role.TUTOR).first()
            if tutor is None:
                stats.log(f"line {line}: unknown tutor '{email}'")
                continue

            day = _as_day(row[col["day_of_week"]])
            start = _as_hhmm(row[col["start_time"]])
            end = _as_hhmm(row[col["end_time"]])
            if day is None or start is None or end is None:
                stats.log(f"line {line}: invalid day or time")
                continue

            try:
                add_availability(tutor, day, start, end)
            except serializers.ValidationError as e:
                stats.log(f"line {line}: {e.detail}")
                continue
            stats.inc()

        if dry_run:
            transaction.set_rollback(True)

    logger.info("Availability import: ok=%d err=%d dry_run=%s", stats.ok, stats.err, dry_run)
    return stats
