"""
Section capacity rules.

Decides when a program should get a new section and what that section is
called. Works on plain snapshots so the same rules back the admin API, the
management commands and the tests; nothing here touches the database.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence

from django.conf import settings

from .models import SectionStatus

DEFAULT_CAPACITY_THRESHOLD = 0.9
LABEL_STRATEGY_BASE26 = "base26"
LABEL_STRATEGY_LEGACY = "legacy"


def _setting(name, default):
    return getattr(settings, "SCHEDULING", {}).get(name, default)


@dataclass
class SectionSnapshot:
    label: str
    status: str = SectionStatus.ACTIVE
    current_enrollments: int = 0
    id: Optional[int] = None


@dataclass
class ProgramSnapshot:
    name: str
    max_students_per_section: int
    sections: List[SectionSnapshot] = field(default_factory=list)
    id: Optional[int] = None


@dataclass
class SectionSuggestion:
    """A program that should get a new section, with the label to use."""
    program_id: Optional[int]
    program_name: str
    section_label: str
    reason: str  # "no_sections" or "capacity"


def section_sort_key(label: str):
    # Shorter labels first, so Z < AA < AB; within one length this is plain lexicographic order.
    return (len(label), label)


def _increment_base26(label: str) -> str:
    chars = list(label)
    i = len(chars) - 1
    while i >= 0:
        if chars[i] == "Z":
            chars[i] = "A"
            i -= 1
            continue
        chars[i] = chr(ord(chars[i]) + 1)
        return "".join(chars)
    return "A" + "".join(chars)


def _increment_legacy(label: str) -> str:
    if label == "Z":
        return "AA"
    return label[:-1] + chr(ord(label[-1]) + 1)


def next_section_label(existing_labels: Iterable[str], strategy: Optional[str] = None) -> str:
    """
    Label for the next section of a program.

    ``[]`` gives ``"A"``, ``["A", "B"]`` gives ``"C"`` and ``["Z"]`` gives
    ``"AA"``. The default strategy carries like a base-26 counter
    (``"AZ"`` -> ``"BA"``); the ``legacy`` strategy only bumps the last
    character of the lexicographically greatest label (``"AZ"`` -> ``"A["``).
    """
    labels = [l for l in existing_labels if l]
    if not labels:
        return "A"

    strategy = strategy or _setting("SECTION_LABEL_STRATEGY", LABEL_STRATEGY_BASE26)
    if strategy == LABEL_STRATEGY_LEGACY:
        return _increment_legacy(sorted(labels)[-1])
    return _increment_base26(max(labels, key=section_sort_key))


def fill_ratio(current_enrollments: int, max_students: int) -> float:
    if max_students <= 0:
        # No seats at all: treat as full.
        return float("inf")
    return current_enrollments / max_students


def latest_active_section(sections: Sequence[SectionSnapshot]) -> Optional[SectionSnapshot]:
    active = [s for s in sections if s.status == SectionStatus.ACTIVE]
    if not active:
        return None
    return max(active, key=lambda s: section_sort_key(s.label))


def needs_new_section(program: ProgramSnapshot, threshold: Optional[float] = None) -> bool:
    """
    True when the program has no sections at all, or when its newest ACTIVE
    section is at or above the capacity threshold (90% by default).

    A program whose sections are all FULL or ARCHIVED does not trigger.
    """
    if not program.sections:
        return True

    latest = latest_active_section(program.sections)
    if latest is None:
        return False

    if threshold is None:
        threshold = _setting("SECTION_CAPACITY_THRESHOLD", DEFAULT_CAPACITY_THRESHOLD)
    return fill_ratio(latest.current_enrollments, program.max_students_per_section) >= threshold


def find_section_suggestion(
    programs: Iterable[ProgramSnapshot],
    dismissed: bool = False,
    threshold: Optional[float] = None,
) -> Optional[SectionSuggestion]:
    """
    First program, in iteration order, that needs a new section.

    ``dismissed`` is owned by the caller (the admin's view state); once the
    suggestion has been dismissed nothing is suggested until the caller resets it.
    """
    if dismissed:
        return None

    for program in programs:
        if needs_new_section(program, threshold=threshold):
            return SectionSuggestion(
                program_id=program.id,
                program_name=program.name,
                section_label=next_section_label(s.label for s in program.sections),
                reason="capacity" if program.sections else "no_sections",
            )
    return None


def derive_section_status(current_status: str, current_enrollments: int, max_students: int) -> str:
    """ACTIVE/FULL from the seat count; ARCHIVED sections stay archived."""
    if current_status == SectionStatus.ARCHIVED:
        return SectionStatus.ARCHIVED
    if current_enrollments >= max_students:
        return SectionStatus.FULL
    return SectionStatus.ACTIVE
