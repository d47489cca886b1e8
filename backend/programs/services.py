#programs/services.py
from __future__ import annotations

import logging
from typing import Dict, List, Optional

from django.db import transaction
from django.db.models import Count, Q
from rest_framework import serializers

from .capacity import (
    ProgramSnapshot,
    SectionSnapshot,
    derive_section_status,
    next_section_label,
)
from .models import ClassSection, ClassTemplate, SEAT_HOLDING_STATUSES

logger = logging.getLogger(__name__)


def program_snapshot(template: ClassTemplate) -> ProgramSnapshot:
    """Capacity snapshot of one program and all of its sections."""
    return ProgramSnapshot(
        id=template.pk,
        name=template.name,
        max_students_per_section=template.max_students_per_section,
        sections=[
            SectionSnapshot(
                id=s.pk,
                label=s.section_label,
                status=s.status,
                current_enrollments=s.current_enrollments,
            )
            for s in template.sections.all()
        ],
    )


def program_snapshots(queryset=None) -> List[ProgramSnapshot]:
    qs = queryset if queryset is not None else ClassTemplate.objects.filter(is_active=True)
    qs = qs.prefetch_related("sections").order_by("name", "pk")
    return [program_snapshot(t) for t in qs]


def create_section(template: ClassTemplate, tutor, label: Optional[str] = None) -> ClassSection:
    """
    Create a section of ``template``. Without an explicit label the next one
    in sequence is used.
    """
    with transaction.atomic():
        existing = list(
            ClassSection.objects.select_for_update()
            .filter(template=template)
            .values_list("section_label", flat=True)
        )
        label = (label or "").upper().strip() or next_section_label(existing)
        if label in existing:
            raise serializers.ValidationError({"section_label": f"Section {label} already exists for {template.name}."})

        section = ClassSection.objects.create(template=template, section_label=label, tutor=tutor)

    logger.info("Created section %s for program %s (tutor=%s)", label, template.pk, tutor.pk)
    return section


def sync_enrollment_counts() -> List[Dict]:
    """
    Recount seat-holding enrollments for every section and refresh
    ``current_enrollments`` and the ACTIVE/FULL status. Returns the sections
    that changed.
    """
    updates = []
    qs = (ClassSection.objects
          .select_related("template")
          .annotate(actual=Count("enrollments", filter=Q(enrollments__status__in=SEAT_HOLDING_STATUSES))))

    with transaction.atomic():
        for section in qs:
            new_status = derive_section_status(
                section.status, section.actual, section.template.max_students_per_section
            )
            if section.current_enrollments == section.actual and section.status == new_status:
                continue

            updates.append({
                "id": section.pk,
                "name": str(section),
                "old_count": section.current_enrollments,
                "new_count": section.actual,
                "old_status": section.status,
                "new_status": new_status,
            })
            section.current_enrollments = section.actual
            section.status = new_status
            section.save(update_fields=["current_enrollments", "status", "updated_at"])

    logger.info("Synced enrollment counts for %d section(s)", len(updates))
    return updates
