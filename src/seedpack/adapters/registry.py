"""In-process entity registry carrying the demo agents."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from seedpack.domain.ports.registry import EntityRegistry
from seedpack.domain.types import EntityRecord

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

DEMO_ENTITIES: tuple[EntityRecord, ...] = (
    EntityRecord(
        id="meeting-actions",
        name="Meeting Action Enforcer",
        remote_folder="day08_Meeting_Action_Enforcer",
        files=("transcript.txt",),
        category="Productivity",
        description="Extracts owners, tasks and due dates from meeting transcripts.",
    ),
    EntityRecord(
        id="seo-pages",
        name="SEO Issue Sentinel",
        remote_folder="day13_SEO_Issue_Sentinel",
        files=("sitemap.xml",),
        category="Marketing",
        description="Lists the pages announced by a sitemap.",
    ),
    EntityRecord(
        id="support-brief",
        name="Support Summarizer and Router",
        remote_folder="day21_Support_Summarizer_and_Router",
        files=("zendesk_tickets.json",),
        category="Support",
        description="Condenses a support ticket into a routing brief.",
    ),
    EntityRecord(
        id="invoice-anomalies",
        name="Invoice Fraud Anomaly Detector",
        remote_folder="day25_Invoice_Fraud_Anomaly_Detector",
        files=("invoices.csv", "vendors.csv"),
        category="Financial",
        description="Ranks invoices by amount and flags unusual vendors.",
    ),
)


@dataclass(frozen=True, slots=True)
class StaticEntityRegistry:
    _records: Mapping[str, EntityRecord] = field(default_factory=dict)

    @classmethod
    def from_records(cls, records: Iterable[EntityRecord]) -> StaticEntityRegistry:
        by_id: dict[str, EntityRecord] = {}
        for record in records:
            if record.id in by_id:
                raise ValueError(f"Duplicate entity id: {record.id}")
            by_id[record.id] = record
        return cls(by_id)

    def get(self, entity_id: str) -> EntityRecord | None:
        return self._records.get(entity_id)

    def entities(self) -> Iterable[EntityRecord]:
        return tuple(self._records.values())


def demo_registry() -> StaticEntityRegistry:
    return StaticEntityRegistry.from_records(DEMO_ENTITIES)


if TYPE_CHECKING:
    _registry_check: EntityRegistry = demo_registry()
