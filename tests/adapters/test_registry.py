from __future__ import annotations

import pytest

from seedpack.adapters.registry import DEMO_ENTITIES, StaticEntityRegistry, demo_registry
from seedpack.domain.ports import EntityRegistry


def test_demo_registry_lists_the_demo_agents() -> None:
    registry = demo_registry()

    assert isinstance(registry, EntityRegistry)
    assert [entity.id for entity in registry.entities()] == [
        "meeting-actions",
        "seo-pages",
        "support-brief",
        "invoice-anomalies",
    ]


def test_entities_declare_their_files() -> None:
    entity = demo_registry().get("invoice-anomalies")

    assert entity is not None
    assert entity.remote_folder == "day25_Invoice_Fraud_Anomaly_Detector"
    assert entity.declares("vendors.csv")
    assert not entity.declares("payments.csv")
    assert demo_registry().get("unknown") is None


def test_duplicate_ids_are_rejected() -> None:
    with pytest.raises(ValueError, match="Duplicate entity id: seo-pages"):
        StaticEntityRegistry.from_records((*DEMO_ENTITIES, DEMO_ENTITIES[1]))
