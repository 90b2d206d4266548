from __future__ import annotations

import asyncio
from typing import Any

import pytest

from seedpack.domain.fallback import SyntheticProvider
from seedpack.domain.parsers import parse_document, parse_table
from seedpack.domain.resolver import ProviderChain, Resolver
from seedpack.domain.synthetic import invoices
from seedpack.domain.types import (
    SOURCE_ERROR,
    SOURCE_NOT_FOUND,
    DataRequest,
    EntityRecord,
    FailureKind,
    RemoteUrls,
    Tier,
)
from tests.helpers.providers import StubProvider, make_entity, make_registry

_FILE = "transcript.txt"


def _provenance(entity: EntityRecord, filename: str) -> RemoteUrls:
    base = f"https://example.test/{entity.remote_folder}"
    return RemoteUrls(
        raw=f"{base}/raw/{filename}",
        blob=f"{base}/blob/{filename}",
        api=f"{base}/api/{filename}",
        folder=base,
    )


def _tiers(
    local: dict[str, str] | None = None,
    raw: dict[str, str] | None = None,
    api: dict[str, str] | None = None,
) -> tuple[StubProvider, StubProvider, StubProvider]:
    return (
        StubProvider(Tier.LOCAL, local or {}),
        StubProvider(Tier.REMOTE_RAW, raw or {}),
        StubProvider(Tier.REMOTE_API, api or {}),
    )


def _resolver(*providers: StubProvider | SyntheticProvider) -> Resolver:
    return Resolver(
        registry=make_registry(),
        chain=ProviderChain(providers),
        provenance=_provenance,
    )


def _request(filename: str = _FILE, **kwargs: Any) -> DataRequest:  # noqa: ANN401
    return DataRequest(entity_id="meeting-actions", filename=filename, **kwargs)


def test_local_tier_wins_and_later_tiers_are_not_called() -> None:
    local, raw, api = _tiers(local={_FILE: "local text"}, raw={_FILE: "remote text"})

    result = asyncio.run(_resolver(local, raw, api).resolve(_request()))

    assert result.success
    assert result.data == "local text"
    assert result.source == Tier.LOCAL
    assert result.provenance is None
    assert raw.calls == []
    assert api.calls == []


def test_falls_through_to_first_available_remote_tier() -> None:
    local, raw, api = _tiers(api={_FILE: "api text"})

    result = asyncio.run(_resolver(local, raw, api).resolve(_request()))

    assert result.success
    assert result.data == "api text"
    assert result.source == Tier.REMOTE_API
    assert [failure.tier for failure in result.failures] == [Tier.LOCAL, Tier.REMOTE_RAW]
    assert result.provenance is not None
    assert result.provenance.raw.endswith(f"/raw/{_FILE}")
    assert local.calls == raw.calls == api.calls == [f"meeting-actions/{_FILE}"]


def test_synthetic_tier_is_appended_when_request_has_fallback() -> None:
    generated = invoices(20)

    result = asyncio.run(
        _resolver(*_tiers()).resolve(
            _request("invoices.csv", parser=parse_table, synthetic_fallback=generated)
        )
    )

    assert result.success
    assert result.source == Tier.SYNTHETIC
    assert result.data == generated
    assert isinstance(result.data, list)
    assert len(result.data) == 20


def test_fallback_generator_only_runs_when_needed() -> None:
    calls: list[int] = []

    def generate() -> str:
        calls.append(1)
        return "generated"

    local, raw, api = _tiers(local={_FILE: "local text"})
    served = asyncio.run(
        _resolver(local, raw, api).resolve(_request(synthetic_fallback=generate))
    )
    fallback = asyncio.run(_resolver(*_tiers()).resolve(_request(synthetic_fallback=generate)))

    assert served.data == "local text"
    assert fallback.data == "generated"
    assert calls == [1]


def test_exhausted_chain_reports_every_tier() -> None:
    result = asyncio.run(_resolver(*_tiers()).resolve(_request()))

    assert not result.success
    assert result.data is None
    assert result.source == SOURCE_ERROR
    assert result.failure_kind is FailureKind.CHAIN_EXHAUSTED
    assert result.error is not None
    for tier in (Tier.LOCAL, Tier.REMOTE_RAW, Tier.REMOTE_API):
        assert f"{tier}:" in result.error
    assert result.provenance is not None


def test_unknown_entity_short_circuits() -> None:
    local, raw, api = _tiers(local={_FILE: "text"})

    result = asyncio.run(
        _resolver(local, raw, api).resolve(
            DataRequest(entity_id="ghost", filename=_FILE, synthetic_fallback="x")
        )
    )

    assert not result.success
    assert result.source == SOURCE_NOT_FOUND
    assert result.error == "Entity 'ghost' not found in registry"
    assert local.calls == raw.calls == api.calls == []


def test_parse_failure_falls_through_to_next_tier() -> None:
    filename = "zendesk_tickets.json"
    local, raw, api = _tiers(local={filename: "{truncated"}, raw={filename: '{"id": 7}'})

    result = asyncio.run(
        _resolver(local, raw, api).resolve(_request(filename, parser=parse_document))
    )

    assert result.success
    assert result.data == {"id": 7}
    assert result.source == Tier.REMOTE_RAW
    assert result.failures[0].kind is FailureKind.PARSE_FAILURE


def test_explicit_synthetic_tier_is_not_duplicated() -> None:
    local = StubProvider(Tier.LOCAL)

    def broken() -> str:
        raise RuntimeError("generator exploded")

    result = asyncio.run(
        _resolver(local, SyntheticProvider()).resolve(_request(synthetic_fallback=broken))
    )

    assert not result.success
    assert [failure.tier for failure in result.failures] == [Tier.LOCAL, Tier.SYNTHETIC]
    assert result.error is not None
    assert "generator exploded" in result.error


def test_concurrent_resolutions_are_independent() -> None:
    entity = make_entity(files=("a.txt", "b.txt"))
    local = StubProvider(Tier.LOCAL, {"a.txt": "A"})
    resolver = Resolver(registry=make_registry(entity), chain=ProviderChain((local,)))

    async def resolve_both() -> list[object]:
        results = await asyncio.gather(
            resolver.resolve(_request("a.txt")),
            resolver.resolve(_request("b.txt", synthetic_fallback="B")),
        )
        return [result.data for result in results]

    assert asyncio.run(resolve_both()) == ["A", "B"]


def test_provider_chain_validation() -> None:
    with pytest.raises(ValueError, match="at least one"):
        ProviderChain(())
    with pytest.raises(ValueError, match="duplicate"):
        ProviderChain((StubProvider(Tier.LOCAL), StubProvider(Tier.LOCAL)))


def test_provider_chain_exposes_order() -> None:
    chain = ProviderChain((*_tiers(), SyntheticProvider()))

    assert chain.names == ("local", "remote-raw", "remote-api", "synthetic")
    assert len(chain) == 4
    assert chain.has_synthetic
