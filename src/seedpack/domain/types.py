"""Request, outcome and result types of the tiered data resolver."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Final

from .errors import DataUnavailableError

SOURCE_NOT_FOUND: Final[str] = "not-found"
SOURCE_ERROR: Final[str] = "error"

type Parser = Callable[[str], object]


class Tier(StrEnum):
    LOCAL = "local"
    REMOTE_RAW = "remote-raw"
    REMOTE_API = "remote-api"
    SYNTHETIC = "synthetic"


class FailureKind(StrEnum):
    UNKNOWN_ENTITY = "unknown-entity"
    TIER_UNAVAILABLE = "tier-unavailable"
    PARSE_FAILURE = "parse-failure"
    CHAIN_EXHAUSTED = "chain-exhausted"


@dataclass(frozen=True, slots=True)
class EntityRecord:
    """Registry metadata for one entity and its declared data files."""

    id: str
    name: str
    remote_folder: str
    files: tuple[str, ...] = ()
    category: str = ""
    description: str = ""

    def declares(self, filename: str) -> bool:
        return filename in self.files


@dataclass(frozen=True, slots=True, kw_only=True)
class DataRequest:
    """One logical request for a named data file of an entity.

    ``synthetic_fallback`` is either a ready value or a zero-argument callable
    producing one; ``None`` means no fallback.
    """

    entity_id: str
    filename: str
    parser: Parser | None = None
    synthetic_fallback: object | None = None

    @property
    def has_fallback(self) -> bool:
        return self.synthetic_fallback is not None


@dataclass(frozen=True, slots=True)
class RemoteUrls:
    raw: str
    blob: str
    api: str
    folder: str


@dataclass(frozen=True, slots=True)
class Success:
    data: object
    source: str
    url: str | None = None


@dataclass(frozen=True, slots=True)
class SoftFailure:
    tier: str
    reason: str
    kind: FailureKind = FailureKind.TIER_UNAVAILABLE

    def describe(self) -> str:
        return f"{self.tier}: {self.reason}"


type ResolutionOutcome = Success | SoftFailure


def parsed_outcome(
    request: DataRequest,
    raw: str,
    *,
    tier: str,
    source: str,
    url: str | None = None,
) -> ResolutionOutcome:
    """Run the request's parser over ``raw`` and wrap the value as an outcome.

    A parser error, or a parser producing ``None``, is a failure of the tier
    that fetched the content; resolution then continues with the next tier.
    """

    if request.parser is None:
        return Success(data=raw, source=source, url=url)
    try:
        data = request.parser(raw)
    except Exception as exc:  # noqa: BLE001
        return SoftFailure(
            tier=tier,
            reason=f"could not parse {request.filename}: {exc}",
            kind=FailureKind.PARSE_FAILURE,
        )
    if data is None:
        return SoftFailure(
            tier=tier,
            reason=f"parser returned no value for {request.filename}",
            kind=FailureKind.PARSE_FAILURE,
        )
    return Success(data=data, source=source, url=url)


@dataclass(frozen=True, slots=True, kw_only=True)
class ResolutionResult:
    """Uniform envelope returned for every resolution.

    ``data`` is set exactly when ``success`` is true. ``source`` is a local
    path, a tier name, ``"not-found"`` or ``"error"``.
    """

    success: bool
    data: object | None
    source: str
    error: str | None = None
    provenance: RemoteUrls | None = None
    resolved_url: str | None = None
    failure_kind: FailureKind | None = None
    failures: tuple[SoftFailure, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if self.success != (self.data is not None):
            raise ValueError("ResolutionResult data must be set exactly when success is true")

    @classmethod
    def from_success(
        cls,
        outcome: Success,
        *,
        provenance: RemoteUrls | None = None,
        failures: tuple[SoftFailure, ...] = (),
    ) -> ResolutionResult:
        return cls(
            success=True,
            data=outcome.data,
            source=outcome.source,
            provenance=provenance,
            resolved_url=outcome.url,
            failures=failures,
        )

    @classmethod
    def not_found(cls, entity_id: str) -> ResolutionResult:
        return cls(
            success=False,
            data=None,
            source=SOURCE_NOT_FOUND,
            error=f"Entity '{entity_id}' not found in registry",
            failure_kind=FailureKind.UNKNOWN_ENTITY,
        )

    @classmethod
    def exhausted(
        cls,
        request: DataRequest,
        failures: tuple[SoftFailure, ...],
        *,
        provenance: RemoteUrls | None = None,
    ) -> ResolutionResult:
        reasons = "; ".join(failure.describe() for failure in failures)
        return cls(
            success=False,
            data=None,
            source=SOURCE_ERROR,
            error=f"No data found for {request.entity_id}/{request.filename}: {reasons}",
            provenance=provenance,
            failure_kind=FailureKind.CHAIN_EXHAUSTED,
            failures=failures,
        )

    def unwrap(self) -> object:
        if not self.success or self.data is None:
            raise DataUnavailableError(self.error or f"No data ({self.source})", source=self.source)
        return self.data

    def to_dict(self) -> dict[str, object]:
        payload: dict[str, object] = {
            "success": self.success,
            "data": self.data,
            "source": self.source,
        }
        if self.error is not None:
            payload["error"] = self.error
        if self.provenance is not None:
            payload["provenance"] = {
                "raw": self.provenance.raw,
                "blob": self.provenance.blob,
                "api": self.provenance.api,
                "folder": self.provenance.folder,
            }
        if self.resolved_url is not None:
            payload["resolved_url"] = self.resolved_url
        return payload
