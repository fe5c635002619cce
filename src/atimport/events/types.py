"""Event types emitted while resolving a stylesheet's imports."""

from dataclasses import dataclass
from enum import Enum


class DropReason(Enum):
    """Why a classified import produced no output records."""

    FILTERED = "filtered"
    UNRESOLVED = "unresolved"
    SELF_IMPORT = "self-import"
    FILTER_FAILED = "filter-failed"


class ImportEvent:
    """Base class of every event published by the import pipeline."""


@dataclass(frozen=True)
class ImportResolved(ImportEvent):
    index: int
    url: str
    resolved: str


@dataclass(frozen=True)
class ImportDropped(ImportEvent):
    index: int
    url: str
    reason: DropReason


@dataclass(frozen=True)
class ImportsEmitted(ImportEvent):
    """Published once per stylesheet after the records are built."""

    resource_path: str
    imports: int
    api: int
