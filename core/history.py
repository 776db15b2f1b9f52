"""
Folds over a patient's assessment history.

The stored history is append-only and newest-first; every function here
re-orders by date itself, so callers may pass entries in any order.
"""
import uuid
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional, Tuple, Union

from core.catalog import protocol_name
from core.parsing import to_float
from core.types import AssessmentHistoryEntry, AssessmentResult, ProtocolId

ALL = "all"


def make_entry(
    result: AssessmentResult,
    entry_id: Optional[str] = None,
    date: Optional[datetime] = None,
) -> AssessmentHistoryEntry:
    return AssessmentHistoryEntry(
        id=entry_id or uuid.uuid4().hex,
        date=date or result.completed_at,
        protocol_id=result.protocol_id,
        protocol_name=protocol_name(result.protocol_id),
        score=result.score,
        classification=result.classification.value,
        details=result,
    )


def _when(entry: AssessmentHistoryEntry) -> datetime:
    # stored records may carry naive timestamps; those are read as UTC
    if entry.date.tzinfo is None:
        return entry.date.replace(tzinfo=timezone.utc)
    return entry.date


def _chronological(entries: Iterable[AssessmentHistoryEntry]) -> List[AssessmentHistoryEntry]:
    # sorted() is stable: equal dates keep their input order
    return sorted(entries, key=_when)


def latest_per_protocol(entries: Iterable[AssessmentHistoryEntry]) -> List[AssessmentHistoryEntry]:
    """At most one entry per protocol: the most recent, later input winning ties."""
    latest: Dict[ProtocolId, AssessmentHistoryEntry] = {}
    for e in _chronological(entries):
        latest[e.protocol_id] = e
    return list(latest.values())


def protocol_series(
    entries: Iterable[AssessmentHistoryEntry], protocol_id: Union[ProtocolId, str]
) -> List[AssessmentHistoryEntry]:
    pid = ProtocolId(protocol_id)
    return _chronological(e for e in entries if e.protocol_id == pid)


def filter_history(
    entries: Iterable[AssessmentHistoryEntry],
    protocol_id: Union[ProtocolId, str] = ALL,
    order: str = "desc",
) -> List[AssessmentHistoryEntry]:
    if protocol_id == ALL:
        rows = list(entries)
    else:
        pid = ProtocolId(protocol_id)
        rows = [e for e in entries if e.protocol_id == pid]
    return sorted(rows, key=_when, reverse=(order == "desc"))


def has_trend(series: List[AssessmentHistoryEntry]) -> bool:
    return len(series) >= 2


def chart_points(series: Iterable[AssessmentHistoryEntry]) -> List[Tuple[datetime, float]]:
    """(date, score) pairs for plotting; non-numeric scores plot as 0."""
    return [(e.date, to_float(e.score) or 0.0) for e in series]
