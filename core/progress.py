import math
from typing import Iterable, List, Set, Tuple

from core.catalog import PROTOCOL_IDS
from core.types import ProtocolId


def _known(ids: Iterable) -> Set[ProtocolId]:
    out = set()
    for pid in ids:
        try:
            out.add(ProtocolId(pid))
        except ValueError:
            continue  # not part of the standard battery
    return out


def completion_percent(completed_ids: Iterable) -> int:
    done = len(_known(completed_ids) & set(PROTOCOL_IDS))
    pct = math.floor(100 * done / len(PROTOCOL_IDS) + 0.5)
    return max(0, min(100, pct))


def pending_protocols(completed_ids: Iterable) -> List[ProtocolId]:
    done = _known(completed_ids)
    return [pid for pid in PROTOCOL_IDS if pid not in done]


def battery_status(history: Iterable) -> Tuple[int, List[ProtocolId]]:
    """Completion percent and pending protocols for a list of history entries."""
    done = {e.protocol_id for e in history}
    return completion_percent(done), pending_protocols(done)
