from datetime import datetime, timezone
from typing import Any, Optional, Union

from core.logging import get_logger
from core.parsing import to_float
from core.tables import TUG_LOW_RISK_BELOW, TUG_MODERATE_MAX
from core.types import Incomplete, MobilityRisk, ProtocolId, TugResult

logger = get_logger(__name__)


def classify(seconds: float) -> MobilityRisk:
    # <10 low; 10-20 inclusive moderate; >20 high
    if seconds < TUG_LOW_RISK_BELOW:
        return MobilityRisk.LOW
    if seconds <= TUG_MODERATE_MAX:
        return MobilityRisk.MODERATE
    return MobilityRisk.HIGH


def tug_score(time_seconds: Any, now: Optional[datetime] = None) -> Union[TugResult, Incomplete]:
    secs = to_float(time_seconds)
    if secs is None:
        logger.info("tug: no numeric time, not scoring")
        return Incomplete(ProtocolId.TUG, ("time_seconds",))
    cls = classify(secs)
    logger.debug(f"tug: {secs}s -> {cls.value}")
    return TugResult(time_seconds=secs, classification=cls, completed_at=now or datetime.now(timezone.utc))
