from datetime import datetime, timezone
from typing import Any, Optional, Union

from core.bands import lookup_band
from core.logging import get_logger
from core.parsing import to_float
from core.tables import SIT_REACH
from core.types import FlexibilityClass, Incomplete, PatientProfile, ProtocolId, SitReachResult

logger = get_logger(__name__)


def classify(distance_cm: float, age: float, sex) -> FlexibilityClass:
    band = lookup_band(SIT_REACH, age, sex)
    mid = (band.lower + band.upper) / 2
    if distance_cm < band.lower:
        return FlexibilityClass.RUIM
    if distance_cm <= mid:
        return FlexibilityClass.REGULAR
    if distance_cm <= band.upper:
        return FlexibilityClass.BOM
    return FlexibilityClass.MUITO_BOM


def sit_reach_score(
    patient: PatientProfile, distance_cm: Any, now: Optional[datetime] = None
) -> Union[SitReachResult, Incomplete]:
    dist = to_float(distance_cm)
    if dist is None:
        logger.info("sit and reach: no numeric distance, not scoring")
        return Incomplete(ProtocolId.SIT_REACH, ("distance_cm",))
    cls = classify(dist, patient.age, patient.sex)
    logger.debug(f"sit and reach: {dist}cm age={patient.age} sex={patient.sex.value} -> {cls.value}")
    return SitReachResult(distance_cm=dist, classification=cls, completed_at=now or datetime.now(timezone.utc))
