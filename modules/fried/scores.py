from datetime import datetime, timezone
from typing import Any, Optional

from core.bands import lookup_cutoff
from core.logging import get_logger
from core.parsing import to_float
from core.tables import GAIT_CUTOFFS, GRIP_CUTOFFS
from core.types import FrailtyClass, FriedResult, PatientProfile, Sex

logger = get_logger(__name__)


def grip_cutoff(sex: Sex, bmi: float) -> float:
    return lookup_cutoff(GRIP_CUTOFFS[Sex(sex)], bmi)


def gait_cutoff(sex: Sex, height_m: float) -> float:
    return lookup_cutoff(GAIT_CUTOFFS[Sex(sex)], height_m)


def classify(total: int) -> FrailtyClass:
    if total == 0:
        return FrailtyClass.NOT_FRAIL
    if total <= 2:
        return FrailtyClass.PRE_FRAIL
    return FrailtyClass.FRAIL


def fried_score(
    patient: PatientProfile,
    weight_loss: Optional[bool] = False,
    fatigue: Optional[bool] = False,
    low_activity: Optional[bool] = False,
    grip_strength_kg: Any = None,
    gait_speed_seconds: Any = None,
    now: Optional[datetime] = None,
) -> FriedResult:
    """
    Fried frailty phenotype (0-5).

    Grip and gait are optional: a blank or non-numeric reading leaves that
    criterion unmet rather than blocking the score.
    """
    criteria = {
        "weight_loss": 1 if weight_loss else 0,
        "fatigue": 1 if fatigue else 0,
        "grip_strength": 0,
        "walking_speed": 0,
        "physical_activity": 1 if low_activity else 0,
    }

    kg = to_float(grip_strength_kg)
    if kg is not None and kg <= grip_cutoff(patient.sex, patient.bmi):
        criteria["grip_strength"] = 1

    secs = to_float(gait_speed_seconds)
    if secs is not None and secs >= gait_cutoff(patient.sex, patient.height_m):
        criteria["walking_speed"] = 1

    total = sum(criteria.values())
    cls = classify(total)
    logger.debug(f"fried: criteria={criteria} total={total} -> {cls.value}")
    return FriedResult(
        criteria=criteria,
        grip_strength_kg=kg,
        gait_speed_seconds=secs,
        total_score=total,
        classification=cls,
        completed_at=now or datetime.now(timezone.utc),
    )
