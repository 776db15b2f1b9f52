from datetime import datetime, timezone
from typing import Any, Optional, Union

from core.bands import classify_repetitions, lookup_band
from core.logging import get_logger
from core.parsing import to_int
from core.tables import CHAIR_STAND
from core.types import ChairStandResult, FitnessClass, Incomplete, PatientProfile, ProtocolId

logger = get_logger(__name__)


def classify(reps: int, age: float, sex) -> FitnessClass:
    return classify_repetitions(reps, lookup_band(CHAIR_STAND, age, sex))


def chair_stand_score(
    patient: PatientProfile, repetitions: Any, now: Optional[datetime] = None
) -> Union[ChairStandResult, Incomplete]:
    reps = to_int(repetitions)
    if reps is None:
        logger.info("chair stand: no numeric repetitions, not scoring")
        return Incomplete(ProtocolId.CHAIR_STAND, ("repetitions",))
    cls = classify(reps, patient.age, patient.sex)
    logger.debug(f"chair stand: {reps} reps age={patient.age} sex={patient.sex.value} -> {cls.value}")
    return ChairStandResult(repetitions=reps, classification=cls, completed_at=now or datetime.now(timezone.utc))
