from datetime import datetime, timezone
from typing import Any, Optional, Union

from core.bands import classify_repetitions, lookup_band
from core.logging import get_logger
from core.parsing import to_int
from core.tables import ARM_CURL, ARM_CURL_LOAD
from core.types import ArmCurlResult, FitnessClass, Incomplete, PatientProfile, ProtocolId, Sex

logger = get_logger(__name__)


def classify(reps: int, age: float, sex) -> FitnessClass:
    return classify_repetitions(reps, lookup_band(ARM_CURL, age, sex))


def arm_curl_score(
    patient: PatientProfile, repetitions: Any, now: Optional[datetime] = None
) -> Union[ArmCurlResult, Incomplete]:
    reps = to_int(repetitions)
    if reps is None:
        logger.info("arm curl: no numeric repetitions, not scoring")
        return Incomplete(ProtocolId.ARM_CURL, ("repetitions",))
    cls = classify(reps, patient.age, patient.sex)
    logger.debug(f"arm curl: {reps} reps age={patient.age} sex={patient.sex.value} -> {cls.value}")
    return ArmCurlResult(
        repetitions=reps,
        weight_used=ARM_CURL_LOAD[Sex(patient.sex)],
        classification=cls,
        completed_at=now or datetime.now(timezone.utc),
    )
