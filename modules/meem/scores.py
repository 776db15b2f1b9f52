from datetime import datetime, timezone
from typing import Dict, Mapping, Optional, Union

from core.exceptions import ContractViolation
from core.logging import get_logger
from core.tables import MEEM_CUTOFFS, MEEM_MILD_MIN, MEEM_MODERATE_MIN, MEEM_SECTIONS
from core.types import CognitiveClass, EducationLevel, Incomplete, MeemResult, ProtocolId

logger = get_logger(__name__)


def cutoff_for(education_level: EducationLevel) -> float:
    return MEEM_CUTOFFS[EducationLevel(education_level)]


def classify(total: int, education_level: EducationLevel) -> CognitiveClass:
    # the decline tiers do not depend on the education cutoff, only on the total
    if total >= cutoff_for(education_level):
        return CognitiveClass.NO_DECLINE
    if total >= MEEM_MILD_MIN:
        return CognitiveClass.MILD
    if total >= MEEM_MODERATE_MIN:
        return CognitiveClass.MODERATE
    return CognitiveClass.SEVERE


def adjust(subscores: Mapping[str, int], section: str, delta: int) -> Dict[str, int]:
    """Copy of `subscores` with one section moved by `delta`, clamped to [0, max]."""
    if section not in MEEM_SECTIONS:
        raise ContractViolation(f"Unknown MEEM section {section!r}", protocol=ProtocolId.MEEM.value)
    out = {k: int(subscores.get(k, 0)) for k in MEEM_SECTIONS}
    out[section] = min(max(0, out[section] + delta), MEEM_SECTIONS[section])
    return out


def meem_score(
    subscores: Mapping[str, int],
    education_level: Optional[EducationLevel],
    now: Optional[datetime] = None,
) -> Union[MeemResult, Incomplete]:
    if education_level is None or education_level == "":
        logger.info("meem: education level not set, not scoring")
        return Incomplete(ProtocolId.MEEM, ("education_level",))
    level = EducationLevel(education_level)

    scores = {k: int(subscores.get(k, 0)) for k in MEEM_SECTIONS}
    total = sum(scores.values())
    cls = classify(total, level)
    logger.debug(f"meem: total={total} education={level.value} -> {cls.value}")
    return MeemResult(
        subscores=scores,
        education_level=level,
        total_score=total,
        classification=cls,
        completed_at=now or datetime.now(timezone.utc),
    )
