from datetime import datetime, timezone
from typing import Optional, Sequence, Union

from core.exceptions import ContractViolation
from core.logging import get_logger
from core.tables import GDS15_ITEMS, GDS15_MILD_MIN, GDS15_SEVERE_MIN
from core.types import DepressionClass, Gds15Result, Incomplete, ProtocolId

logger = get_logger(__name__)


def classify(total: int) -> DepressionClass:
    if total >= GDS15_SEVERE_MIN:
        return DepressionClass.SEVERE
    if total >= GDS15_MILD_MIN:
        return DepressionClass.MILD
    return DepressionClass.NORMAL


def item_points(index: int, answer: bool) -> int:
    _, if_yes, if_no = GDS15_ITEMS[index]
    return if_yes if answer else if_no


def gds15_score(
    answers: Sequence[Optional[bool]], now: Optional[datetime] = None
) -> Union[Gds15Result, Incomplete]:
    """
    Geriatric Depression Scale, 15 items.

    `answers` is positional, True = "sim". Every item must be answered;
    unanswered items are reported back as 1-based question numbers.
    """
    if len(answers) != len(GDS15_ITEMS):
        raise ContractViolation(
            f"GDS-15 expects {len(GDS15_ITEMS)} answers, got {len(answers)}",
            protocol=ProtocolId.GDS15.value,
        )

    missing = tuple(f"q{i + 1}" for i, a in enumerate(answers) if a is None)
    if missing:
        logger.info(f"gds15: unanswered {', '.join(missing)}, not scoring")
        return Incomplete(ProtocolId.GDS15, missing)

    total = sum(item_points(i, bool(a)) for i, a in enumerate(answers))
    cls = classify(total)
    logger.debug(f"gds15: total={total} -> {cls.value}")
    return Gds15Result(
        answers=tuple(bool(a) for a in answers),
        total_score=total,
        classification=cls,
        completed_at=now or datetime.now(timezone.utc),
    )
