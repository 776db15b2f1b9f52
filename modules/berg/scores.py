from datetime import datetime, timezone
from typing import Optional, Sequence, Tuple

from core.exceptions import ContractViolation
from core.logging import get_logger
from core.tables import BERG_HIGH_RISK_MAX, BERG_ITEMS, BERG_MEDIUM_RISK_MAX
from core.types import BalanceRisk, BergResult, ProtocolId

logger = get_logger(__name__)


def _check_length(item_scores: Sequence[int]) -> None:
    if len(item_scores) != len(BERG_ITEMS):
        raise ContractViolation(
            f"Berg expects {len(BERG_ITEMS)} item scores, got {len(item_scores)}",
            protocol=ProtocolId.BERG.value,
        )


def classify(total: int) -> BalanceRisk:
    if total <= BERG_HIGH_RISK_MAX:
        return BalanceRisk.HIGH
    if total <= BERG_MEDIUM_RISK_MAX:
        return BalanceRisk.MEDIUM
    return BalanceRisk.LOW


def blank_items() -> Tuple[int, ...]:
    return (0,) * len(BERG_ITEMS)


def with_item(item_scores: Sequence[int], index: int, value: int) -> Tuple[int, ...]:
    _check_length(item_scores)
    if not 0 <= index < len(BERG_ITEMS):
        raise ContractViolation(f"Berg item index {index} out of range", protocol=ProtocolId.BERG.value)
    items = list(item_scores)
    items[index] = value
    return tuple(items)


def berg_score(item_scores: Sequence[int], now: Optional[datetime] = None) -> BergResult:
    _check_length(item_scores)
    items = tuple(int(s) for s in item_scores)
    total = sum(items)
    cls = classify(total)
    logger.debug(f"berg: total={total} -> {cls.value}")
    return BergResult(
        item_scores=items,
        total_score=total,
        classification=cls,
        completed_at=now or datetime.now(timezone.utc),
    )
