from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Mapping, Optional, Tuple, Union

from core.types import Incomplete

# key, question shown at triage
SCREENING_QUESTIONS: List[Tuple[str, str]] = [
    ("walks_independently", "Caminha de forma independente (sem auxílio)?"),
    ("stands_without_arms", "Consegue levantar da cadeira sem usar os braços?"),
    ("had_falls", "Houve episódios de quedas nos últimos 6 meses?"),
    ("fears_walking", "Relata insegurança ou medo de cair ao caminhar?"),
    ("does_housework", "Realiza tarefas domésticas leves sem ajuda?"),
]


@dataclass(frozen=True)
class Screening:
    walks_independently: bool
    stands_without_arms: bool
    had_falls: bool
    fears_walking: bool
    does_housework: bool
    completed_at: datetime

    def to_dict(self) -> Dict[str, object]:
        out: Dict[str, object] = {k: getattr(self, k) for k, _ in SCREENING_QUESTIONS}
        out["completed_at"] = self.completed_at.isoformat()
        return out


def is_complete(answers: Mapping[str, Optional[bool]]) -> bool:
    return all(answers.get(k) is not None for k, _ in SCREENING_QUESTIONS)


def complete_screening(
    answers: Mapping[str, Optional[bool]], now: Optional[datetime] = None
) -> Union[Screening, Incomplete]:
    missing = tuple(k for k, _ in SCREENING_QUESTIONS if answers.get(k) is None)
    if missing:
        return Incomplete(protocol_id=None, missing=missing)
    return Screening(
        **{k: bool(answers[k]) for k, _ in SCREENING_QUESTIONS},
        completed_at=now or datetime.now(timezone.utc),
    )
