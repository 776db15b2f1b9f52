from dataclasses import dataclass, field, asdict
from datetime import date, datetime
from enum import Enum
from typing import Protocol, Dict, Any, Optional, Tuple, Union


class Sex(str, Enum):
    M = "M"
    F = "F"


class EducationLevel(str, Enum):
    ILLITERATE = "analfabeto"
    YEARS_1_4 = "1-4"
    YEARS_5_8 = "5-8"
    YEARS_9_11 = "9-11"
    YEARS_12_PLUS = "12+"


class ProtocolId(str, Enum):
    FRIED = "fried"
    TUG = "tug"
    CHAIR_STAND = "sit_stand_30"
    ARM_CURL = "arm_curl"
    SIT_REACH = "sit_reach"
    GDS15 = "gds15"
    MEEM = "meem_cognitive"
    BERG = "berg_balance"


# ----- classification domains (one closed enum per protocol) -----

class FrailtyClass(str, Enum):
    NOT_FRAIL = "not_frail"
    PRE_FRAIL = "pre_frail"
    FRAIL = "frail"


class MobilityRisk(str, Enum):
    LOW = "low_risk"
    MODERATE = "moderate_risk"
    HIGH = "high_risk"


class FitnessClass(str, Enum):
    RUIM = "ruim"
    REGULAR = "regular"
    BOM = "bom"
    MUITO_BOM = "muito_bom"
    EXCELENTE = "excelente"


class FlexibilityClass(str, Enum):
    RUIM = "ruim"
    REGULAR = "regular"
    BOM = "bom"
    MUITO_BOM = "muito_bom"


class DepressionClass(str, Enum):
    NORMAL = "normal"
    MILD = "depressao_leve"
    SEVERE = "depressao_grave"


class CognitiveClass(str, Enum):
    NO_DECLINE = "sem_declinio"
    MILD = "declinio_leve"
    MODERATE = "declinio_moderado"
    SEVERE = "declinio_grave"


class BalanceRisk(str, Enum):
    HIGH = "alto_risco"
    MEDIUM = "medio_risco"
    LOW = "baixo_risco"


CLASSIFICATION_DOMAINS: Dict[ProtocolId, type] = {
    ProtocolId.FRIED: FrailtyClass,
    ProtocolId.TUG: MobilityRisk,
    ProtocolId.CHAIR_STAND: FitnessClass,
    ProtocolId.ARM_CURL: FitnessClass,
    ProtocolId.SIT_REACH: FlexibilityClass,
    ProtocolId.GDS15: DepressionClass,
    ProtocolId.MEEM: CognitiveClass,
    ProtocolId.BERG: BalanceRisk,
}


# ----- patient -----

@dataclass(frozen=True)
class PatientProfile:
    age: int
    sex: Sex
    height_m: float
    bmi: float
    education_level: Optional[EducationLevel] = None
    name: str = ""
    weight_kg: Optional[float] = None

    def __post_init__(self):
        # accept plain "M"/"F" and "1-4"-style codes from stored records
        object.__setattr__(self, "sex", Sex(self.sex))
        if self.education_level is not None:
            object.__setattr__(self, "education_level", EducationLevel(self.education_level))

    @classmethod
    def from_measurements(
        cls,
        name: str,
        birth_date: date,
        sex: Sex,
        weight_kg: float,
        height_m: float,
        education_level: Optional[EducationLevel] = None,
        today: Optional[date] = None,
    ) -> "PatientProfile":
        today = today or date.today()
        age = today.year - birth_date.year
        if (today.month, today.day) < (birth_date.month, birth_date.day):
            age -= 1
        bmi = round(weight_kg / (height_m * height_m), 2) if height_m > 0 else 0.0
        return cls(
            age=max(0, age),
            sex=Sex(sex),
            height_m=height_m,
            bmi=bmi,
            education_level=education_level,
            name=name,
            weight_kg=weight_kg,
        )


# ----- results -----

def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    return value


class _ResultMixin:
    def to_dict(self) -> Dict[str, Any]:
        return {k: _plain(v) for k, v in asdict(self).items()}


@dataclass(frozen=True)
class Incomplete:
    """Inputs were not sufficient to score; nothing should be persisted."""
    protocol_id: Optional[ProtocolId]  # None for the triage screening
    missing: Tuple[str, ...]


@dataclass(frozen=True)
class FriedResult(_ResultMixin):
    criteria: Dict[str, int]  # weight_loss, fatigue, grip_strength, walking_speed, physical_activity
    grip_strength_kg: Optional[float]
    gait_speed_seconds: Optional[float]
    total_score: int
    classification: FrailtyClass
    completed_at: datetime
    protocol_id: ProtocolId = ProtocolId.FRIED

    @property
    def score(self) -> int:
        return self.total_score


@dataclass(frozen=True)
class TugResult(_ResultMixin):
    time_seconds: float
    classification: MobilityRisk
    completed_at: datetime
    protocol_id: ProtocolId = ProtocolId.TUG

    @property
    def score(self) -> float:
        return self.time_seconds


@dataclass(frozen=True)
class ChairStandResult(_ResultMixin):
    repetitions: int
    classification: FitnessClass
    completed_at: datetime
    protocol_id: ProtocolId = ProtocolId.CHAIR_STAND

    @property
    def score(self) -> int:
        return self.repetitions


@dataclass(frozen=True)
class ArmCurlResult(_ResultMixin):
    repetitions: int
    weight_used: str  # "4kg" / "2kg"
    classification: FitnessClass
    completed_at: datetime
    protocol_id: ProtocolId = ProtocolId.ARM_CURL

    @property
    def score(self) -> int:
        return self.repetitions


@dataclass(frozen=True)
class SitReachResult(_ResultMixin):
    distance_cm: float
    classification: FlexibilityClass
    completed_at: datetime
    protocol_id: ProtocolId = ProtocolId.SIT_REACH

    @property
    def score(self) -> float:
        return self.distance_cm


@dataclass(frozen=True)
class Gds15Result(_ResultMixin):
    answers: Tuple[bool, ...]
    total_score: int
    classification: DepressionClass
    completed_at: datetime
    protocol_id: ProtocolId = ProtocolId.GDS15

    @property
    def score(self) -> int:
        return self.total_score


@dataclass(frozen=True)
class MeemResult(_ResultMixin):
    subscores: Dict[str, int]  # orientation, registration, attention, recall, language
    education_level: EducationLevel
    total_score: int
    classification: CognitiveClass
    completed_at: datetime
    protocol_id: ProtocolId = ProtocolId.MEEM

    @property
    def score(self) -> int:
        return self.total_score


@dataclass(frozen=True)
class BergResult(_ResultMixin):
    item_scores: Tuple[int, ...]
    total_score: int
    classification: BalanceRisk
    completed_at: datetime
    protocol_id: ProtocolId = ProtocolId.BERG

    @property
    def score(self) -> int:
        return self.total_score


AssessmentResult = Union[
    FriedResult, TugResult, ChairStandResult, ArmCurlResult,
    SitReachResult, Gds15Result, MeemResult, BergResult,
]


@dataclass(frozen=True)
class AssessmentHistoryEntry:
    id: str
    date: datetime
    protocol_id: ProtocolId
    protocol_name: str
    score: Union[float, int, str]
    classification: str
    details: Optional[AssessmentResult] = field(default=None, compare=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "date": self.date.isoformat(),
            "protocol_id": self.protocol_id.value,
            "protocol_name": self.protocol_name,
            "score": self.score,
            "classification": self.classification,
            "details": self.details.to_dict() if self.details is not None else None,
        }


@dataclass(frozen=True)
class AgeBand:
    sex: Sex
    age_min: int
    age_max: Optional[int]  # exclusive; None = unbounded
    lower: float
    upper: float

    def matches(self, age: float, sex: Sex) -> bool:
        if self.sex != sex or age < self.age_min:
            return False
        return self.age_max is None or age < self.age_max


# ----- module contract -----

class AssessmentModule(Protocol):
    id: ProtocolId
    title: str
    def inputs(self, patient: PatientProfile) -> Dict[str, Any]: ...
    def compute(self, patient: PatientProfile, raw: Dict[str, Any]) -> Union[AssessmentResult, Incomplete]: ...
    def render(self, result: AssessmentResult) -> None: ...
