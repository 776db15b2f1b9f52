"""
Pytest Configuration and Fixtures

Shared patients, timestamps and history entries for the scoring tests.
"""
from datetime import datetime, timedelta, timezone

import pytest

from core.types import AssessmentHistoryEntry, EducationLevel, PatientProfile, ProtocolId, Sex


@pytest.fixture
def now() -> datetime:
    return datetime(2024, 3, 1, 9, 30, tzinfo=timezone.utc)


@pytest.fixture
def male_profile() -> PatientProfile:
    """72-year-old man, 1.70 m, BMI 22."""
    return PatientProfile(age=72, sex=Sex.M, height_m=1.70, bmi=22.0, name="João Silva")


@pytest.fixture
def female_profile() -> PatientProfile:
    """68-year-old woman, 1.62 m, BMI 27.5, 5-8 years of schooling."""
    return PatientProfile(
        age=68, sex=Sex.F, height_m=1.62, bmi=27.5,
        education_level=EducationLevel.YEARS_5_8, name="Maria Souza",
    )


def make_history_entry(protocol_id, when, score=0, classification="", entry_id=None):
    return AssessmentHistoryEntry(
        id=entry_id or f"{ProtocolId(protocol_id).value}-{when.isoformat()}",
        date=when,
        protocol_id=ProtocolId(protocol_id),
        protocol_name=ProtocolId(protocol_id).value,
        score=score,
        classification=classification,
    )


@pytest.fixture
def history_entry():
    return make_history_entry


@pytest.fixture
def sample_history(now):
    """Newest-first history: two TUG runs and one Berg."""
    t1, t2, t3 = now, now + timedelta(days=30), now + timedelta(days=45)
    return [
        make_history_entry(ProtocolId.BERG, t3, 44, "baixo_risco", "berg-1"),
        make_history_entry(ProtocolId.TUG, t2, 11.2, "moderate_risk", "tug-2"),
        make_history_entry(ProtocolId.TUG, t1, 14.5, "moderate_risk", "tug-1"),
    ]
