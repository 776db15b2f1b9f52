"""
Unit tests for the physical performance protocols:
Fried frailty, TUG, chair stand, arm curl and sit-and-reach.
"""
import itertools

import pytest

from core.bands import lookup_band
from core.exceptions import ContractViolation
from core.tables import ARM_CURL, CHAIR_STAND, SIT_REACH
from core.types import (
    CLASSIFICATION_DOMAINS, FitnessClass, FlexibilityClass, FrailtyClass, Incomplete, MobilityRisk,
    PatientProfile, ProtocolId, Sex,
)
from modules.arm_curl.scores import arm_curl_score
from modules.chair_stand.scores import chair_stand_score
from modules.fried.scores import fried_score, gait_cutoff, grip_cutoff
from modules.sit_reach.scores import sit_reach_score
from modules.tug.scores import tug_score


class TestFriedClassifier:
    """Tests for the Fried frailty phenotype."""

    def test_no_criteria_is_not_frail(self, male_profile, now):
        result = fried_score(male_profile, now=now)
        assert result.total_score == 0
        assert result.classification == FrailtyClass.NOT_FRAIL
        assert set(result.criteria.values()) == {0}

    def test_weak_grip_counts(self, male_profile, now):
        """Male, BMI 22 -> cutoff 29 kg; 25 kg is at or below it."""
        result = fried_score(male_profile, grip_strength_kg=25, now=now)
        assert result.criteria["grip_strength"] == 1
        assert result.total_score == 1
        assert result.classification == FrailtyClass.PRE_FRAIL

    def test_grip_equal_to_cutoff_counts(self, male_profile):
        assert fried_score(male_profile, grip_strength_kg="29").criteria["grip_strength"] == 1
        assert fried_score(male_profile, grip_strength_kg="29.1").criteria["grip_strength"] == 0

    @pytest.mark.parametrize("sex,bmi,expected", [
        (Sex.M, 24, 29.0), (Sex.M, 24.1, 30.0), (Sex.M, 28, 30.0), (Sex.M, 35, 32.0),
        (Sex.F, 23, 17.0), (Sex.F, 26, 17.3), (Sex.F, 29, 18.0), (Sex.F, 29.5, 21.0),
    ])
    def test_grip_cutoffs(self, sex, bmi, expected):
        assert grip_cutoff(sex, bmi) == expected

    @pytest.mark.parametrize("sex,height,expected", [
        (Sex.M, 1.73, 7.0), (Sex.M, 1.74, 6.0), (Sex.F, 1.59, 7.0), (Sex.F, 1.60, 6.0),
    ])
    def test_gait_cutoffs(self, sex, height, expected):
        assert gait_cutoff(sex, height) == expected

    def test_slow_gait_counts(self, female_profile):
        """Female 1.62 m -> cutoff 6 s; slower-or-equal times count."""
        assert fried_score(female_profile, gait_speed_seconds=6.0).criteria["walking_speed"] == 1
        assert fried_score(female_profile, gait_speed_seconds=5.9).criteria["walking_speed"] == 0

    def test_missing_measurements_degrade_silently(self, male_profile):
        result = fried_score(male_profile, weight_loss=True, grip_strength_kg="", gait_speed_seconds="n/a")
        assert result.total_score == 1
        assert result.grip_strength_kg is None
        assert result.gait_speed_seconds is None

    def test_three_criteria_is_frail(self, male_profile):
        result = fried_score(male_profile, weight_loss=True, fatigue=True, low_activity=True)
        assert result.total_score == 3
        assert result.criteria["physical_activity"] == 1
        assert result.classification == FrailtyClass.FRAIL

    def test_all_five(self, male_profile):
        result = fried_score(male_profile, True, True, True, grip_strength_kg=20, gait_speed_seconds=8)
        assert result.total_score == 5
        assert result.classification == FrailtyClass.FRAIL


class TestTugClassifier:
    """Tests for Timed Up and Go."""

    @pytest.mark.parametrize("seconds,expected", [
        (9.99, MobilityRisk.LOW),
        (10.0, MobilityRisk.MODERATE),
        (20.0, MobilityRisk.MODERATE),
        (20.01, MobilityRisk.HIGH),
        (0, MobilityRisk.LOW),
    ])
    def test_thresholds(self, seconds, expected, now):
        result = tug_score(seconds, now=now)
        assert result.classification == expected
        assert result.completed_at == now

    def test_accepts_text(self):
        assert tug_score("12.5").time_seconds == 12.5
        assert tug_score("9,5").classification == MobilityRisk.LOW

    @pytest.mark.parametrize("raw", [None, "", "abc", float("nan")])
    def test_non_numeric_is_incomplete(self, raw):
        result = tug_score(raw)
        assert isinstance(result, Incomplete)
        assert result.protocol_id == ProtocolId.TUG
        assert result.missing == ("time_seconds",)


class TestChairStandClassifier:
    """Tests for the 30s chair stand."""

    @pytest.mark.parametrize("reps,expected", [
        (9, FitnessClass.RUIM),
        (10, FitnessClass.REGULAR),
        (11, FitnessClass.REGULAR),
        (12, FitnessClass.BOM),
        (17, FitnessClass.BOM),
        (18, FitnessClass.MUITO_BOM),
        (20, FitnessClass.MUITO_BOM),
        (21, FitnessClass.EXCELENTE),
    ])
    def test_male_70_74(self, male_profile, reps, expected):
        """Male 72 -> normal range 12-17."""
        assert chair_stand_score(male_profile, reps).classification == expected

    def test_text_reps_truncate(self, male_profile):
        assert chair_stand_score(male_profile, "12.7").repetitions == 12

    def test_blank_is_incomplete(self, male_profile):
        result = chair_stand_score(male_profile, "")
        assert isinstance(result, Incomplete)
        assert result.protocol_id == ProtocolId.CHAIR_STAND

    @pytest.mark.parametrize("age,expected", [
        (0, (14, 19)), (64, (14, 19)), (65, (12, 18)), (69, (12, 18)), (70, (12, 17)),
        (79, (11, 17)), (80, (10, 15)), (89, (8, 14)), (90, (7, 12)), (120, (7, 12)),
    ])
    def test_male_band_edges(self, age, expected):
        band = lookup_band(CHAIR_STAND, age, Sex.M)
        assert (band.lower, band.upper) == expected

    def test_female_oldest_band(self):
        band = lookup_band(CHAIR_STAND, 95, Sex.F)
        assert (band.lower, band.upper) == (4, 11)


class TestArmCurlClassifier:
    """Tests for the 30s arm curl."""

    @pytest.mark.parametrize("reps,expected", [
        (9, FitnessClass.RUIM),
        (10, FitnessClass.REGULAR),
        (12, FitnessClass.BOM),
        (18, FitnessClass.BOM),
        (21, FitnessClass.MUITO_BOM),
        (22, FitnessClass.EXCELENTE),
    ])
    def test_female_65_69(self, female_profile, reps, expected):
        """Female 68 -> normal range 12-18."""
        assert arm_curl_score(female_profile, reps).classification == expected

    def test_load_depends_on_sex(self, male_profile, female_profile):
        assert arm_curl_score(male_profile, 15).weight_used == "4kg"
        assert arm_curl_score(female_profile, 15).weight_used == "2kg"

    def test_non_numeric_is_incomplete(self, female_profile):
        assert isinstance(arm_curl_score(female_profile, "x"), Incomplete)


class TestSitReachClassifier:
    """Tests for the chair sit-and-reach."""

    @pytest.mark.parametrize("dist,expected", [
        (-9, FlexibilityClass.RUIM),
        (-8, FlexibilityClass.REGULAR),
        (-2.5, FlexibilityClass.REGULAR),
        (-2, FlexibilityClass.BOM),
        (3, FlexibilityClass.BOM),
        (3.5, FlexibilityClass.MUITO_BOM),
    ])
    def test_male_70_74(self, male_profile, dist, expected):
        """Male 72 -> range -8..3, midpoint -2.5."""
        assert sit_reach_score(male_profile, dist).classification == expected

    def test_female_65_69(self, female_profile):
        """Female 68 -> range -1..8, midpoint 3.5."""
        assert sit_reach_score(female_profile, 3.5).classification == FlexibilityClass.REGULAR
        assert sit_reach_score(female_profile, 4).classification == FlexibilityClass.BOM
        assert sit_reach_score(female_profile, 9).classification == FlexibilityClass.MUITO_BOM

    def test_negative_text(self, male_profile):
        assert sit_reach_score(male_profile, "-4.5").distance_cm == -4.5

    def test_blank_is_incomplete(self, male_profile):
        assert isinstance(sit_reach_score(male_profile, None), Incomplete)


class TestBandCoverage:
    """Every age 0-120 and both sexes resolve to exactly one band."""

    @pytest.mark.parametrize("table", [CHAIR_STAND, ARM_CURL, SIT_REACH])
    @pytest.mark.parametrize("sex", [Sex.M, Sex.F])
    def test_exactly_one_band(self, table, sex):
        for age in range(0, 121):
            assert sum(1 for row in table if row.matches(age, sex)) == 1

    @pytest.mark.parametrize("scorer", [chair_stand_score, arm_curl_score])
    @pytest.mark.parametrize("sex", [Sex.M, Sex.F])
    def test_repetition_domain(self, scorer, sex):
        for age in range(0, 121, 3):
            patient = PatientProfile(age=age, sex=sex, height_m=1.6, bmi=25)
            for reps in range(0, 41):
                assert scorer(patient, reps).classification in set(FitnessClass)

    @pytest.mark.parametrize("sex", [Sex.M, Sex.F])
    def test_sit_reach_domain(self, sex):
        for age in range(0, 121, 5):
            patient = PatientProfile(age=age, sex=sex, height_m=1.6, bmi=25)
            for tenth in range(-300, 301, 5):
                result = sit_reach_score(patient, tenth / 10)
                assert result.classification in set(FlexibilityClass)

    def test_negative_age_is_contract_violation(self):
        with pytest.raises(ContractViolation):
            lookup_band(CHAIR_STAND, -1, Sex.M)


class TestClassificationDomains:
    """Every valid input lands in its protocol's classification domain."""

    @pytest.mark.parametrize("grip", [None, 15, 40])
    @pytest.mark.parametrize("gait", [None, 4, 9])
    @pytest.mark.parametrize("patient", ["male_profile", "female_profile"])
    def test_fried(self, request, patient, grip, gait):
        profile = request.getfixturevalue(patient)
        for flags in itertools.product([False, True], repeat=3):
            result = fried_score(profile, *flags, grip_strength_kg=grip, gait_speed_seconds=gait)
            assert result.classification in set(CLASSIFICATION_DOMAINS[result.protocol_id])
            assert 0 <= result.total_score <= 5

    def test_tug(self):
        for hundredths in range(0, 6001, 7):
            result = tug_score(hundredths / 100)
            assert result.classification in set(CLASSIFICATION_DOMAINS[result.protocol_id])
