"""
Tests for the pieces around the scoring core: patient profile derivation,
triage screening, configuration, module registry and the PDF report.
"""
from datetime import date, timedelta

import pytest

from core.config import MODULE_KEYS, Settings
from core.exceptions import ConfigError
from core.history import latest_per_protocol, make_entry
from core.registry import load_enabled_modules
from core.report import SECTIONS, _section_lines, build_pdf
from core.screening import SCREENING_QUESTIONS, Screening, complete_screening, is_complete
from core.types import CLASSIFICATION_DOMAINS, EducationLevel, Incomplete, PatientProfile, ProtocolId, Sex
from modules.berg.scores import berg_score
from modules.sit_reach.scores import sit_reach_score
from modules.tug.scores import tug_score


class TestPatientProfile:
    """Tests for profile derivation."""

    def test_age_before_and_after_birthday(self):
        birth = date(1950, 6, 15)
        before = PatientProfile.from_measurements("A", birth, Sex.F, 70, 1.65, today=date(2024, 6, 14))
        on_day = PatientProfile.from_measurements("A", birth, Sex.F, 70, 1.65, today=date(2024, 6, 15))
        assert before.age == 73
        assert on_day.age == 74

    def test_bmi(self):
        p = PatientProfile.from_measurements("A", date(1950, 1, 1), "M", 70, 1.65, today=date(2024, 1, 1))
        assert p.bmi == 25.71
        assert p.sex is Sex.M

    def test_future_birth_date_floors_at_zero(self):
        p = PatientProfile.from_measurements("A", date(2030, 1, 1), Sex.M, 70, 1.7, today=date(2024, 1, 1))
        assert p.age == 0

    def test_coerces_codes(self):
        p = PatientProfile(age=70, sex="F", height_m=1.6, bmi=24, education_level="9-11")
        assert p.sex is Sex.F
        assert p.education_level is EducationLevel.YEARS_9_11

    def test_every_protocol_has_a_domain(self):
        assert set(CLASSIFICATION_DOMAINS) == set(ProtocolId)


class TestScreening:
    """Tests for triage."""

    def test_incomplete_lists_missing(self):
        answers = {"walks_independently": True, "had_falls": False}
        assert not is_complete(answers)
        result = complete_screening(answers)
        assert isinstance(result, Incomplete)
        assert result.missing == ("stands_without_arms", "fears_walking", "does_housework")

    def test_complete(self, now):
        answers = {key: False for key, _ in SCREENING_QUESTIONS}
        answers["had_falls"] = True
        result = complete_screening(answers, now=now)
        assert isinstance(result, Screening)
        assert result.had_falls is True
        assert result.to_dict()["completed_at"] == now.isoformat()


class TestSettings:
    """Tests for config.toml handling."""

    def test_defaults_enable_everything_in_catalog_order(self):
        assert Settings().enabled_modules() == list(MODULE_KEYS)

    def test_missing_file_gives_defaults(self, tmp_path):
        settings = Settings.load(tmp_path / "nope.toml")
        assert settings == Settings()

    def test_order_and_disable(self):
        settings = Settings.from_dict({
            "modules": {
                "berg": {"order": 0},
                "gds15": {"enabled": False},
                "tug": {"enabled": True, "order": 1},
            }
        })
        enabled = settings.enabled_modules()
        assert enabled[:2] == ["berg", "tug"]
        assert "gds15" not in enabled
        assert len(enabled) == 7

    def test_unknown_module_rejected(self):
        with pytest.raises(ConfigError) as exc:
            Settings.from_dict({"modules": {"six_minute_walk": {}}})
        assert exc.value.details["unknown"] == ["six_minute_walk"]

    @pytest.mark.parametrize("order", ["1", 1.5, True])
    def test_non_integer_order_rejected(self, order):
        with pytest.raises(ConfigError) as exc:
            Settings.from_dict({"modules": {"tug": {"order": order}}})
        assert exc.value.details["module"] == "tug"

    def test_bad_log_level_rejected(self):
        with pytest.raises(ConfigError):
            Settings.from_dict({"logging": {"level": "chatty"}})

    def test_load_file(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text(
            '[app]\nname = "Clínica Teste"\n'
            '[logging]\nlevel = "debug"\n'
            '[integrations]\ninstall_video_url = "https://example.com/v"\n'
            '[modules.fried]\nenabled = false\n',
            encoding="utf-8",
        )
        settings = Settings.load(path)
        assert settings.app_name == "Clínica Teste"
        assert settings.log_level == "DEBUG"
        assert settings.integrations.install_video_url == "https://example.com/v"
        assert "fried" not in settings.enabled_modules()

    def test_unparseable_file(self, tmp_path):
        path = tmp_path / "config.toml"
        path.write_text("[app\nname=", encoding="utf-8")
        with pytest.raises(ConfigError):
            Settings.load(path)


class TestRegistry:
    """Tests for module loading."""

    def test_loads_all_modules_in_order(self):
        mods = load_enabled_modules(Settings())
        assert [m.id for m in mods] == [MODULE_KEYS[k] for k in MODULE_KEYS]
        for m in mods:
            assert m.title
            assert callable(m.inputs) and callable(m.compute) and callable(m.render)

    def test_module_compute_delegates(self, male_profile):
        mods = {m.id: m for m in load_enabled_modules(Settings())}
        assert mods[ProtocolId.TUG].compute(male_profile, {"time_seconds": "8"}).time_seconds == 8.0
        assert isinstance(mods[ProtocolId.MEEM].compute(male_profile, {"subscores": {}, "education_level": None}),
                          Incomplete)


class TestReport:
    """Tests for the PDF report."""

    def test_empty_history(self, male_profile):
        pdf = build_pdf(male_profile, [], issued=date(2024, 3, 1))
        assert pdf.startswith(b"%PDF")

    def test_with_results_and_observations(self, female_profile, now):
        history = [
            make_entry(tug_score(12.3, now=now + timedelta(days=1))),
            make_entry(tug_score(15.0, now=now)),
            make_entry(berg_score([3] * 14, now=now)),
        ]
        pdf = build_pdf(female_profile, history, observations="Usa bengala & óculos <leitura>",
                        settings=Settings(app_name="Clínica Teste"))
        assert pdf.startswith(b"%PDF")
        assert len(pdf) > 1000

    def test_sections_cover_known_protocols(self):
        covered = {pid for _, members in SECTIONS for pid in members}
        assert covered <= set(ProtocolId)


class TestReportSections:
    """Tests for the grouped section lines under the results table."""

    def test_only_sections_with_results(self, male_profile, now):
        latest = latest_per_protocol([make_entry(tug_score(8, now=now))])
        assert _section_lines(latest) == [("Mobilidade e Equilíbrio", ["TUG (Mobilidade): BAIXO RISCO"])]

    def test_uses_latest_entry_per_protocol(self, male_profile, now):
        history = [
            make_entry(tug_score(12.3, now=now + timedelta(days=1))),
            make_entry(tug_score(8, now=now)),
            make_entry(berg_score([3] * 14, now=now)),
        ]
        sections = dict(_section_lines(latest_per_protocol(history)))
        assert list(sections) == ["Mobilidade e Equilíbrio"]
        assert sections["Mobilidade e Equilíbrio"][0] == "TUG (Mobilidade): RISCO MODERADO"
        assert len(sections["Mobilidade e Equilíbrio"]) == 2

    def test_sit_reach_has_no_section(self, male_profile, now):
        entry = make_entry(sit_reach_score(male_profile, 1.0, now=now))
        assert _section_lines([entry]) == []
