from typing import Any, Dict, Union

import streamlit as st

from core.catalog import get_protocol
from core.types import FriedResult, Incomplete, PatientProfile, ProtocolId
from core.utils import classification_box, color_box, text_number, yes_no
from .scores import fried_score, gait_cutoff, grip_cutoff

id = ProtocolId.FRIED
title = get_protocol(id).name

CRITERIA_LABELS = {
    "weight_loss": "Perda de peso",
    "fatigue": "Exaustão",
    "grip_strength": "Força de preensão",
    "walking_speed": "Velocidade de marcha",
    "physical_activity": "Atividade física",
}


def inputs(patient: PatientProfile) -> Dict[str, Any]:
    c1, c2 = st.columns(2)
    with c1:
        weight_loss = yes_no("Perda de peso não intencional (>4.5kg no último ano)?", "fried_wl")
        fatigue = yes_no("Relata exaustão na maior parte dos dias?", "fried_fat")
        low_activity = yes_no("Baixo nível de atividade física?", "fried_act")
    with c2:
        grip = text_number("Preensão palmar (kg)", "fried_grip",
                           placeholder=f"corte {grip_cutoff(patient.sex, patient.bmi)} kg")
        gait = text_number("Marcha 4.6m (s)", "fried_gait",
                           placeholder=f"corte {gait_cutoff(patient.sex, patient.height_m)} s")
    return {
        "weight_loss": weight_loss,
        "fatigue": fatigue,
        "low_activity": low_activity,
        "grip_strength_kg": grip,
        "gait_speed_seconds": gait,
    }


def compute(patient: PatientProfile, raw: Dict[str, Any]) -> Union[FriedResult, Incomplete]:
    return fried_score(patient, **raw)


def render(result: FriedResult) -> None:
    classification_box("Fenótipo de Fried", f"{result.total_score}/5", result.classification.value)
    met = [CRITERIA_LABELS[k] for k, v in result.criteria.items() if v]
    if met:
        color_box("Critérios positivos: " + ", ".join(met) + ".", level="info")
