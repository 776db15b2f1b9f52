from typing import Any, Dict, Union

import streamlit as st

from core.catalog import get_protocol
from core.tables import MEEM_SECTIONS
from core.types import EducationLevel, Incomplete, MeemResult, PatientProfile, ProtocolId
from core.utils import classification_box
from .scores import cutoff_for, meem_score

id = ProtocolId.MEEM
title = get_protocol(id).name

SECTION_LABELS = {
    "orientation": "Orientação",
    "registration": "Registro",
    "attention": "Atenção e Cálculo",
    "recall": "Evocação",
    "language": "Linguagem",
}
EDUCATION_LABELS = {
    EducationLevel.ILLITERATE: "Analfabeto",
    EducationLevel.YEARS_1_4: "1 a 4 anos",
    EducationLevel.YEARS_5_8: "5 a 8 anos",
    EducationLevel.YEARS_9_11: "9 a 11 anos",
    EducationLevel.YEARS_12_PLUS: "12 anos ou mais",
}


def inputs(patient: PatientProfile) -> Dict[str, Any]:
    st.caption(get_protocol(id).instructions)
    levels = list(EducationLevel)
    education = st.selectbox(
        "Escolaridade",
        levels,
        index=levels.index(patient.education_level) if patient.education_level else None,
        format_func=lambda e: f"{EDUCATION_LABELS[e]} (corte {cutoff_for(e):g})",
        key="meem_edu",
    )
    cols = st.columns(len(MEEM_SECTIONS))
    subscores = {}
    for col, (section, top) in zip(cols, MEEM_SECTIONS.items()):
        with col:
            # number_input clamps to [0, max] for us
            subscores[section] = int(st.number_input(
                f"{SECTION_LABELS[section]} (0–{top})", min_value=0, max_value=top, value=0, step=1,
                key=f"meem_{section}",
            ))
    return {"subscores": subscores, "education_level": education}


def compute(patient: PatientProfile, raw: Dict[str, Any]) -> Union[MeemResult, Incomplete]:
    return meem_score(raw["subscores"], raw.get("education_level"))


def render(result: MeemResult) -> None:
    classification_box("MEEM", f"{result.total_score}/30", result.classification.value)
