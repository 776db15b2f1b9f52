from typing import Any, Dict, Union

import streamlit as st

from core.bands import lookup_band
from core.catalog import get_protocol
from core.tables import CHAIR_STAND
from core.types import ChairStandResult, Incomplete, PatientProfile, ProtocolId
from core.utils import classification_box, text_number
from .scores import chair_stand_score

id = ProtocolId.CHAIR_STAND
title = get_protocol(id).name


def inputs(patient: PatientProfile) -> Dict[str, Any]:
    band = lookup_band(CHAIR_STAND, patient.age, patient.sex)
    st.caption(get_protocol(id).instructions)
    st.caption(f"Faixa normal para a idade: {band.lower:g}–{band.upper:g} repetições")
    return {"repetitions": text_number("Repetições em 30s", "chair_reps")}


def compute(patient: PatientProfile, raw: Dict[str, Any]) -> Union[ChairStandResult, Incomplete]:
    return chair_stand_score(patient, raw.get("repetitions"))


def render(result: ChairStandResult) -> None:
    classification_box("Sentar e Levantar", f"{result.repetitions} rep", result.classification.value)
