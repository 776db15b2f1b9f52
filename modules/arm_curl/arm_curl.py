from typing import Any, Dict, Union

import streamlit as st

from core.bands import lookup_band
from core.catalog import get_protocol
from core.tables import ARM_CURL, ARM_CURL_LOAD
from core.types import ArmCurlResult, Incomplete, PatientProfile, ProtocolId
from core.utils import classification_box, text_number
from .scores import arm_curl_score

id = ProtocolId.ARM_CURL
title = get_protocol(id).name


def inputs(patient: PatientProfile) -> Dict[str, Any]:
    band = lookup_band(ARM_CURL, patient.age, patient.sex)
    st.caption(get_protocol(id).instructions)
    st.caption(
        f"Carga: {ARM_CURL_LOAD[patient.sex]} • "
        f"faixa normal para a idade: {band.lower:g}–{band.upper:g} repetições"
    )
    return {"repetitions": text_number("Repetições em 30s", "curl_reps")}


def compute(patient: PatientProfile, raw: Dict[str, Any]) -> Union[ArmCurlResult, Incomplete]:
    return arm_curl_score(patient, raw.get("repetitions"))


def render(result: ArmCurlResult) -> None:
    classification_box(f"Flexão de Cotovelo ({result.weight_used})", f"{result.repetitions} rep",
                       result.classification.value)
