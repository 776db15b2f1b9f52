from typing import Any, Dict, Union

import streamlit as st

from core.catalog import get_protocol
from core.types import Incomplete, PatientProfile, ProtocolId, SitReachResult
from core.utils import classification_box, text_number
from .scores import sit_reach_score

id = ProtocolId.SIT_REACH
title = get_protocol(id).name


def inputs(patient: PatientProfile) -> Dict[str, Any]:
    st.caption(get_protocol(id).instructions)
    return {"distance_cm": text_number("Distância (cm, negativo se não alcançar)", "reach_cm")}


def compute(patient: PatientProfile, raw: Dict[str, Any]) -> Union[SitReachResult, Incomplete]:
    return sit_reach_score(patient, raw.get("distance_cm"))


def render(result: SitReachResult) -> None:
    classification_box("Sentar e Alcançar", f"{result.distance_cm:+g} cm", result.classification.value)
