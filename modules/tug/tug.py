from typing import Any, Dict, Union

import streamlit as st

from core.catalog import get_protocol
from core.types import Incomplete, PatientProfile, ProtocolId, TugResult
from core.utils import classification_box, text_number
from .scores import tug_score

id = ProtocolId.TUG
title = get_protocol(id).name


def inputs(patient: PatientProfile) -> Dict[str, Any]:
    st.caption(get_protocol(id).instructions)
    return {"time_seconds": text_number("Tempo (s)", "tug_time", placeholder="ex.: 9.85")}


def compute(patient: PatientProfile, raw: Dict[str, Any]) -> Union[TugResult, Incomplete]:
    return tug_score(raw.get("time_seconds"))


def render(result: TugResult) -> None:
    classification_box("TUG", f"{result.time_seconds:.2f}s", result.classification.value)
