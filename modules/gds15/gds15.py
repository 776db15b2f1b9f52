from typing import Any, Dict, Union

import streamlit as st

from core.catalog import get_protocol
from core.tables import GDS15_ITEMS
from core.types import Gds15Result, Incomplete, PatientProfile, ProtocolId
from core.utils import classification_box, yes_no
from .scores import gds15_score

id = ProtocolId.GDS15
title = get_protocol(id).name


def inputs(patient: PatientProfile) -> Dict[str, Any]:
    st.caption(get_protocol(id).instructions)
    answers = [yes_no(f"{i + 1}. {text}", f"gds_{i}") for i, (text, _, _) in enumerate(GDS15_ITEMS)]
    return {"answers": answers}


def compute(patient: PatientProfile, raw: Dict[str, Any]) -> Union[Gds15Result, Incomplete]:
    return gds15_score(raw["answers"])


def render(result: Gds15Result) -> None:
    classification_box("GDS-15", f"{result.total_score}/15", result.classification.value)
