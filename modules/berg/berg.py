from typing import Any, Dict

import streamlit as st

from core.catalog import get_protocol
from core.tables import BERG_ITEM_MAX, BERG_ITEMS
from core.types import BergResult, PatientProfile, ProtocolId
from core.utils import classification_box
from .scores import berg_score, blank_items, with_item

id = ProtocolId.BERG
title = get_protocol(id).name


def inputs(patient: PatientProfile) -> Dict[str, Any]:
    st.caption(get_protocol(id).instructions)
    items = blank_items()
    for i, task in enumerate(BERG_ITEMS):
        value = st.radio(f"{i + 1}. {task}", list(range(BERG_ITEM_MAX + 1)), index=0,
                         horizontal=True, key=f"berg_{i}")
        items = with_item(items, i, value)
    st.caption(f"Total: {sum(items)} / {BERG_ITEM_MAX * len(BERG_ITEMS)}")
    return {"item_scores": items}


def compute(patient: PatientProfile, raw: Dict[str, Any]) -> BergResult:
    return berg_score(raw["item_scores"])


def render(result: BergResult) -> None:
    classification_box("Berg", f"{result.total_score}/56", result.classification.value)
