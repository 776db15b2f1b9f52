from typing import Optional

import streamlit as st

from core.labels import PALETTE, severity, translate


def color_box(text: str, level: str = "info"):
    col = PALETTE.get(level, PALETTE["info"])
    st.markdown(
        f"""
        <div style=\"background:{col};padding:12px;border-radius:8px;color:white;font-weight:600;\">{text}</div>
        """,
        unsafe_allow_html=True,
    )


def classification_box(label: str, score, code: str):
    color_box(f"{label}: {score} • {translate(code)}", level=severity(code))


def text_number(label: str, key: str, placeholder: str = "") -> str:
    # free text so a blank field stays blank instead of defaulting to 0
    return st.text_input(label, value="", placeholder=placeholder, key=key)


def yes_no(label: str, key: str) -> Optional[bool]:
    choice = st.radio(label, ["Sim", "Não"], index=None, horizontal=True, key=key)
    if choice is None:
        return None
    return choice == "Sim"
