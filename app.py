from datetime import date

import streamlit as st

from core.catalog import CATALOG, protocol_name
from core.config import Settings
from core.history import ALL, chart_points, filter_history, has_trend, make_entry, protocol_series
from core.labels import translate
from core.logging import setup_logging
from core.progress import battery_status
from core.registry import load_enabled_modules
from core.report import build_pdf
from core.screening import SCREENING_QUESTIONS, complete_screening
from core.types import EducationLevel, Incomplete, PatientProfile, Sex
from core.utils import yes_no

settings = Settings.load()
setup_logging(settings.log_level, settings.log_file)

st.set_page_config(page_title=settings.app_name, layout="wide")
st.title(settings.app_name)
st.caption(settings.tagline)

# session-held stand-in for the external history store (newest first)
st.session_state.setdefault("history", [])
st.session_state.setdefault("screening", None)

# 1) Patient profile
with st.sidebar:
    st.header("Paciente")
    name = st.text_input("Nome", value="")
    birth = st.date_input("Nascimento", value=date(1955, 1, 1), min_value=date(1900, 1, 1))
    sex = st.selectbox("Sexo", list(Sex), format_func=lambda s: "Masculino" if s == Sex.M else "Feminino")
    weight = st.number_input("Peso (kg)", min_value=20.0, max_value=250.0, value=70.0, step=0.1)
    height = st.number_input("Altura (m)", min_value=1.0, max_value=2.3, value=1.65, step=0.01)
    education = st.selectbox("Escolaridade", [None, *EducationLevel],
                             format_func=lambda e: "—" if e is None else e.value)

patient = PatientProfile.from_measurements(name, birth, sex, weight, height, education)
st.sidebar.caption(f"Idade: {patient.age} anos • IMC: {patient.bmi}")

history = st.session_state["history"]

# 2) Triage comes first
if st.session_state["screening"] is None:
    st.subheader("Triagem")
    answers = {key: yes_no(question, f"screen_{key}") for key, question in SCREENING_QUESTIONS}
    if st.button("Salvar triagem"):
        outcome = complete_screening(answers)
        if isinstance(outcome, Incomplete):
            st.warning("Responda todas as perguntas da triagem.")
        else:
            st.session_state["screening"] = outcome
            st.rerun()
    st.stop()

# 3) Progress, filled in once this run's saves are in the history
progress_slot = st.container()

# 4) Protocols
for mod in load_enabled_modules(settings):
    with st.expander(mod.title, expanded=False):
        raw = mod.inputs(patient)
        if st.button("Salvar avaliação", key=f"save_{mod.id.value}"):
            result = mod.compute(patient, raw)
            if isinstance(result, Incomplete):
                st.warning("Dados incompletos: " + ", ".join(result.missing))
            else:
                history.insert(0, make_entry(result))
                mod.render(result)

with progress_slot:
    pct, pending = battery_status(history)
    st.progress(pct / 100, text=f"Bateria concluída: {pct}%")
    if pending:
        st.caption("Pendentes: " + ", ".join(protocol_name(p) for p in pending))

# 5) History and evolution
st.subheader("Histórico")
options = [ALL, *[p.id.value for p in CATALOG]]
c1, c2 = st.columns(2)
with c1:
    selected = st.selectbox("Teste", options, format_func=lambda o: "Todos" if o == ALL else protocol_name(o))
with c2:
    order = st.radio("Ordem", ["desc", "asc"], horizontal=True,
                     format_func=lambda o: "Mais recente" if o == "desc" else "Mais antigo")

rows = filter_history(history, selected, order)
if rows:
    st.dataframe(
        [
            {"Data": e.date.strftime("%d/%m/%Y %H:%M"), "Teste": e.protocol_name,
             "Resultado": e.score, "Classificação": translate(e.classification)}
            for e in rows
        ],
        use_container_width=True,
    )
else:
    st.info("Nenhuma avaliação registrada.")

if selected != ALL:
    series = protocol_series(history, selected)
    if has_trend(series):
        points = chart_points(series)
        st.line_chart({"Data": [d for d, _ in points], "Resultado": [v for _, v in points]},
                      x="Data", y="Resultado")

# 6) Report
observations = st.text_area("Observações clínicas", value="")
pdf_bytes = build_pdf(patient, history, observations, settings)
st.download_button("Baixar laudo (PDF)", data=pdf_bytes, file_name="laudo_avaliacao.pdf", mime="application/pdf")

st.caption("Aviso: rastreio funcional; não substitui avaliação médica.")
