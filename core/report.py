import io
from datetime import date
from typing import Iterable, List, Optional, Tuple
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import SimpleDocTemplate, Paragraph, Spacer, Table, TableStyle

from core.config import Settings
from core.history import latest_per_protocol
from core.labels import PALETTE, severity, translate
from core.logging import get_logger
from core.types import AssessmentHistoryEntry, PatientProfile, ProtocolId

logger = get_logger(__name__)

SECTIONS: List[Tuple[str, Tuple[ProtocolId, ...]]] = [
    ("Mobilidade e Equilíbrio", (ProtocolId.TUG, ProtocolId.BERG)),
    ("Força e Fragilidade", (ProtocolId.FRIED, ProtocolId.CHAIR_STAND, ProtocolId.ARM_CURL)),
    ("Cognição e Humor", (ProtocolId.MEEM, ProtocolId.GDS15)),
]


def _fmt_score(score) -> str:
    if isinstance(score, float):
        return f"{score:g}".replace(".", ",")
    return str(score)


def _section_lines(latest: List[AssessmentHistoryEntry]) -> List[Tuple[str, List[str]]]:
    out = []
    for heading, members in SECTIONS:
        lines = [
            f"{e.protocol_name}: {translate(e.classification)}"
            for e in latest if e.protocol_id in members
        ]
        if lines:
            out.append((heading, lines))
    return out


def build_pdf(
    patient: PatientProfile,
    history: Iterable[AssessmentHistoryEntry],
    observations: str = "",
    settings: Optional[Settings] = None,
    issued: Optional[date] = None,
) -> bytes:
    settings = settings or Settings()
    issued = issued or date.today()
    latest = latest_per_protocol(history)

    buf = io.BytesIO()
    doc = SimpleDocTemplate(buf, pagesize=A4, title="Laudo de Avaliação")
    styles = getSampleStyleSheet()
    story = []

    story.append(Paragraph(f"<b>{settings.app_name}</b> — Laudo de Avaliação", styles["Title"]))
    story.append(Paragraph(f"{settings.tagline} &nbsp;&nbsp; Emissão: {issued.strftime('%d/%m/%Y')}", styles["Normal"]))
    story.append(Spacer(1, 8))

    pinfo = (
        f"<b>Paciente:</b> {escape(patient.name) or '—'} &nbsp;&nbsp; "
        f"<b>Idade:</b> {patient.age} anos &nbsp;&nbsp; "
        f"<b>Sexo:</b> {'Masculino' if patient.sex.value == 'M' else 'Feminino'} &nbsp;&nbsp; "
        f"<b>IMC:</b> {_fmt_score(float(patient.bmi))}"
    )
    story.append(Paragraph(pinfo, styles["Normal"]))
    story.append(Spacer(1, 8))

    if latest:
        rows = [
            [e.protocol_name, e.date.strftime("%d/%m/%Y"), _fmt_score(e.score), translate(e.classification)]
            for e in latest
        ]
        tbl = Table(
            [["Teste", "Data", "Resultado", "Classificação"]] + rows,
            hAlign='LEFT',
            colWidths=[160, 70, 80, 170]
        )
        style = [
            ('BACKGROUND', (0, 0), (-1, 0), colors.HexColor('#eeeeee')),
            ('GRID', (0, 0), (-1, -1), 0.25, colors.grey),
            ('FONTNAME', (0, 0), (-1, 0), 'Helvetica-Bold'),
        ]
        for i, e in enumerate(latest, start=1):
            style.append(('TEXTCOLOR', (3, i), (3, i), colors.HexColor(PALETTE[severity(e.classification)])))
        tbl.setStyle(TableStyle(style))
        story.append(tbl)

        for heading, lines in _section_lines(latest):
            story.append(Spacer(1, 8))
            story.append(Paragraph(f"<b>{heading}</b>", styles["Heading3"]))
            for line in lines:
                story.append(Paragraph(line, styles["Normal"]))
    else:
        story.append(Paragraph("Nenhuma avaliação registrada.", styles["Normal"]))

    if observations.strip():
        story.append(Spacer(1, 10))
        story.append(Paragraph("<b>Observações clínicas</b>", styles["Heading3"]))
        story.append(Paragraph(escape(observations.strip()).replace("\n", "<br/>"), styles["Normal"]))

    story.append(Spacer(1, 10))
    story.append(Paragraph(
        "<b>Aviso:</b> Rastreio funcional; não substitui avaliação médica.",
        styles['Italic']
    ))

    doc.build(story)
    logger.info(f"Report built for {patient.name or 'patient'}: {len(latest)} protocol(s)")
    return buf.getvalue()
