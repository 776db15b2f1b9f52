from typing import Dict

TERMS: Dict[str, str] = {
    "not_frail": "NÃO FRÁGIL",
    "pre_frail": "PRÉ-FRÁGIL",
    "frail": "FRÁGIL",
    "low_risk": "BAIXO RISCO",
    "moderate_risk": "RISCO MODERADO",
    "high_risk": "ALTO RISCO",
    "ruim": "RUIM",
    "regular": "REGULAR",
    "bom": "BOM",
    "muito_bom": "MUITO BOM",
    "excelente": "EXCELENTE",
    "normal": "NORMAL",
    "depressao_leve": "DEPRESSÃO LEVE",
    "depressao_grave": "DEPRESSÃO GRAVE",
    "sem_declinio": "SEM DECLÍNIO",
    "declinio_leve": "DECLÍNIO LEVE",
    "declinio_moderado": "DECLÍNIO MODERADO",
    "declinio_grave": "DECLÍNIO GRAVE",
    "alto_risco": "ALTO RISCO",
    "medio_risco": "MÉDIO RISCO",
    "baixo_risco": "BAIXO RISCO",
}

PALETTE = {
    "low": "#16a34a",
    "indeterminate": "#ca8a04",
    "high": "#dc2626",
    "info": "#455a64",
}

# classification codes by palette level
FAVOURABLE = {"baixo_risco", "not_frail", "sem_declinio", "normal", "bom", "muito_bom", "excelente", "low_risk"}
BORDERLINE = {"medio_risco", "pre_frail", "regular", "declinio_leve", "depressao_leve", "moderate_risk"}


def translate(code: str) -> str:
    return TERMS.get(code) or code.replace("_", " ").upper()


def severity(code: str) -> str:
    c = code.lower()
    if c in FAVOURABLE:
        return "low"
    if c in BORDERLINE:
        return "indeterminate"
    return "high"
