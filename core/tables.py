"""
Reference data for the functional assessment protocols.

Age-banded tables use the same seven bands for every protocol and sex:
<65, 65-69, 70-74, 75-79, 80-84, 85-89, >=90. Each row holds the
[lower, upper] "normal" range for that band.
"""
from typing import Dict, List, Optional, Tuple

from core.types import AgeBand, EducationLevel, Sex

AGE_CUTS: Tuple[int, ...] = (65, 70, 75, 80, 85, 90)


def _bands(sex: Sex, ranges: List[Tuple[float, float]]) -> List[AgeBand]:
    edges: List[Optional[int]] = [0, *AGE_CUTS, None]
    return [
        AgeBand(sex=sex, age_min=edges[i], age_max=edges[i + 1], lower=lo, upper=hi)
        for i, (lo, hi) in enumerate(ranges)
    ]


# --- 30s chair stand (repetitions) ---
CHAIR_STAND: List[AgeBand] = (
    _bands(Sex.M, [(14, 19), (12, 18), (12, 17), (11, 17), (10, 15), (8, 14), (7, 12)])
    + _bands(Sex.F, [(12, 17), (11, 16), (10, 15), (10, 15), (9, 14), (8, 13), (4, 11)])
)

# --- 30s arm curl (repetitions) ---
ARM_CURL: List[AgeBand] = (
    _bands(Sex.M, [(16, 22), (15, 21), (14, 21), (13, 19), (13, 19), (11, 17), (10, 14)])
    + _bands(Sex.F, [(13, 19), (12, 18), (12, 17), (11, 17), (10, 16), (10, 15), (8, 13)])
)

# --- chair sit-and-reach (cm, negative = short of the toe) ---
SIT_REACH: List[AgeBand] = (
    _bands(Sex.M, [(-6, 4), (-8, 2), (-8, 3), (-10, 2), (-10, 2), (-13, -3), (-15, -3)])
    + _bands(Sex.F, [(-1, 8), (-1, 8), (-3, 6), (-4, 5), (-5, 5), (-6, 4), (-10, 1)])
)

# arm curl dumbbell load
ARM_CURL_LOAD: Dict[Sex, str] = {Sex.M: "4kg", Sex.F: "2kg"}

# --- Fried: grip strength cutoffs (kg) by BMI ceiling; last row unbounded ---
GRIP_CUTOFFS: Dict[Sex, List[Tuple[Optional[float], float]]] = {
    Sex.M: [(24, 29.0), (28, 30.0), (None, 32.0)],
    Sex.F: [(23, 17.0), (26, 17.3), (29, 18.0), (None, 21.0)],
}

# --- Fried: 4.6 m walk time cutoffs (s) by height ceiling (m) ---
GAIT_CUTOFFS: Dict[Sex, List[Tuple[Optional[float], float]]] = {
    Sex.M: [(1.73, 7.0), (None, 6.0)],
    Sex.F: [(1.59, 7.0), (None, 6.0)],
}

# --- TUG (s) ---
TUG_LOW_RISK_BELOW = 10.0
TUG_MODERATE_MAX = 20.0

# --- GDS-15: (question, score if yes, score if no) ---
GDS15_ITEMS: List[Tuple[str, int, int]] = [
    ("Você está satisfeito com sua vida?", 0, 1),
    ("Você abandonou muitos de seus interesses e atividades?", 1, 0),
    ("Você sente que sua vida está vazia?", 1, 0),
    ("Você se aborrece com frequência?", 1, 0),
    ("Você se sente de bom humor na maior parte do tempo?", 0, 1),
    ("Você tem medo de que algum mal vá lhe acontecer?", 1, 0),
    ("Você se sente feliz na maior parte do tempo?", 0, 1),
    ("Você se sente frequentemente desamparado?", 1, 0),
    ("Você prefere ficar em casa a sair e fazer coisas novas?", 1, 0),
    ("Você acha que tem mais problemas de memória do que a maioria?", 1, 0),
    ("Você acha que é maravilhoso estar vivo agora?", 0, 1),
    ("Você se sente inútil da maneira como está agora?", 1, 0),
    ("Você se sente cheio de energia?", 0, 1),
    ("Você sente que sua situação não tem esperança?", 1, 0),
    ("Você acha que a maioria das pessoas está melhor do que você?", 1, 0),
]
GDS15_SEVERE_MIN = 11
GDS15_MILD_MIN = 6

# --- MEEM ---
MEEM_SECTIONS: Dict[str, int] = {
    "orientation": 10,
    "registration": 3,
    "attention": 5,
    "recall": 3,
    "language": 9,
}
MEEM_CUTOFFS: Dict[EducationLevel, float] = {
    EducationLevel.ILLITERATE: 20,
    EducationLevel.YEARS_1_4: 25,
    EducationLevel.YEARS_5_8: 26.5,
    EducationLevel.YEARS_9_11: 28,
    EducationLevel.YEARS_12_PLUS: 29,
}
MEEM_MILD_MIN = 20
MEEM_MODERATE_MIN = 10

# --- Berg balance ---
BERG_ITEMS: List[str] = [
    "Sentado para em pé",
    "Em pé sem apoio",
    "Sentado sem apoio nas costas",
    "De em pé para sentado",
    "Transferências",
    "Em pé com olhos fechados",
    "Em pé com pés juntos",
    "Alcançar à frente (braço estendido)",
    "Pegar objeto do chão",
    "Virar-se para olhar para trás",
    "Girar 360 graus",
    "Posicionar pé alternado no degrau",
    "Em pé com um pé à frente (Tandem)",
    "Em pé sobre uma perna",
]
BERG_ITEM_MAX = 4
BERG_HIGH_RISK_MAX = 20
BERG_MEDIUM_RISK_MAX = 40
