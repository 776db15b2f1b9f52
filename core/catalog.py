from dataclasses import dataclass
from typing import Dict, List

from core.exceptions import ContractViolation
from core.types import ProtocolId


@dataclass(frozen=True)
class ProtocolInfo:
    id: ProtocolId
    name: str
    description: str
    instructions: str


CATALOG: List[ProtocolInfo] = [
    ProtocolInfo(
        ProtocolId.FRIED, "Fragilidade (Fried)", "Avaliação do fenótipo de fragilidade",
        "Avalie 5 componentes: 1) Perda de peso não intencional (>4.5kg no último ano); "
        "2) Exaustão autorrelatada; 3) Baixo nível de atividade física; "
        "4) Diminuição da velocidade de marcha (4.6m); 5) Fraqueza muscular (Dinapometria).",
    ),
    ProtocolInfo(
        ProtocolId.TUG, "TUG (Mobilidade)", "Timed Up and Go - Agilidade",
        "O aluno inicia sentado com as costas apoiadas. Ao comando 'VÁ', deve levantar-se, "
        "caminhar 3 metros, virar-se, voltar à cadeira e sentar-se. O cronômetro para quando "
        "as costas tocam o encosto novamente.",
    ),
    ProtocolInfo(
        ProtocolId.CHAIR_STAND, "Sentar e Levantar (30s)", "Força de membros inferiores",
        "O aluno inicia sentado. Ao sinal, deve levantar-se totalmente e sentar-se o maior "
        "número de vezes possível em 30 segundos, com os braços cruzados no peito. "
        "Conte apenas as execuções completas.",
    ),
    ProtocolInfo(
        ProtocolId.ARM_CURL, "Flexão de Cotovelo (30s)", "Força de membros superiores",
        "Sentado, segurando um peso (4kg para homens, 2kg para mulheres). Realizar o máximo "
        "de flexões de cotovelo (rosca bíceps) em 30 segundos na amplitude completa.",
    ),
    ProtocolInfo(
        ProtocolId.SIT_REACH, "Sentar e Alcançar", "Flexibilidade de cadeia posterior",
        "Sentado na ponta da cadeira, uma perna estendida (calcanhar no chão, pé fletido). "
        "Com as mãos sobrepostas, tentar alcançar a ponta do pé. Medir a distância entre os "
        "dedos e a ponta do pé (negativo se não alcançar, positivo se passar).",
    ),
    ProtocolInfo(
        ProtocolId.GDS15, "Depressão (GDS-15)", "Escala de depressão geriátrica",
        "Aplique as 15 perguntas da Escala de Depressão Geriátrica. "
        "Score >= 6 sugere depressão.",
    ),
    ProtocolInfo(
        ProtocolId.MEEM, "Declínio Cognitivo (MEEM)", "Rastreio de funções cognitivas",
        "Mini Exame do Estado Mental. Avalie Orientação, Registro, Atenção/Cálculo, Evocação "
        "e Linguagem. O ponto de corte depende da escolaridade selecionada.",
    ),
    ProtocolInfo(
        ProtocolId.BERG, "Equilíbrio (Berg)", "Avaliação do equilíbrio estático e dinâmico",
        "Escala de Equilíbrio de Berg. 14 tarefas comuns da vida diária. Avalie cada item de "
        "0 (incapaz) a 4 (capaz/seguro). Score total máximo de 56 pontos.",
    ),
]

_BY_ID: Dict[ProtocolId, ProtocolInfo] = {p.id: p for p in CATALOG}

PROTOCOL_IDS: List[ProtocolId] = [p.id for p in CATALOG]


def get_protocol(protocol_id) -> ProtocolInfo:
    try:
        return _BY_ID[ProtocolId(protocol_id)]
    except (KeyError, ValueError) as exc:
        raise ContractViolation(f"Unknown protocol {protocol_id!r}", protocol=str(protocol_id)) from exc


def protocol_name(protocol_id) -> str:
    return get_protocol(protocol_id).name
