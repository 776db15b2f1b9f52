from typing import List, Optional, Tuple

from core.exceptions import ContractViolation
from core.types import AgeBand, FitnessClass, Sex


def lookup_band(table: List[AgeBand], age: float, sex: Sex) -> AgeBand:
    for row in table:
        if row.matches(age, sex):
            return row
    # tables are exhaustive from age 0; only a negative age or bad sex lands here
    raise ContractViolation(f"No reference band for age={age!r} sex={sex!r}",
                            details={"age": age, "sex": str(sex)})


def lookup_cutoff(rows: List[Tuple[Optional[float], float]], value: float) -> float:
    """First cutoff whose ceiling is >= value; a None ceiling matches everything."""
    for ceiling, cutoff in rows:
        if ceiling is None or value <= ceiling:
            return cutoff
    return rows[-1][1]


def classify_repetitions(reps: int, band: AgeBand) -> FitnessClass:
    lo, hi = band.lower, band.upper
    if reps < lo - 2:
        return FitnessClass.RUIM
    if reps < lo:
        return FitnessClass.REGULAR
    if reps <= hi:
        return FitnessClass.BOM
    if reps <= hi + 3:
        return FitnessClass.MUITO_BOM
    return FitnessClass.EXCELENTE
