import math
from typing import Iterable, Optional

from models.chart_model import SummaryStatistics
from services.coercion import is_invalid

NO_DATA_MESSAGE = "No valid numeric data to analyze."


def compute_statistics(values: Iterable[Optional[float]]) -> Optional[SummaryStatistics]:
    """Descriptive statistics over the valid entries of ``values``.

    Invalid entries (NaN or None) are ignored. Returns None when nothing valid
    is left. Standard deviation is the population one (divisor n).
    """
    valid = [v for v in values if not is_invalid(v)]
    n = len(valid)
    if n == 0:
        return None

    total = 0.0
    for v in valid:
        total += v
    mean = total / n

    ordered = sorted(valid)
    mid = n // 2
    median = ordered[mid] if n % 2 else (ordered[mid - 1] + ordered[mid]) / 2

    # v * v instead of ** 2: overflow gives inf rather than OverflowError
    variance = sum((v - mean) * (v - mean) for v in valid) / n

    return SummaryStatistics(
        count=n,
        min=min(valid),
        max=max(valid),
        mean=mean,
        median=median,
        standard_deviation=math.sqrt(variance),
    )
