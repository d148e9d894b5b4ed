"""String to number coercion for table fields.

A field coerces to the number formed by its leading numeric portion, the way a
user reading the cell would see it ("12.5 kg" is 12.5). Anything without a
numeric prefix, the empty string included, coerces to ``INVALID``.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

INVALID = float("nan")

_NUMERIC_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)",
    re.ASCII,
)


@dataclass
class NumericSeries:
    values: List[float] = field(default_factory=list)
    invalid_count: int = 0

    @property
    def valid_count(self) -> int:
        return len(self.values) - self.invalid_count


def is_invalid(value: Optional[float]) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def coerce_numeric(raw: Optional[str]) -> float:
    if raw is None:
        return INVALID
    match = _NUMERIC_PREFIX.match(str(raw).lstrip())
    if not match:
        return INVALID
    # "1e" or "2e+" keep only the mantissa
    return float(match.group(0).replace("Infinity", "inf"))


def coerce_column(values: Iterable[str]) -> NumericSeries:
    series = NumericSeries()
    for raw in values:
        number = coerce_numeric(raw)
        if is_invalid(number):
            series.invalid_count += 1
        series.values.append(number)
    return series
