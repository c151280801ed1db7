"""Bucket label lookup tables and range membership checks.

Revenue and employee counts are collected as coarse bucket labels. Each
label maps to a representative numeric value so that program floors and
ceilings can be compared monotonically.
"""

import math
from types import MappingProxyType
from typing import Mapping, Optional


REVENUE_BUCKETS: Mapping[str, int] = MappingProxyType({
    "<300k": 300_000,
    "300k-3m": 1_500_000,
    "3m-20m": 11_500_000,
    "20m-50m": 35_000_000,
    "50m+": 50_000_000,
})

EMPLOYEE_BUCKETS: Mapping[str, int] = MappingProxyType({
    "1-5": 3,
    "6-30": 18,
    "31-75": 53,
    "76-200": 138,
    "200+": 200,
})


def representative_value(label: Optional[str], buckets: Mapping[str, int]) -> int:
    """Return the representative value for a bucket label.

    Unknown or missing labels map to 0.
    """
    if not label:
        return 0
    return buckets.get(label, 0)


def is_in_range(
    value_label: str,
    floor_label: Optional[str],
    ceiling_label: Optional[str],
    buckets: Mapping[str, int],
) -> bool:
    """Check whether a business bucket falls within a program's bounds.

    Args:
        value_label: The business's bucket label
        floor_label: Program minimum bucket (None or "" when undeclared)
        ceiling_label: Program maximum bucket (None or "" when undeclared)
        buckets: Lookup table for the dimension being compared

    Returns:
        True when floor <= value <= ceiling, or when the program declares
        no bounds at all. Unknown business and floor labels count as 0;
        an unknown ceiling counts as no ceiling
    """
    if not floor_label and not ceiling_label:
        return True

    value = representative_value(value_label, buckets)
    lower = representative_value(floor_label, buckets) if floor_label else 0
    # Unknown ceiling labels mean no ceiling
    upper = buckets.get(ceiling_label, math.inf) if ceiling_label else math.inf

    return lower <= value <= upper


def is_revenue_in_range(
    revenue: str, min_revenue: Optional[str], max_revenue: Optional[str]
) -> bool:
    return is_in_range(revenue, min_revenue, max_revenue, REVENUE_BUCKETS)


def is_employee_count_in_range(
    employees: str, min_employees: Optional[str], max_employees: Optional[str]
) -> bool:
    return is_in_range(employees, min_employees, max_employees, EMPLOYEE_BUCKETS)
