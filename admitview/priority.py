"""
Priority bonus scheme.

Candidates get bonus points for their geographic area (KV1, KV2-NT, KV2, KV3)
and for their demographic group (UT1 covers groups 01-04, UT2 covers 05-07).
"""

from typing import Optional

AREA_POINTS = {
    "KV1": 0.75,
    "KV2-NT": 0.5,
    "KV2": 0.25,
    "KV3": 0.0,
}

UT1_GROUPS = {"UT1", "01", "02", "03", "04"}
UT2_GROUPS = {"UT2", "05", "06", "07"}

UT1_POINTS = 2.0
UT2_POINTS = 1.0


def _normalize_code(code: Optional[str]) -> str:
    if not isinstance(code, str):
        return ""
    return code.strip().upper()


def area_points(area: Optional[str]) -> float:
    return AREA_POINTS.get(_normalize_code(area), 0.0)


def group_points(group: Optional[str]) -> float:
    g = _normalize_code(group)
    if g in UT1_GROUPS:
        return UT1_POINTS
    if g in UT2_GROUPS:
        return UT2_POINTS
    return 0.0


def priority_score(area: Optional[str], group: Optional[str]) -> float:
    """Total priority bonus. Absent or unknown codes count as 0."""
    return round(area_points(area) + group_points(group), 2)
