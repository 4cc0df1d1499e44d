"""
Admission method lookup.

Maps raw method codes from an application record to display labels.
The table is closed: anything outside it resolves to None.
"""

from enum import Enum
from typing import Any, Dict, Optional


class AdmissionMethod(Enum):
    """Known admission methods, keyed by their raw code."""

    TRANSCRIPT = "hoc_ba"
    NATIONAL_EXAM = "tot_nghiep"
    APTITUDE = "dgnl"
    THINKING_SKILLS = "tu_duy"

    @property
    def label(self) -> str:
        return METHOD_LABELS[self]


METHOD_LABELS = {
    AdmissionMethod.TRANSCRIPT: "School-Transcript Admission",
    AdmissionMethod.NATIONAL_EXAM: "National High-School Exam Score",
    AdmissionMethod.APTITUDE: "Aptitude Assessment",
    AdmissionMethod.THINKING_SKILLS: "Thinking-Skills Assessment",
}

_BY_CODE = {m.value: m for m in AdmissionMethod}
_BY_LABEL = {label: m for m, label in METHOD_LABELS.items()}


def lookup_method(code: Optional[str]) -> Optional[AdmissionMethod]:
    if not code:
        return None
    return _BY_CODE.get(code)


def resolve_method(code: Optional[str]) -> Optional[str]:
    """Return the display label for a method code, or None if unknown."""
    method = lookup_method(code)
    return method.label if method else None


def method_from_label(label: Optional[str]) -> Optional[AdmissionMethod]:
    if not label:
        return None
    return _BY_LABEL.get(label)


def method_code(record: Dict[str, Any]) -> str:
    """
    Pick the method code for a raw record.

    applicationResult.method wins over application.admissionMethod.
    Empty strings count as absent.
    """
    result = record.get("applicationResult") or {}
    application = record.get("application") or {}
    return result.get("method") or application.get("admissionMethod") or ""
