"""
Score normalization for admission applications.

Turns a raw application record (application, applicationResult, profile,
documents) into the flat canonical view used for display. Everything here
is a pure function of its inputs.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional

from .config import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_STATIC_BASE_URL,
    DEFAULT_UTC_OFFSET_HOURS,
    Settings,
    load_settings,
)
from .documents import asset_url, document_type_label
from .methods import AdmissionMethod, method_code, method_from_label, resolve_method
from .priority import priority_score

NO_PRIORITY = "none"

GRADE_FIELDS = [
    ("gpaGrade10", "Grade 10 GPA"),
    ("gpaGrade11", "Grade 11 GPA"),
    ("gpaGrade12", "Grade 12 GPA"),
]


def compute_total_score(result: Dict[str, Any], method: Optional[AdmissionMethod]) -> float:
    """
    Total score for the given method.

    Transcript admission sums the three yearly GPAs, the national exam sums
    the subject scores. Other methods keep the stored total.
    """
    total = result.get("totalScore") or 0
    if method is AdmissionMethod.TRANSCRIPT:
        total = sum(result.get(field) or 0 for field, _ in GRADE_FIELDS)
    elif method is AdmissionMethod.NATIONAL_EXAM:
        total = sum((result.get("subjectScores") or {}).values())
    return total


def grade_scores(result: Dict[str, Any]) -> Dict[str, float]:
    # Missing grades are left out, never zero-filled
    return {
        label: result[field]
        for field, label in GRADE_FIELDS
        if result.get(field) is not None
    }


def _parse_timestamp(value: Any) -> Optional[datetime]:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def format_timestamp(
    value: Any,
    date_format: str = DEFAULT_DATE_FORMAT,
    utc_offset_hours: float = DEFAULT_UTC_OFFSET_HOURS,
) -> str:
    """
    Format a stored timestamp for display.

    Aware timestamps are shifted to the display offset; naive ones are shown
    as stored. Missing or unparseable values give "".
    """
    ts = _parse_timestamp(value)
    if ts is None:
        return ""
    if ts.tzinfo is not None:
        ts = ts.astimezone(timezone(timedelta(hours=utc_offset_hours)))
    return ts.strftime(date_format)


def normalize_documents(documents: Optional[List[Dict[str, Any]]], base_url: str) -> List[Dict[str, str]]:
    return [
        {
            "name": document_type_label(doc.get("type")),
            "type": doc.get("fileType") or "",
            "url": asset_url(doc.get("fileUrl"), base_url),
        }
        for doc in documents or []
    ]


def normalize_application(
    record: Dict[str, Any],
    method: Optional[str],
    *,
    asset_base_url: Optional[str] = None,
    date_format: Optional[str] = None,
    utc_offset_hours: Optional[float] = None,
) -> Dict[str, Any]:
    """
    Build the canonical view of a raw application record.

    Args:
        record: Raw record; its "application" section must be present
        method: Resolved method label (see methods.resolve_method), or None
        asset_base_url: Prefix for document URLs
        date_format: strftime format for submission/update dates
        utc_offset_hours: Display offset for timezone-aware timestamps

    Returns:
        Canonical view dict. "combination" is only present for the
        national exam method.
    """
    base_url = asset_base_url if asset_base_url is not None else DEFAULT_STATIC_BASE_URL
    fmt = date_format or DEFAULT_DATE_FORMAT
    offset = utc_offset_hours if utc_offset_hours is not None else DEFAULT_UTC_OFFSET_HOURS

    application = record["application"]
    result = record.get("applicationResult") or {}
    profile = record.get("profile") or {}
    major = application.get("universityMajorId") or {}
    period = application.get("admissionPeriodId") or {}

    admission_method = method_from_label(method)
    total_score = compute_total_score(result, admission_method)
    area = profile.get("priorityArea")
    group = profile.get("priorityGroup")

    view: Dict[str, Any] = {
        "name": profile.get("name") or "",
        "email": profile.get("email") or "",
        "phone": profile.get("phone") or "",
        "university": major.get("university") or "",
        "admissionPeriod": period.get("name") or "",
        "major": major.get("name") or "",
        "status": application.get("status") or "",
        "dates": {
            "submitted": format_timestamp(application.get("created_at"), fmt, offset),
            "updated": format_timestamp(application.get("updated_at"), fmt, offset),
        },
        "scores": grade_scores(result),
        "subjectScores": dict(result.get("subjectScores") or {}),
        "totalScore": total_score,
        "method": method,
        "priority": {
            "area": area or NO_PRIORITY,
            "group": group or NO_PRIORITY,
            "score": priority_score(area, group),
        },
        "documents": normalize_documents(record.get("documents"), base_url),
    }

    if admission_method is AdmissionMethod.NATIONAL_EXAM:
        combination = application.get("subjectCombinationId") or {}
        view["combination"] = combination.get("code") or ""

    return view


def normalize_record(record: Dict[str, Any], settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Resolve the method from the record and normalize with configured settings."""
    settings = settings or load_settings()
    return normalize_application(
        record,
        resolve_method(method_code(record)),
        asset_base_url=settings.static_asset_base_url,
        date_format=settings.date_format,
        utc_offset_hours=settings.utc_offset_hours,
    )
