"""
Pytest configuration and shared fixtures.
"""

import json
from pathlib import Path
from typing import Any, Dict

import pytest

from admitview.logger import reset_logger

ENV_VARS = [
    "ADMITVIEW_API_BASE_URL",
    "ADMITVIEW_STATIC_BASE_URL",
    "ADMITVIEW_REQUEST_TIMEOUT",
    "ADMITVIEW_DATE_FORMAT",
    "ADMITVIEW_UTC_OFFSET_HOURS",
    "ADMITVIEW_LOG_LEVEL",
    "ADMITVIEW_LOG_DIR",
    "ADMITVIEW_DB_PATH",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the developer's environment out of the tests."""
    for var in ENV_VARS:
        monkeypatch.delenv(var, raising=False)


@pytest.fixture(autouse=True)
def fresh_logger():
    """Each test starts and ends without a global logger."""
    reset_logger()
    yield
    reset_logger()


def make_record(method: str = "tot_nghiep", **result_fields) -> Dict[str, Any]:
    """Raw application record with the given applicationResult fields."""
    return {
        "application": {
            "_id": "app-001",
            "admissionMethod": method,
            "status": "pending",
            "created_at": "2024-03-15T03:30:00.000Z",
            "updated_at": "2024-03-16T10:00:00.000Z",
            "universityMajorId": {
                "university": "Hanoi University of Science and Technology",
                "name": "Computer Science",
            },
            "admissionPeriodId": {"name": "2024 Round 1"},
            "subjectCombinationId": {"code": "A00"},
        },
        "applicationResult": dict(result_fields),
        "profile": {
            "name": "Nguyen Van An",
            "email": "an.nguyen@example.com",
            "phone": "0912345678",
            "priorityArea": "KV1",
            "priorityGroup": "UT2",
        },
        "documents": [
            {"type": "cccd", "fileType": "image/jpeg", "fileUrl": "uploads/cccd.jpg"},
            {"type": "hoc_ba", "fileType": "application/pdf", "fileUrl": "uploads/hoc_ba.pdf"},
        ],
    }


@pytest.fixture
def national_exam_record() -> Dict[str, Any]:
    return make_record(
        "tot_nghiep",
        totalScore=20,
        subjectScores={"math": 8, "physics": 7.5, "chemistry": 9},
    )


@pytest.fixture
def transcript_record() -> Dict[str, Any]:
    return make_record(
        "hoc_ba",
        totalScore=99,
        gpaGrade10=8.0,
        gpaGrade11=8.5,
        gpaGrade12=9.0,
    )


@pytest.fixture
def aptitude_record() -> Dict[str, Any]:
    return make_record("dgnl", totalScore=27)


@pytest.fixture
def record_file(tmp_path, national_exam_record) -> Path:
    path = tmp_path / "record.json"
    path.write_text(json.dumps(national_exam_record), encoding="utf-8")
    return path
