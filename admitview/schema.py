from typing import Any, Dict, List

OPTIONAL_SECTIONS = ["applicationResult", "profile"]
NUMERIC_RESULT_FIELDS = ["totalScore", "gpaGrade10", "gpaGrade11", "gpaGrade12"]
OPTIONAL_STR_FIELDS = {
    "application": ["admissionMethod", "status", "created_at", "updated_at"],
    "applicationResult": ["method"],
    "profile": ["name", "email", "phone", "priorityArea", "priorityGroup"],
}


def _is_number(v: Any) -> bool:
    return isinstance(v, (int, float)) and not isinstance(v, bool)


def validate_record(data: Dict[str, Any]) -> List[str]:
    """
    Returns a list of validation error messages. Empty list means valid.
    Only the "application" section is required.
    """
    errors: List[str] = []

    if not isinstance(data, dict):
        return ["Record must be a JSON object"]

    if "application" not in data or data["application"] is None:
        errors.append("Missing required section: application")
    elif not isinstance(data["application"], dict):
        errors.append("Section 'application' must be an object")

    for section in OPTIONAL_SECTIONS:
        if data.get(section) is not None and not isinstance(data[section], dict):
            errors.append(f"Section '{section}' must be an object if provided")

    # Optional strings: if present, must be strings
    for section, fields in OPTIONAL_STR_FIELDS.items():
        values = data.get(section)
        if not isinstance(values, dict):
            continue
        for f in fields:
            if values.get(f) is not None and not isinstance(values[f], str):
                errors.append(f"Field '{section}.{f}' must be a string if provided")

    result = data.get("applicationResult")
    if isinstance(result, dict):
        for f in NUMERIC_RESULT_FIELDS:
            if result.get(f) is not None and not _is_number(result[f]):
                errors.append(f"Field 'applicationResult.{f}' must be a number if provided")
        subject_scores = result.get("subjectScores")
        if subject_scores is not None:
            if not isinstance(subject_scores, dict):
                errors.append("Field 'applicationResult.subjectScores' must be an object if provided")
            else:
                for subject, score in subject_scores.items():
                    if not _is_number(score):
                        errors.append(f"Subject score '{subject}' must be a number")

    documents = data.get("documents")
    if documents is not None:
        if not isinstance(documents, list):
            errors.append("Field 'documents' must be a list if provided")
        else:
            for i, doc in enumerate(documents):
                if not isinstance(doc, dict):
                    errors.append(f"Document #{i} must be an object")
                    continue
                for f in ("type", "fileUrl"):
                    if not isinstance(doc.get(f), str) or not doc[f].strip():
                        errors.append(f"Document #{i} field '{f}' must be a non-empty string")

    return errors
