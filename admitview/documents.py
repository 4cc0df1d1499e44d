"""Document type labels and static asset URLs."""

DOCUMENT_TYPE_LABELS = {
    "cccd": "Citizen ID Card",
    "giay_khai_sinh": "Birth Certificate",
    "hoc_ba": "School Transcript",
    "bang_tot_nghiep": "High-School Diploma",
    "giay_chung_nhan_tot_nghiep": "Provisional Graduation Certificate",
    "ket_qua_thi": "Exam Result Certificate",
    "giay_uu_tien": "Priority Certificate",
    "chung_chi_ngoai_ngu": "Foreign Language Certificate",
    "anh_the": "Portrait Photo",
    "khac": "Other Document",
}

UNKNOWN_DOCUMENT_LABEL = "Other Document"


def document_type_label(code: str) -> str:
    if not isinstance(code, str):
        return UNKNOWN_DOCUMENT_LABEL
    return DOCUMENT_TYPE_LABELS.get(code.strip().lower(), UNKNOWN_DOCUMENT_LABEL)


def asset_url(file_url: str, base_url: str) -> str:
    """Join the static asset base URL and a stored relative path."""
    path = (file_url or "").lstrip("/")
    return f"{base_url.rstrip('/')}/{path}"
