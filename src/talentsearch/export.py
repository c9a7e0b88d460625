"""Export candidate result sets to CSV and Excel."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Iterable, Literal, Sequence

import pandas as pd

from .schemas import Candidate

FieldCategory = Literal["basic", "contact", "professional", "education", "other"]

CATEGORY_LABELS: dict[FieldCategory, str] = {
    "basic": "Basic Information",
    "contact": "Contact Details",
    "professional": "Professional Details",
    "education": "Education",
    "other": "Other",
}


@dataclass(frozen=True, slots=True)
class ExportField:
    key: str
    label: str
    category: FieldCategory
    get_value: Callable[[Candidate], Any]


def _timestamp(value) -> str:
    return value.isoformat() if value is not None else ""


EXPORT_FIELDS: tuple[ExportField, ...] = (
    ExportField("name", "Full Name", "basic", lambda c: c.name),
    ExportField("gender", "Gender", "basic", lambda c: c.gender),
    ExportField("age", "Age", "basic", lambda c: c.age if c.age is not None else ""),
    ExportField("currentCity", "Current City", "basic", lambda c: c.current_city),
    ExportField("preferredCity", "Preferred City", "basic", lambda c: c.preferred_city),
    ExportField("email", "Email", "contact", lambda c: c.email),
    ExportField("phone", "Phone", "contact", lambda c: c.phone),
    ExportField("designation", "Designation", "professional", lambda c: c.designation),
    ExportField("currentCompany", "Current Company", "professional", lambda c: c.current_company),
    ExportField("experience", "Experience (Years)", "professional", lambda c: c.experience),
    ExportField("primarySkill", "Primary Skill", "professional", lambda c: c.primary_skill),
    ExportField("skills", "All Skills", "professional", lambda c: ", ".join(c.skills)),
    ExportField("currentCTC", "Current CTC (LPA)", "professional", lambda c: c.current_ctc),
    ExportField("expectedCTC", "Expected CTC (LPA)", "professional", lambda c: c.expected_ctc),
    ExportField("noticePeriod", "Notice Period", "professional", lambda c: c.notice_period),
    ExportField(
        "communicationSkill",
        "Communication Skill",
        "professional",
        lambda c: c.communication_skill or "",
    ),
    ExportField(
        "pastCompanies", "Past Companies", "professional", lambda c: ", ".join(c.past_companies)
    ),
    ExportField(
        "highestQualification", "Highest Qualification", "education", lambda c: c.education.highest
    ),
    ExportField("degree", "Degree", "education", lambda c: c.education.degree),
    ExportField("university", "University", "education", lambda c: c.education.university),
    ExportField(
        "yearOfPassing",
        "Year of Passing",
        "education",
        lambda c: c.education.year_of_passing if c.education.year_of_passing is not None else "",
    ),
    ExportField(
        "percentage",
        "Percentage/CGPA",
        "education",
        lambda c: c.education.percentage if c.education.percentage is not None else "",
    ),
    ExportField("status", "Status", "other", lambda c: c.status),
    ExportField("lastActive", "Last Active", "other", lambda c: _timestamp(c.last_active)),
    ExportField("registeredDate", "Registered Date", "other", lambda c: _timestamp(c.registered_date)),
    ExportField("resumeUpdated", "Resume Updated", "other", lambda c: _timestamp(c.resume_updated)),
)

_FIELDS_BY_KEY = {field.key: field for field in EXPORT_FIELDS}

DEFAULT_EXPORT_FIELDS: tuple[str, ...] = (
    "name",
    "email",
    "phone",
    "designation",
    "currentCompany",
    "experience",
    "skills",
    "currentCity",
    "currentCTC",
    "noticePeriod",
)


def fields_by_category() -> dict[FieldCategory, list[ExportField]]:
    grouped: dict[FieldCategory, list[ExportField]] = {key: [] for key in CATEGORY_LABELS}
    for field in EXPORT_FIELDS:
        grouped[field.category].append(field)
    return grouped


def select_fields(field_keys: Iterable[str]) -> list[ExportField]:
    """Resolve keys to fields, keeping registry order."""
    keys = set(field_keys)
    unknown = sorted(keys - _FIELDS_BY_KEY.keys())
    if unknown:
        raise ValueError(f"Unknown export field(s): {', '.join(unknown)}")
    return [field for field in EXPORT_FIELDS if field.key in keys]


def build_frame(candidates: Sequence[Candidate], field_keys: Iterable[str]) -> pd.DataFrame:
    fields = select_fields(field_keys)
    rows = [[field.get_value(candidate) for field in fields] for candidate in candidates]
    return pd.DataFrame(rows, columns=[field.label for field in fields])


def export_csv(
    candidates: Sequence[Candidate],
    field_keys: Iterable[str],
    path: str | Path,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    build_frame(candidates, field_keys).to_csv(path, index=False, encoding="utf-8")
    return path


def export_excel(
    candidates: Sequence[Candidate],
    field_keys: Iterable[str],
    path: str | Path,
) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frame = build_frame(candidates, field_keys)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        frame.to_excel(writer, index=False, sheet_name="Candidates")
        sheet = writer.sheets["Candidates"]
        for idx, column in enumerate(frame.columns, start=1):
            letter = sheet.cell(row=1, column=idx).column_letter
            sheet.column_dimensions[letter].width = max(len(column), 15)
    return path


def export_candidates(
    candidates: Sequence[Candidate],
    field_keys: Iterable[str],
    path: str | Path,
) -> Path:
    """Export by file suffix: ``.csv`` or ``.xlsx``."""
    suffix = Path(path).suffix.lower()
    if suffix == ".csv":
        return export_csv(candidates, field_keys, path)
    if suffix == ".xlsx":
        return export_excel(candidates, field_keys, path)
    raise ValueError(f"Unsupported export format: {suffix or path!s}")
