from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from clinic.core.schemas.billing import LedgerSummary


class PatientBrief(BaseModel):
    model_config = ConfigDict(frozen=True)

    patient_id: int
    name: str


class PatientBasicView(BaseModel):
    """Demographics only; what front-desk staff may see."""
    model_config = ConfigDict(frozen=True)

    patient_id: int
    name: str
    age: int
    gender: str
    symptoms: str
    admission_date: str


class PatientFullView(PatientBasicView):
    diagnoses: List[str] = Field(default_factory=list)
    medical_notes: List[str] = Field(default_factory=list)
    prescriptions: List[str] = Field(default_factory=list)
    ledger: LedgerSummary = Field(default_factory=LedgerSummary)


__all__ = ["PatientBrief", "PatientBasicView", "PatientFullView"]
