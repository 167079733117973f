from __future__ import annotations

from clinic.billing.ledger import Ledger
from clinic.core.schemas.patient import PatientBasicView, PatientBrief, PatientFullView


class PatientRecord:
    """Demographics, clinical annotations and the patient's one ledger.

    The identifier is issued by the directory and never changes. Empty text
    passed to the ``add_*`` methods is ignored and reported by a False return.
    """

    def __init__(
        self,
        patient_id: int,
        name: str,
        age: int,
        gender: str,
        symptoms: str,
        admission_date: str,
    ) -> None:
        self._patient_id = patient_id
        self.name = name
        self.age = age
        self.gender = gender
        self.symptoms = symptoms
        self.admission_date = admission_date
        self._diagnoses: list[str] = []
        self._medical_notes: list[str] = []
        self._prescriptions: list[str] = []
        self._ledger = Ledger()

    @property
    def patient_id(self) -> int:
        return self._patient_id

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    @property
    def diagnoses(self) -> tuple[str, ...]:
        return tuple(self._diagnoses)

    @property
    def medical_notes(self) -> tuple[str, ...]:
        return tuple(self._medical_notes)

    @property
    def prescriptions(self) -> tuple[str, ...]:
        return tuple(self._prescriptions)

    def add_diagnosis(self, text: str) -> bool:
        return _append_text(self._diagnoses, text)

    def add_medical_note(self, text: str) -> bool:
        return _append_text(self._medical_notes, text)

    def add_prescription(self, text: str) -> bool:
        return _append_text(self._prescriptions, text)

    def brief_view(self) -> PatientBrief:
        return PatientBrief(patient_id=self._patient_id, name=self.name)

    def basic_view(self) -> PatientBasicView:
        return PatientBasicView(
            patient_id=self._patient_id,
            name=self.name,
            age=self.age,
            gender=self.gender,
            symptoms=self.symptoms,
            admission_date=self.admission_date,
        )

    def full_view(self) -> PatientFullView:
        return PatientFullView(
            **self.basic_view().model_dump(),
            diagnoses=list(self._diagnoses),
            medical_notes=list(self._medical_notes),
            prescriptions=list(self._prescriptions),
            ledger=self._ledger.summary(),
        )


def _append_text(entries: list[str], text: str) -> bool:
    if not text:
        return False
    entries.append(text)
    return True


__all__ = ["PatientRecord"]
