from __future__ import annotations

from decimal import Decimal
from typing import Iterable

from clinic.core.schemas.account import AccountView
from clinic.core.schemas.billing import LedgerSummary
from clinic.core.schemas.patient import PatientBasicView, PatientBrief, PatientFullView

_NONE = "  (none)"


def format_money(amount: Decimal) -> str:
    return f"${amount:.2f}"


def _bullets(items: Iterable[str]) -> list[str]:
    lines = [f"  - {item}" for item in items]
    return lines or [_NONE]


def render_ledger_summary(summary: LedgerSummary) -> str:
    lines = ["---- Bill Summary ----", "Charges:"]
    if not summary.charges:
        lines.append(_NONE)
    for charge in summary.charges:
        lines.append(f"  {charge.description} : {format_money(charge.amount)}")
    lines.append("Payments:")
    if not summary.payments:
        lines.append(_NONE)
    for payment in summary.payments:
        lines.append(f"  {payment.method} : {format_money(payment.amount)}")
    lines.extend(
        [
            f"Total Charges: {format_money(summary.total_charges)}",
            f"Total Payments: {format_money(summary.total_payments)}",
            f"Balance: {format_money(summary.balance)}",
            f"Status: {summary.status.label}",
            "----------------------",
        ]
    )
    return "\n".join(lines)


def render_patient_basic(view: PatientBasicView) -> str:
    return "\n".join(
        [
            f"Patient ID: {view.patient_id}",
            f"Name: {view.name}, Age: {view.age}, Gender: {view.gender}",
            f"Symptoms: {view.symptoms}",
            f"Date of admission: {view.admission_date}",
        ]
    )


def render_patient_full(view: PatientFullView) -> str:
    lines = [render_patient_basic(view), "Diagnoses:"]
    lines.extend(_bullets(view.diagnoses))
    lines.append("Medical Notes:")
    lines.extend(_bullets(view.medical_notes))
    lines.append("Prescriptions:")
    lines.extend(_bullets(view.prescriptions))
    lines.append(render_ledger_summary(view.ledger))
    return "\n".join(lines)


def render_patients_brief(patients: Iterable[PatientBrief]) -> str:
    lines = ["---- Patients (brief) ----"]
    lines.extend(f"ID: {patient.patient_id} | Name: {patient.name}" for patient in patients)
    lines.append("--------------------------")
    return "\n".join(lines)


def render_accounts(accounts: Iterable[AccountView]) -> str:
    lines = ["---- Registered Employees ----"]
    lines.extend(
        f"Username: {account.username} | Role: {account.role.label}" for account in accounts
    )
    lines.append("------------------------------")
    return "\n".join(lines)


__all__ = [
    "format_money",
    "render_ledger_summary",
    "render_patient_basic",
    "render_patient_full",
    "render_patients_brief",
    "render_accounts",
]
