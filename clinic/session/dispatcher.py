from __future__ import annotations

from typing import Callable, Optional

from loguru import logger

from clinic.access.account import Account
from clinic.access.roles import Operation, Role, menu_entries, permitted_operations
from clinic.core.exceptions import ClinicError
from clinic.core.render.text import (
    render_accounts,
    render_ledger_summary,
    render_patient_basic,
    render_patient_full,
    render_patients_brief,
)
from clinic.core.schemas.billing import LedgerStatus
from clinic.core.settings import DEFAULT_MAX_PATIENT_ID
from clinic.directory import Directory
from clinic.records.patient import PatientRecord
from clinic.session.prompter import Prompter

MAX_AGE = 150
CANCEL_WORD = "back"

# Role choices offered when an admin creates an account.
ROLE_CHOICES: tuple[Role, ...] = (
    Role.DOCTOR,
    Role.NURSE,
    Role.PHARMACIST,
    Role.ACCOUNTS,
    Role.ADMIN,
)

STATUS_CHOICES: tuple[tuple[LedgerStatus, str], ...] = (
    (LedgerStatus.FULLY_CLEARED, "Fully cleared"),
    (LedgerStatus.PARTIALLY_PAID, "Partially paid"),
    (LedgerStatus.PENDING, "Pending"),
)


class OperationNotPermittedError(ClinicError):
    def __init__(self, role: Role, operation: Operation) -> None:
        super().__init__(f"{role.label} cannot {operation.value}")
        self.role = role
        self.operation = operation


class RoleSession:
    """Menu loop for one logged-in account.

    Only the operations returned by ``permitted_operations`` for the account's
    role are bound to handlers; anything else is unreachable. The account is
    held by username and resolved from the directory on each use.
    """

    def __init__(
        self,
        directory: Directory,
        username: str,
        prompter: Prompter,
        max_patient_id: int = DEFAULT_MAX_PATIENT_ID,
    ) -> None:
        account = directory.get_account(username)
        if account is None:
            raise ClinicError(f"unknown account: {username}")
        self.directory = directory
        self.username = username
        self.role = account.role
        self.prompter = prompter
        self.max_patient_id = max_patient_id
        self._handlers = {
            operation: _HANDLERS[operation] for operation in permitted_operations(self.role)
        }

    @property
    def account(self) -> Account:
        account = self.directory.get_account(self.username)
        if account is None:
            raise ClinicError(f"account no longer exists: {self.username}")
        return account

    def menu_text(self) -> str:
        entries = menu_entries(self.role)
        lines = [f"\n--- {self.role.label} Menu ---"]
        lines.extend(f"{index}. {label}" for index, (_, label) in enumerate(entries, start=1))
        lines.append(f"{len(entries) + 1}. Logout (Back)")
        return "\n".join(lines)

    def run(self) -> None:
        entries = menu_entries(self.role)
        logout_choice = len(entries) + 1
        while True:
            self.prompter.write(self.menu_text())
            choice = self.prompter.read_int("Choose an option: ", 1, logout_choice)
            if choice == logout_choice:
                return
            self.dispatch(entries[choice - 1][0])

    def dispatch(self, operation: Operation) -> None:
        handler = self._handlers.get(operation)
        if handler is None:
            raise OperationNotPermittedError(self.role, operation)
        logger.debug("dispatch username={!r} operation={}", self.username, operation.value)
        handler(self)

    # helpers shared by handlers

    def say(self, text: str) -> None:
        self.prompter.write(text)

    def report(self, accepted: bool, done: str, ignored: str) -> None:
        self.say(done if accepted else ignored)

    def lookup_patient(
        self, prompt: str = "Enter patient ID: ", allow_cancel: bool = False
    ) -> Optional[PatientRecord]:
        minimum = 0 if allow_cancel else 1
        patient_id = self.prompter.read_int(prompt, minimum, self.max_patient_id)
        if patient_id == 0:
            return None
        patient = self.directory.find_patient(patient_id)
        if patient is None:
            self.say("Patient not found.")
        return patient


# admin


def _create_account(session: RoleSession) -> None:
    username = session.prompter.read_line("Enter username for employee: ")
    if session.directory.username_exists(username):
        session.say("Username already exists.")
        return
    session.say(
        "Select role:\n"
        + "\n".join(f"{index}. {role.label}" for index, role in enumerate(ROLE_CHOICES, start=1))
    )
    role = ROLE_CHOICES[session.prompter.read_int("Choose role: ", 1, len(ROLE_CHOICES)) - 1]
    password = session.prompter.read_line("Set password for employee: ")
    session.directory.add_account(Account(username, password, role))
    session.say(f"Employee registered: {username} ({role.label})")


def _delete_account(session: RoleSession) -> None:
    session.say(render_accounts(session.directory.list_accounts()))
    target = session.prompter.read_line(
        f"Enter username to delete (or type '{CANCEL_WORD}' to cancel): "
    )
    if target == CANCEL_WORD:
        return
    if not session.directory.username_exists(target):
        session.say("No such user.")
        return
    if target == session.username:
        session.say("You cannot delete your own account here.")
        return
    if session.directory.delete_account(target):
        session.say(f"Deleted user: {target}")
    else:
        session.say("Cannot delete the last Admin account.")


def _list_accounts(session: RoleSession) -> None:
    session.say(render_accounts(session.directory.list_accounts()))


def _change_password(session: RoleSession) -> None:
    new_password = session.prompter.read_line("Enter new password: ")
    session.account.set_password(new_password)
    logger.info("password changed username={!r}", session.username)
    session.say("Password updated.")


# nurse


def _register_patient(session: RoleSession) -> None:
    prompter = session.prompter
    name = prompter.read_line("Full name: ")
    age = prompter.read_int("Age: ", 1, MAX_AGE)
    gender = prompter.read_line("Gender: ")
    symptoms = prompter.read_line("Symptoms: ")
    admission_date = prompter.read_line("Date of admission (YYYY-MM-DD): ")
    patient_id = session.directory.register_patient(name, age, gender, symptoms, admission_date)
    session.say(f"Patient registered with ID: {patient_id}")


def _view_basic_record(session: RoleSession) -> None:
    session.say(render_patients_brief(session.directory.list_patients_brief()))
    patient = session.lookup_patient("Enter patient ID to view (0 to cancel): ", allow_cancel=True)
    if patient is not None:
        session.say(render_patient_basic(patient.basic_view()))


# doctor / pharmacist


def _list_patients(session: RoleSession) -> None:
    session.say(render_patients_brief(session.directory.list_patients_brief()))


def _view_full_record(session: RoleSession) -> None:
    # only the doctor's prompt offers 0 to cancel
    if session.role is Role.DOCTOR:
        patient = session.lookup_patient("Enter patient ID (0 to cancel): ", allow_cancel=True)
    else:
        patient = session.lookup_patient()
    if patient is not None:
        session.say(render_patient_full(patient.full_view()))


def _add_diagnosis(session: RoleSession) -> None:
    patient = session.lookup_patient()
    if patient is None:
        return
    text = session.prompter.read_line("Enter diagnostic information: ")
    session.report(patient.add_diagnosis(text), "Diagnosis added.", "Empty diagnosis ignored.")


def _add_medical_note(session: RoleSession) -> None:
    patient = session.lookup_patient()
    if patient is None:
        return
    text = session.prompter.read_line("Enter medical note: ")
    session.report(patient.add_medical_note(text), "Medical note added.", "Empty note ignored.")


# (prompt, confirmation) per role
_PRESCRIPTION_WORDING = {
    Role.DOCTOR: ("Enter prescription details: ", "Prescription recorded."),
    Role.PHARMACIST: ("Enter medication details dispensed: ", "Medication dispensed and recorded."),
}

_CHARGE_WORDING = {
    Role.DOCTOR: ("Charge description (e.g., Consultation, X-ray): ", "Charge added to bill."),
    Role.PHARMACIST: ("Medication description: ", "Medication cost added to bill."),
}


def _add_prescription(session: RoleSession) -> None:
    patient = session.lookup_patient()
    if patient is None:
        return
    prompt, done = _PRESCRIPTION_WORDING.get(session.role, _PRESCRIPTION_WORDING[Role.DOCTOR])
    text = session.prompter.read_line(prompt)
    session.report(patient.add_prescription(text), done, "Empty prescription ignored.")


def _add_charge(session: RoleSession) -> None:
    patient = session.lookup_patient()
    if patient is None:
        return
    prompt, done = _CHARGE_WORDING.get(session.role, _CHARGE_WORDING[Role.DOCTOR])
    description = session.prompter.read_line(prompt)
    amount = session.prompter.read_amount("Amount: $")
    session.report(
        patient.ledger.add_charge(description, amount),
        done,
        "Charge ignored: amount must be positive.",
    )


# accounts


def _view_ledger(session: RoleSession) -> None:
    patient = session.lookup_patient()
    if patient is not None:
        session.say(render_ledger_summary(patient.ledger.summary()))


def _add_payment(session: RoleSession) -> None:
    patient = session.lookup_patient()
    if patient is None:
        return
    method = session.prompter.read_line("Payment method (e.g., Cash/Card/Insurance): ")
    amount = session.prompter.read_amount("Amount paid: $")
    session.report(
        patient.ledger.add_payment(method, amount),
        "Payment recorded.",
        "Payment ignored: amount must be positive.",
    )


def _set_ledger_status(session: RoleSession) -> None:
    patient = session.lookup_patient()
    if patient is None:
        return
    session.say(
        "Select status:\n"
        + "\n".join(f"{index}. {label}" for index, (_, label) in enumerate(STATUS_CHOICES, start=1))
    )
    status = STATUS_CHOICES[session.prompter.read_int("Choose: ", 1, len(STATUS_CHOICES)) - 1][0]
    patient.ledger.set_status(status)
    logger.info("ledger status overridden patient_id={} status={}", patient.patient_id, status.value)
    session.say("Bill status updated.")


_HANDLERS: dict[Operation, Callable[[RoleSession], None]] = {
    Operation.CREATE_ACCOUNT: _create_account,
    Operation.DELETE_ACCOUNT: _delete_account,
    Operation.LIST_ACCOUNTS: _list_accounts,
    Operation.REGISTER_PATIENT: _register_patient,
    Operation.VIEW_BASIC_RECORD: _view_basic_record,
    Operation.LIST_PATIENTS: _list_patients,
    Operation.VIEW_FULL_RECORD: _view_full_record,
    Operation.ADD_DIAGNOSIS: _add_diagnosis,
    Operation.ADD_MEDICAL_NOTE: _add_medical_note,
    Operation.ADD_PRESCRIPTION: _add_prescription,
    Operation.ADD_CHARGE: _add_charge,
    Operation.VIEW_LEDGER: _view_ledger,
    Operation.ADD_PAYMENT: _add_payment,
    Operation.SET_LEDGER_STATUS: _set_ledger_status,
    Operation.CHANGE_PASSWORD: _change_password,
}


__all__ = ["RoleSession", "OperationNotPermittedError", "ROLE_CHOICES", "STATUS_CHOICES", "MAX_AGE"]
