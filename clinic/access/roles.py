from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    ADMIN = "admin"
    DOCTOR = "doctor"
    NURSE = "nurse"
    PHARMACIST = "pharmacist"
    ACCOUNTS = "accounts"

    @property
    def label(self) -> str:
        return _ROLE_LABELS[self]


_ROLE_LABELS = {
    Role.ADMIN: "Admin",
    Role.DOCTOR: "Doctor",
    Role.NURSE: "Nurse",
    Role.PHARMACIST: "Pharmacist",
    Role.ACCOUNTS: "Accounts Manager",
}


class Operation(str, Enum):
    CREATE_ACCOUNT = "create_account"
    DELETE_ACCOUNT = "delete_account"
    LIST_ACCOUNTS = "list_accounts"
    REGISTER_PATIENT = "register_patient"
    VIEW_BASIC_RECORD = "view_basic_record"
    LIST_PATIENTS = "list_patients"
    VIEW_FULL_RECORD = "view_full_record"
    ADD_DIAGNOSIS = "add_diagnosis"
    ADD_MEDICAL_NOTE = "add_medical_note"
    ADD_PRESCRIPTION = "add_prescription"
    ADD_CHARGE = "add_charge"
    VIEW_LEDGER = "view_ledger"
    ADD_PAYMENT = "add_payment"
    SET_LEDGER_STATUS = "set_ledger_status"
    CHANGE_PASSWORD = "change_password"


# Menu order and wording per role. The same operation may read differently
# depending on who is using it (a pharmacist's prescription is a dispensed drug).
_ROLE_MENUS: dict[Role, tuple[tuple[Operation, str], ...]] = {
    Role.ADMIN: (
        (Operation.CREATE_ACCOUNT, "Register employee"),
        (Operation.DELETE_ACCOUNT, "Delete employee"),
        (Operation.LIST_ACCOUNTS, "View all employees"),
        (Operation.CHANGE_PASSWORD, "Change my password"),
    ),
    Role.NURSE: (
        (Operation.REGISTER_PATIENT, "Register new patient"),
        (Operation.VIEW_BASIC_RECORD, "View basic patient information"),
        (Operation.CHANGE_PASSWORD, "Change my password"),
    ),
    Role.DOCTOR: (
        (Operation.LIST_PATIENTS, "View registered patient records (brief)"),
        (Operation.VIEW_FULL_RECORD, "View full patient record by ID"),
        (Operation.ADD_DIAGNOSIS, "Add diagnostic information"),
        (Operation.ADD_MEDICAL_NOTE, "Add medical notes"),
        (Operation.ADD_PRESCRIPTION, "Prescribe medication"),
        (Operation.ADD_CHARGE, "Add billing entry (consultation/tests)"),
        (Operation.CHANGE_PASSWORD, "Change my password"),
    ),
    Role.PHARMACIST: (
        (Operation.VIEW_FULL_RECORD, "View patient medical record (full)"),
        (Operation.ADD_PRESCRIPTION, "Record medication dispensed"),
        (Operation.ADD_CHARGE, "Add medication cost to patient bill"),
        (Operation.CHANGE_PASSWORD, "Change my password"),
    ),
    Role.ACCOUNTS: (
        (Operation.VIEW_LEDGER, "View complete patient bill"),
        (Operation.ADD_PAYMENT, "Record payment made"),
        (Operation.SET_LEDGER_STATUS, "Mark bill status manually"),
        (Operation.CHANGE_PASSWORD, "Change my password"),
    ),
}


def permitted_operations(role: Role) -> tuple[Operation, ...]:
    """Operations reachable by a role, in menu order."""
    return tuple(operation for operation, _ in _ROLE_MENUS[role])


def menu_entries(role: Role) -> tuple[tuple[Operation, str], ...]:
    return _ROLE_MENUS[role]


__all__ = ["Role", "Operation", "permitted_operations", "menu_entries"]
