from __future__ import annotations

from typing import Optional

from loguru import logger

from clinic.access.account import Account
from clinic.access.roles import Role
from clinic.core.schemas.account import AccountView
from clinic.core.schemas.patient import PatientBrief
from clinic.core.settings import DEFAULT_BOOTSTRAP_PASSWORD, DEFAULT_BOOTSTRAP_USERNAME
from clinic.records.patient import PatientRecord


class Directory:
    """Owning store for accounts and patient records.

    Accounts are keyed by username (dict keeps insertion order for listing).
    Patients are kept in registration order and get ids 1, 2, 3, ... that are
    never reused. A bootstrap admin account exists from construction.
    """

    def __init__(
        self,
        bootstrap_username: str = DEFAULT_BOOTSTRAP_USERNAME,
        bootstrap_password: str = DEFAULT_BOOTSTRAP_PASSWORD,
    ) -> None:
        self._accounts: dict[str, Account] = {}
        self._patients: list[PatientRecord] = []
        self._last_patient_id = 0
        self.add_account(Account(bootstrap_username, bootstrap_password, Role.ADMIN))

    # accounts

    @property
    def account_count(self) -> int:
        return len(self._accounts)

    def username_exists(self, username: str) -> bool:
        return username in self._accounts

    def get_account(self, username: str) -> Optional[Account]:
        return self._accounts.get(username)

    def authenticate(self, username: str, password: str) -> Optional[Account]:
        account = self._accounts.get(username)
        if account is None or not account.check_password(password):
            logger.info("authentication failed for username={!r}", username)
            return None
        logger.info("authenticated username={!r} role={}", username, account.role.value)
        return account

    def add_account(self, account: Account) -> bool:
        if account.username in self._accounts:
            logger.info("account not created, username taken username={!r}", account.username)
            return False
        self._accounts[account.username] = account
        logger.info("account created username={!r} role={}", account.username, account.role.value)
        return True

    def delete_account(self, username: str) -> bool:
        account = self._accounts.get(username)
        if account is None:
            return False
        if account.role is Role.ADMIN and self._admin_count() <= 1:
            logger.warning("refused to delete last admin username={!r}", username)
            return False
        del self._accounts[username]
        logger.info("account deleted username={!r}", username)
        return True

    def list_accounts(self) -> list[AccountView]:
        return [account.view() for account in self._accounts.values()]

    def _admin_count(self) -> int:
        return sum(1 for account in self._accounts.values() if account.role is Role.ADMIN)

    # patients

    @property
    def patient_count(self) -> int:
        return len(self._patients)

    def register_patient(
        self,
        name: str,
        age: int,
        gender: str,
        symptoms: str,
        admission_date: str,
    ) -> int:
        self._last_patient_id += 1
        patient_id = self._last_patient_id
        self._patients.append(
            PatientRecord(patient_id, name, age, gender, symptoms, admission_date)
        )
        logger.info("patient registered id={}", patient_id)
        return patient_id

    def find_patient(self, patient_id: int) -> Optional[PatientRecord]:
        for patient in self._patients:
            if patient.patient_id == patient_id:
                return patient
        return None

    def list_patients_brief(self) -> list[PatientBrief]:
        return [patient.brief_view() for patient in self._patients]


__all__ = ["Directory"]
