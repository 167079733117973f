from __future__ import annotations

from enum import Enum
from typing import Optional

from loguru import logger

from clinic.core.settings import DEFAULT_MAX_PATIENT_ID
from clinic.directory import Directory
from clinic.session.dispatcher import RoleSession
from clinic.session.prompter import Prompter


class SessionState(str, Enum):
    LOGGED_OUT = "logged_out"
    AUTHENTICATING = "authenticating"
    ROLE_MENU = "role_menu"
    STOPPED = "stopped"


class ClinicApp:
    """Top-level Login / Exit loop.

    LOGGED_OUT -> AUTHENTICATING -> ROLE_MENU (success) or LOGGED_OUT (failure);
    logout returns to LOGGED_OUT and only the Exit choice reaches STOPPED.
    """

    def __init__(
        self,
        directory: Directory,
        prompter: Prompter,
        max_patient_id: int = DEFAULT_MAX_PATIENT_ID,
    ) -> None:
        self.directory = directory
        self.prompter = prompter
        self.max_patient_id = max_patient_id
        self.state = SessionState.LOGGED_OUT

    def run(self) -> int:
        try:
            while self.state is not SessionState.STOPPED:
                self.step()
        except EOFError:
            logger.debug("input closed in state={}", self.state.value)
            self.prompter.write("\nInput closed. Goodbye.")
            self.state = SessionState.STOPPED
        return 0

    def step(self) -> None:
        self.prompter.write("\n=== Clinic Management System ===\n1. Login\n2. Exit")
        choice = self.prompter.read_int("Choose an option: ", 1, 2)
        if choice == 2:
            self.prompter.write("Exiting. Goodbye.")
            self.state = SessionState.STOPPED
            return
        session = self.login()
        if session is None:
            return
        session.run()
        self.prompter.write("Logged out.")
        self.state = SessionState.LOGGED_OUT

    def login(self) -> Optional[RoleSession]:
        self.state = SessionState.AUTHENTICATING
        username = self.prompter.read_line("Username: ")
        password = self.prompter.read_line("Password: ")
        account = self.directory.authenticate(username, password)
        if account is None:
            self.prompter.write("Invalid username or password.")
            self.state = SessionState.LOGGED_OUT
            return None
        self.prompter.write(f"Login successful. Welcome, {account.username} ({account.role.label})")
        self.state = SessionState.ROLE_MENU
        return RoleSession(self.directory, account.username, self.prompter, self.max_patient_id)


__all__ = ["ClinicApp", "SessionState"]
