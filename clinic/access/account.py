from __future__ import annotations

import hmac

from clinic.access.roles import Role
from clinic.core.schemas.account import AccountView


class Account:
    """Credential pair plus a fixed role.

    Passwords are kept as given and compared for equality; there is no hashing.
    """

    __slots__ = ("_username", "_password", "_role")

    def __init__(self, username: str, password: str, role: Role) -> None:
        if not username:
            raise ValueError("username must not be empty")
        self._username = username
        self._password = password
        self._role = Role(role)

    @property
    def username(self) -> str:
        return self._username

    @property
    def role(self) -> Role:
        return self._role

    def check_password(self, candidate: str) -> bool:
        return hmac.compare_digest(candidate.encode("utf-8"), self._password.encode("utf-8"))

    def set_password(self, new_password: str) -> None:
        self._password = new_password

    def view(self) -> AccountView:
        return AccountView(username=self._username, role=self._role)

    def __repr__(self) -> str:
        return f"Account(username={self._username!r}, role={self._role.value!r})"


__all__ = ["Account"]
