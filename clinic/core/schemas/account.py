from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from clinic.access.roles import Role


class AccountView(BaseModel):
    model_config = ConfigDict(frozen=True)

    username: str
    role: Role


__all__ = ["AccountView"]
