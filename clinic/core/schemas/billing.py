from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class LedgerStatus(str, Enum):
    PENDING = "pending"
    PARTIALLY_PAID = "partially_paid"
    FULLY_CLEARED = "fully_cleared"

    @property
    def label(self) -> str:
        return _STATUS_LABELS[self]


_STATUS_LABELS = {
    LedgerStatus.PENDING: "Pending",
    LedgerStatus.PARTIALLY_PAID: "Partially Paid",
    LedgerStatus.FULLY_CLEARED: "Fully Cleared",
}


class ChargeEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    description: str
    amount: Decimal


class PaymentEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    method: str
    amount: Decimal


class LedgerSummary(BaseModel):
    """Read-only snapshot of a patient's bill."""
    model_config = ConfigDict(frozen=True)

    charges: List[ChargeEntry] = Field(default_factory=list)
    payments: List[PaymentEntry] = Field(default_factory=list)
    total_charges: Decimal = Decimal("0")
    total_payments: Decimal = Decimal("0")
    balance: Decimal = Decimal("0")
    status: LedgerStatus = LedgerStatus.PENDING


__all__ = ["LedgerStatus", "ChargeEntry", "PaymentEntry", "LedgerSummary"]
