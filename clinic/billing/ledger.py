from __future__ import annotations

from decimal import Decimal, InvalidOperation, localcontext
from typing import Optional, Union

from loguru import logger

from clinic.core.schemas.billing import ChargeEntry, LedgerStatus, LedgerSummary, PaymentEntry

Amount = Union[Decimal, int, float, str]

ZERO = Decimal("0")
CENT = Decimal("0.01")
# Largest single charge or payment. With cents this keeps every entry within
# 12 significant digits, so totals stay exact under the default 28-digit context.
MAX_AMOUNT = Decimal("1000000000")


def parse_amount(value: Amount) -> Optional[Decimal]:
    """Return ``value`` as a positive amount in whole cents, or None.

    Rejects unparseable text, non-finite values, anything not above zero or
    above MAX_AMOUNT, and fractions of a cent.
    """
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value).strip())
        except (InvalidOperation, ValueError):
            return None
    if not result.is_finite() or result <= ZERO or result > MAX_AMOUNT:
        return None
    with localcontext() as ctx:
        ctx.prec = 28
        cents = result.quantize(CENT)
    if cents != result:
        return None
    return cents


def derive_status(balance: Decimal, has_payments: bool) -> LedgerStatus:
    if balance <= ZERO:
        return LedgerStatus.FULLY_CLEARED
    if has_payments:
        return LedgerStatus.PARTIALLY_PAID
    return LedgerStatus.PENDING


class Ledger:
    """Charges and payments for one patient plus the settlement status.

    Amounts that ``parse_amount`` rejects and empty descriptions are ignored:
    the add methods return False and leave the ledger untouched. ``set_status``
    overrides the derived status until the next accepted entry recomputes it.
    """

    def __init__(self) -> None:
        self._charges: list[ChargeEntry] = []
        self._payments: list[PaymentEntry] = []
        self._status = LedgerStatus.PENDING

    @property
    def charges(self) -> tuple[ChargeEntry, ...]:
        return tuple(self._charges)

    @property
    def payments(self) -> tuple[PaymentEntry, ...]:
        return tuple(self._payments)

    @property
    def status(self) -> LedgerStatus:
        return self._status

    def add_charge(self, description: str, amount: Amount) -> bool:
        value = parse_amount(amount)
        if not description or value is None:
            logger.debug("ignored charge description={!r} amount={!r}", description, amount)
            return False
        entry = ChargeEntry(description=description, amount=value)
        status = derive_status(self.balance() + value, bool(self._payments))
        self._charges.append(entry)
        self._status = status
        return True

    def add_payment(self, method: str, amount: Amount) -> bool:
        value = parse_amount(amount)
        if not method or value is None:
            logger.debug("ignored payment method={!r} amount={!r}", method, amount)
            return False
        entry = PaymentEntry(method=method, amount=value)
        status = derive_status(self.balance() - value, True)
        self._payments.append(entry)
        self._status = status
        return True

    def total_charges(self) -> Decimal:
        return sum((entry.amount for entry in self._charges), ZERO)

    def total_payments(self) -> Decimal:
        return sum((entry.amount for entry in self._payments), ZERO)

    def balance(self) -> Decimal:
        return self.total_charges() - self.total_payments()

    def set_status(self, status: LedgerStatus) -> None:
        self._status = LedgerStatus(status)

    def summary(self) -> LedgerSummary:
        return LedgerSummary(
            charges=list(self._charges),
            payments=list(self._payments),
            total_charges=self.total_charges(),
            total_payments=self.total_payments(),
            balance=self.balance(),
            status=self._status,
        )


__all__ = ["Ledger", "Amount", "CENT", "MAX_AMOUNT", "derive_status", "parse_amount"]
