"""Contracts of the collaborators the checkout service is wired with.

Concrete gateways, repositories and mail transports live outside this
package; anything with matching async methods can be injected.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional, Protocol

from .models import Cart, Order


@dataclass(frozen=True)
class ChargeResult:
    success: bool
    transaction_id: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def approved(cls, transaction_id: Optional[str] = None) -> "ChargeResult":
        return cls(success=True, transaction_id=transaction_id)

    @classmethod
    def declined(cls, error: Optional[str] = None) -> "ChargeResult":
        return cls(success=False, error=error)


class PaymentGateway(Protocol):
    async def charge(self, amount: Decimal, instrument: str) -> ChargeResult:
        ...


class OrderRepository(Protocol):
    async def save(self, cart: Cart, final_total: Decimal) -> Order:
        """Persist the order; the repository assigns id and status."""
        ...


class Notifier(Protocol):
    async def send(self, recipient: str, subject: str, body: str) -> bool:
        ...
