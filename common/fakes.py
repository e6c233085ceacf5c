from decimal import Decimal
from typing import Dict, List, Optional, Tuple

from checkout.models import Cart, Order, OrderStatus
from checkout.ports import ChargeResult


class StubPaymentGateway:
    def __init__(self, approve: bool = True, error: str = "card declined"):
        self.approve = approve
        self.error = error
        self.calls: List[Tuple[Decimal, str]] = []

    async def charge(self, amount: Decimal, instrument: str) -> ChargeResult:
        self.calls.append((amount, instrument))
        if not self.approve:
            return ChargeResult.declined(self.error)
        return ChargeResult.approved(f"TXN-{len(self.calls):05d}")


class InMemoryOrderRepository:
    def __init__(self, fail: Optional[Exception] = None):
        self.fail = fail
        self.orders: Dict[str, Order] = {}

    async def save(self, cart: Cart, final_total: Decimal) -> Order:
        if self.fail is not None:
            raise self.fail
        order = Order(id=f"PED-{len(self.orders) + 1:03d}", cart=cart,
                      final_total=final_total, status=OrderStatus.PROCESSED)
        self.orders[order.id] = order
        return order


class RecordingNotifier:
    def __init__(self, fail: bool = False):
        self.fail = fail
        self.sent: List[Tuple[str, str, str]] = []

    async def send(self, recipient: str, subject: str, body: str) -> bool:
        self.sent.append((recipient, subject, body))
        if self.fail:
            raise ConnectionError("mail server unavailable")
        return True
