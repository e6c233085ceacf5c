import logging
from decimal import Decimal
from typing import Iterable, Optional, Tuple

from .config import DEFAULT_SETTINGS, CheckoutSettings
from .models import Cart, Item, Order
from .ports import Notifier, OrderRepository, PaymentGateway
from .pricing import calculate_subtotal, payable_amount

logger = logging.getLogger("checkout.service")


def add_items(cart: Cart, items: Iterable[Item]) -> Cart:
    for i in items:
        cart = cart.add(i)
    return cart


def confirmation_message(order: Order, payable: Decimal,
                         settings: CheckoutSettings = DEFAULT_SETTINGS) -> Tuple[str, str]:
    body = f"Order {order.id} for the amount of {settings.currency_symbol}{payable:.2f}"
    return settings.confirmation_subject, body


class CheckoutService:
    """Charges a cart, stores the resulting order and emails the customer.

    Only a successful charge leads to persistence. Notification is
    best-effort and never affects the returned order.
    """

    def __init__(self, gateway: PaymentGateway, repository: OrderRepository,
                 notifier: Notifier, settings: Optional[CheckoutSettings] = None):
        self.gateway = gateway
        self.repository = repository
        self.notifier = notifier
        self.settings = settings or DEFAULT_SETTINGS

    async def process_order(self, cart: Cart, payment_instrument: str) -> Optional[Order]:
        raw_total = calculate_subtotal(cart.items)
        payable = payable_amount(cart.owner, raw_total, self.settings)

        try:
            result = await self.gateway.charge(payable, payment_instrument)
        except Exception as e:
            logger.warning("charge failed for user %s: %s", cart.owner.id, e)
            return None
        if not result.success:
            logger.warning("charge declined for user %s: %s", cart.owner.id, result.error)
            return None

        # 持久化失败直接抛给调用方
        order = await self.repository.save(cart, payable)
        logger.info("order saved: id=%s final_total=%s", order.id, order.final_total)

        await self._notify(order, cart.owner.email, payable)
        return order

    async def _notify(self, order: Order, recipient: str, payable: Decimal) -> None:
        subject, body = confirmation_message(order, payable, self.settings)
        # 通知结果（False 或异常）一律不影响订单，也不记录
        try:
            await self.notifier.send(recipient, subject, body)
        except Exception:
            pass
