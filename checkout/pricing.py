import logging
from decimal import Decimal
from typing import Iterable, Optional

from .config import DEFAULT_SETTINGS, CheckoutSettings
from .models import Amount, Item, Tier, User, to_decimal

logger = logging.getLogger("checkout.pricing")


def membership_discount(tier: Tier, settings: CheckoutSettings = DEFAULT_SETTINGS) -> Decimal:
    if tier == Tier.PREMIUM:
        return settings.premium_discount
    return Decimal("0")


def calculate_subtotal(items: Iterable[Item]) -> Decimal:
    subtotal = sum((i.price for i in items), Decimal("0"))
    logger.info("subtotal=%s", subtotal)
    return subtotal


def payable_amount(user: User, amount: Amount, settings: Optional[CheckoutSettings] = None) -> Decimal:
    amount = to_decimal(amount)
    discount = membership_discount(user.tier, settings or DEFAULT_SETTINGS)
    if not discount:
        return amount
    payable = amount * (1 - discount)
    logger.debug("payable computed: %s (tier=%s)", payable, user.tier)
    return payable
