import logging
import os
from dataclasses import dataclass, replace
from decimal import Decimal, InvalidOperation
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger("checkout.config")

CONFIG_ENV = "CHECKOUT_CONFIG"

# 环境变量 -> 配置字段
ENV_OVERRIDES = {
    "CHECKOUT_PREMIUM_DISCOUNT": "premium_discount",
    "CHECKOUT_CURRENCY_SYMBOL": "currency_symbol",
    "CHECKOUT_CONFIRMATION_SUBJECT": "confirmation_subject",
}


@dataclass(frozen=True)
class CheckoutSettings:
    premium_discount: Decimal = Decimal("0.10")
    currency_symbol: str = "R$"
    confirmation_subject: str = "Your order has been approved!"

    def __post_init__(self) -> None:
        try:
            discount = Decimal(str(self.premium_discount))
        except InvalidOperation:
            raise ValueError(f"premium_discount is not a number: {self.premium_discount!r}") from None
        if not discount.is_finite():
            raise ValueError(f"premium_discount must be finite: {discount}")
        if not Decimal("0") <= discount < Decimal("1"):
            raise ValueError(f"premium_discount must be in [0, 1): {discount}")
        object.__setattr__(self, "premium_discount", discount)


DEFAULT_SETTINGS = CheckoutSettings()


def _read_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ValueError(f"cannot load checkout config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"checkout config {path} must be a mapping")
    section = data.get("checkout", data)
    if not isinstance(section, dict):
        raise ValueError(f"'checkout' section in {path} must be a mapping")
    logger.info("loaded checkout config: %s", path)
    return section


def load_settings(path: Optional[str] = None) -> CheckoutSettings:
    path = path or os.environ.get(CONFIG_ENV)
    values: Dict[str, Any] = {}
    if path:
        known = set(CheckoutSettings.__dataclass_fields__)
        for key, value in _read_yaml(path).items():
            if key in known:
                values[key] = value
            else:
                logger.warning("ignoring unknown checkout config key: %s", key)
    for env_name, key in ENV_OVERRIDES.items():
        if env_name in os.environ:
            values[key] = os.environ[env_name]
    return replace(DEFAULT_SETTINGS, **values)
