from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Dict, Iterable, Tuple, Union

Amount = Union[Decimal, int, float, str]


def to_decimal(value: Amount) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


class Tier(str, Enum):
    STANDARD = "STANDARD"
    PREMIUM = "PREMIUM"


class OrderStatus(str, Enum):
    PROCESSED = "PROCESSED"


@dataclass(frozen=True)
class Item:
    name: str
    price: Decimal

    def __post_init__(self) -> None:
        price = to_decimal(self.price)
        if price < 0:
            raise ValueError(f"item price must be non-negative: {self.name}={price}")
        object.__setattr__(self, "price", price)


@dataclass(frozen=True)
class User:
    id: int
    name: str
    email: str
    tier: Tier = Tier.STANDARD


@dataclass(frozen=True)
class Cart:
    owner: User
    items: Tuple[Item, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    @property
    def total(self) -> Decimal:
        return sum((i.price for i in self.items), Decimal("0"))

    def add(self, item: Item) -> "Cart":
        return replace(self, items=self.items + (item,))

    def with_items(self, items: Iterable[Item]) -> "Cart":
        return replace(self, items=tuple(items))


@dataclass(frozen=True)
class Order:
    id: str
    cart: Cart
    final_total: Decimal
    status: OrderStatus = OrderStatus.PROCESSED

    def to_dict(self) -> Dict[str, object]:
        owner = self.cart.owner
        return {
            "id": self.id,
            "user": {"id": owner.id, "email": owner.email, "tier": owner.tier.value},
            "items": [{"name": i.name, "price": str(i.price)} for i in self.cart.items],
            "final_total": str(self.final_total),
            "status": self.status.value,
        }
