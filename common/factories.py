from dataclasses import dataclass
from decimal import Decimal
from typing import List, Optional

from checkout.models import Amount, Cart, Item, Tier, User


@dataclass(frozen=True)
class Defaults:
    base_price: Decimal = Decimal("10.00")
    default_item_price: Decimal = Decimal("100.00")
    standard_email: str = "standard@email.com"
    premium_email: str = "premium@email.com"


def make_user(uid: int = 1, name: str = "Joao Silva", email: str = Defaults.standard_email,
              tier: Tier = Tier.STANDARD) -> User:
    return User(id=uid, name=name, email=email, tier=tier)


def standard_user(email: str = Defaults.standard_email) -> User:
    return make_user(1, "Joao Silva", email, Tier.STANDARD)


def premium_user(email: str = Defaults.premium_email) -> User:
    return make_user(2, "Maria Santos", email, Tier.PREMIUM)


def make_items(n: int = 1, base: Amount = Defaults.base_price) -> List[Item]:
    return [Item(name=f"Item {i + 1}", price=Decimal(str(base)) + i) for i in range(n)]


def make_cart(owner: Optional[User] = None, items: Optional[List[Item]] = None) -> Cart:
    return Cart(owner=owner or standard_user(), items=tuple(items or ()))


def cart_with_total(total: Amount, owner: Optional[User] = None) -> Cart:
    return CartBuilder().with_owner(owner or standard_user()).with_total(total).build()


class CartBuilder:
    """Fluent builder: each call returns the builder, ``build()`` returns the Cart."""

    def __init__(self):
        self.owner = standard_user()
        self.items = [Item("Default product", Defaults.default_item_price)]

    def with_owner(self, owner: User) -> "CartBuilder":
        self.owner = owner
        return self

    def with_items(self, items: List[Item]) -> "CartBuilder":
        self.items = list(items)
        return self

    def with_item(self, item: Item) -> "CartBuilder":
        self.items.append(item)
        return self

    def empty(self) -> "CartBuilder":
        self.items = []
        return self

    def with_total(self, total: Amount) -> "CartBuilder":
        self.items = [Item("Test item", total)]
        return self

    def with_prices(self, *prices: Amount) -> "CartBuilder":
        self.items = [Item(f"Item {i + 1}", p) for i, p in enumerate(prices)]
        return self

    def build(self) -> Cart:
        return Cart(owner=self.owner, items=tuple(self.items))
