import dataclasses
from decimal import Decimal

import pytest

from checkout.models import Cart, Item, Tier
from checkout.service import add_items
from common.factories import CartBuilder, cart_with_total, make_cart, make_items, premium_user, standard_user


@pytest.mark.unit
def test_item_price_is_decimal():
    assert Item("A", 10.1).price == Decimal("10.1")
    assert Item("B", "0").price == 0


@pytest.mark.unit
def test_negative_price_rejected():
    with pytest.raises(ValueError, match="non-negative"):
        Item("broken", -1)


@pytest.mark.unit
def test_cart_total_tracks_items():
    cart = make_cart(items=make_items(3))
    # 10 + 11 + 12
    assert cart.total == Decimal("33.00")
    assert make_cart().total == 0


@pytest.mark.unit
def test_cart_is_replaced_not_mutated():
    cart = make_cart(items=make_items(1))
    bigger = cart.add(Item("extra", 5))
    assert len(cart.items) == 1
    assert len(bigger.items) == 2
    assert bigger.total == cart.total + 5
    with pytest.raises(dataclasses.FrozenInstanceError):
        cart.items = ()


@pytest.mark.unit
def test_cart_copies_caller_list():
    items = make_items(2)
    cart = Cart(owner=standard_user(), items=items)
    items.append(Item("late", 100))
    assert len(cart.items) == 2


@pytest.mark.unit
def test_add_items_returns_new_cart():
    cart = make_cart()
    filled = add_items(cart, make_items(2))
    assert cart.items == ()
    assert [i.name for i in filled.items] == ["Item 1", "Item 2"]


@pytest.mark.unit
def test_user_mothers():
    assert standard_user().tier is Tier.STANDARD
    assert premium_user().email == "premium@email.com"
    assert premium_user("vip@example.com").email == "vip@example.com"


@pytest.mark.unit
def test_cart_builder_defaults_and_overrides():
    default = CartBuilder().build()
    assert default.owner == standard_user()
    assert default.total == Decimal("100.00")

    cart = CartBuilder().with_owner(premium_user()).with_prices(10, "2.5").with_item(Item("x", 1)).build()
    assert cart.owner.tier is Tier.PREMIUM
    assert cart.total == Decimal("13.5")

    assert CartBuilder().empty().build().total == 0
    assert cart_with_total(150).total == 150
