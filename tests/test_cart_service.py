from decimal import Decimal

import pytest

from core.cart_service import Cart, to_money
from core.errors import ValidationError
from conftest import FakeItem


def test_to_money_rounds_half_up():
    assert to_money("2.345") == Decimal("2.35")
    assert to_money(3) == Decimal("3.00")
    assert to_money(0.1) == Decimal("0.10")


def test_same_item_and_instructions_merge(jollof):
    cart = Cart()
    cart.add_to_cart(jollof, 1, "extra shito")
    cart.add_to_cart(jollof, 2, "extra shito")
    assert len(cart) == 1
    assert cart.lines[0].quantity == 3


def test_different_instructions_make_separate_lines(jollof):
    cart = Cart()
    cart.add_to_cart(jollof)
    cart.add_to_cart(jollof, instructions="no onions")
    assert len(cart) == 2


def test_none_and_empty_instructions_are_distinct(jollof):
    cart = Cart()
    cart.add_to_cart(jollof, instructions=None)
    cart.add_to_cart(jollof, instructions="")
    assert len(cart) == 2
    assert [line.instructions for line in cart] == [None, ""]


@pytest.mark.parametrize("quantity", [0, -1])
def test_rejects_non_positive_quantity(jollof, quantity):
    cart = Cart()
    with pytest.raises(ValidationError):
        cart.add_to_cart(jollof, quantity)
    assert cart.is_empty


def test_totals_with_ten_percent_tax(jollof, kelewele):
    cart = Cart(tax_rate=Decimal("0.10"))
    cart.add_to_cart(jollof, 1)
    cart.add_to_cart(kelewele, 2)
    assert cart.subtotal == Decimal("31.00")
    assert cart.tax == Decimal("3.10")
    assert cart.total == Decimal("34.10")
    assert cart.item_count == 3


def test_tax_rounds_to_cents():
    cart = Cart(tax_rate=Decimal("0.10"))
    cart.add_to_cart(FakeItem(id="x", name="Sweet", price=Decimal("0.05")))
    assert cart.tax == Decimal("0.01")
    assert cart.total == Decimal("0.06")


def test_empty_cart_totals_are_zero():
    cart = Cart()
    assert cart.subtotal == Decimal("0.00")
    assert cart.tax == Decimal("0.00")
    assert cart.total == Decimal("0.00")
    assert cart.item_count == 0


def test_update_quantity_to_zero_removes_line(jollof, kelewele):
    cart = Cart()
    cart.add_to_cart(jollof)
    cart.add_to_cart(kelewele)
    cart.update_quantity(0, -1)
    assert [line.name for line in cart] == ["Kelewele"]


def test_update_quantity_out_of_range_is_noop(jollof):
    cart = Cart()
    cart.add_to_cart(jollof, 2)
    cart.update_quantity(5, 1)
    cart.update_quantity(-1, 1)
    assert cart.lines[0].quantity == 2


def test_remove_from_cart_by_index(jollof, kelewele):
    cart = Cart()
    cart.add_to_cart(jollof)
    cart.add_to_cart(kelewele)
    cart.remove_from_cart(0)
    assert [line.name for line in cart] == ["Kelewele"]
    cart.remove_from_cart(10)
    assert len(cart) == 1


def test_price_is_snapshotted_at_add_time(jollof):
    cart = Cart()
    cart.add_to_cart(jollof)
    jollof.price = Decimal("99.00")
    assert cart.subtotal == Decimal("15.00")


def test_notify_called_with_quantity_and_name(kelewele):
    messages = []
    cart = Cart(notify=messages.append)
    cart.add_to_cart(kelewele, 2)
    assert messages == ["2 Kelewele added to cart"]


def test_clear_and_checkout_summary(jollof, kelewele):
    cart = Cart()
    cart.add_to_cart(jollof, 1, "well done")
    cart.add_to_cart(kelewele, 2)
    assert cart.checkout_summary() == [
        {"quantity": 1, "name": "Jollof Rice", "note": "well done", "subtotal": Decimal("15.00")},
        {"quantity": 2, "name": "Kelewele", "note": "", "subtotal": Decimal("16.00")},
    ]
    cart.clear()
    assert cart.is_empty


def test_large_negative_delta_removes_only_that_line(jollof, kelewele):
    sobolo = FakeItem(id="item-3", name="Sobolo", price=Decimal("5.00"), category="Beverages")
    cart = Cart()
    cart.add_to_cart(jollof, 2)
    cart.add_to_cart(kelewele, 1)
    cart.add_to_cart(sobolo, 3)
    cart.update_quantity(1, -100)
    assert [(line.name, line.quantity) for line in cart] == [("Jollof Rice", 2), ("Sobolo", 3)]


def test_distinct_keys_make_one_line_each_with_summed_quantity(jollof, kelewele):
    adds = [
        (jollof, 1, None),
        (kelewele, 2, "extra pepper"),
        (jollof, 3, "no onions"),
        (kelewele, 1, "extra pepper"),
        (jollof, 2, None),
        (jollof, 1, ""),
    ]
    cart = Cart()
    expected = {}
    for item, quantity, note in adds:
        cart.add_to_cart(item, quantity, note)
        expected[(item.id, note)] = expected.get((item.id, note), 0) + quantity

    assert len(cart) == len(expected) == 4
    assert {(line.item_id, line.instructions): line.quantity for line in cart} == expected
    assert [(line.item_id, line.instructions) for line in cart] == list(expected)
