"""Tests for ShoppingCart creation and derived values."""

from decimal import Decimal

import pytest
from ordering.cart.cart import Product, ShoppingCart, ShoppingCartItem
from protean.exceptions import ValidationError


class TestCartCreation:
    def test_new_cart_is_empty(self):
        cart = ShoppingCart()
        assert len(cart.items) == 0

    def test_new_cart_total_is_zero(self):
        cart = ShoppingCart()
        assert cart.total == 0
        assert isinstance(cart.total, Decimal)

    def test_create_factory(self):
        cart = ShoppingCart.create()
        assert cart.id is not None
        assert len(cart.items) == 0


class TestProduct:
    def test_price_is_exact_decimal(self):
        product = Product.create(1, "Apple", Decimal("0.35"))
        assert product.price == Decimal("0.35")

    def test_create_from_float_keeps_the_written_amount(self):
        assert Product.create(1, "Apple", 0.35).price == Decimal("0.35")

    def test_large_price_keeps_every_digit(self):
        product = Product.create(7, "Yacht", Decimal("12345678901234567.89"))
        assert product.price == Decimal("12345678901234567.89")

    def test_large_price_total_is_exact(self):
        cart = ShoppingCart()
        cart.add(Product.create(7, "Yacht", Decimal("12345678901234567.89")), 3)
        assert cart.total == Decimal("37037036703703703.67")

    def test_price_accepts_decimal_text(self):
        assert Product(product_id=1, name="Apple", unit_price="0.35").price == Decimal("0.35")

    @pytest.mark.parametrize("unit_price", ["-0.01", "abc", "NaN", "Infinity"])
    def test_price_must_be_a_non_negative_amount(self, unit_price):
        with pytest.raises(ValidationError) as exc_info:
            Product(product_id=1, name="Apple", unit_price=unit_price)
        assert "unit_price" in exc_info.value.messages

    def test_products_with_same_values_are_equal(self):
        assert Product.create(1, "Apple", Decimal("0.35")) == Product.create(1, "Apple", Decimal("0.35"))


class TestItemsView:
    def test_items_is_a_snapshot(self, apple):
        cart = ShoppingCart()
        cart.add(apple, 3)

        view = cart.items
        view.clear()

        assert len(cart.items) == 1
        assert cart.total == Decimal("1.05")

    def test_appending_to_items_does_not_add_a_line(self, apple, banana):
        cart = ShoppingCart()
        cart.add(apple, 1)

        cart.items.append(ShoppingCartItem(product=banana, quantity=2))

        assert [item.product.product_id for item in cart.items] == [1]


class TestItemSubtotal:
    def test_subtotal_is_price_times_quantity(self, apple):
        item = ShoppingCartItem(product=apple, quantity=3)
        assert item.subtotal == Decimal("1.05")


class TestTotal:
    def test_apples_and_bananas(self, apple, banana):
        cart = ShoppingCart()
        cart.add(apple, 3)
        cart.add(banana, 9)

        assert len(cart.items) == 2
        assert cart.total == Decimal("7.80")

    def test_a_bunch_of_products(self, apple, banana, donut):
        cart = ShoppingCart()
        cart.add(apple, 10)
        cart.add(banana, 20)
        cart.add(donut, 40)

        assert len(cart.items) == 3
        assert cart.total == Decimal("118.5")

    def test_total_follows_merged_quantities(self, apple):
        cart = ShoppingCart()
        cart.add(apple, 4)
        cart.add(apple, 4)
        assert cart.total == Decimal("2.80")

    def test_add_then_remove_restores_total(self, apple, banana):
        cart = ShoppingCart()
        cart.add(apple, 3)
        before = cart.total

        cart.add(banana, 7)
        cart.remove(banana.product_id)

        assert cart.total == before

    def test_total_after_clear_is_zero(self, apple, banana):
        cart = ShoppingCart()
        cart.add(apple, 3)
        cart.add(banana, 1)
        cart.clear()
        assert cart.total == 0
