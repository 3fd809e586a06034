"""Shopping Cart aggregate — line items keyed by product, with a decimal total.

The cart holds at most one item per product id. Adding a product that is
already in the cart increases that item's quantity instead of creating a
second line; the item keeps the product it was first added with and its
position in the cart.
"""

from decimal import Decimal, InvalidOperation

import structlog
from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import HasMany, Integer, String, ValueObject

from ordering.cart.errors import InvalidQuantity, MissingProduct, ProductNotInCart
from ordering.domain import ordering

logger = structlog.get_logger(__name__)


def _as_decimal(amount) -> Decimal:
    # via str(): Decimal(0.35) is not Decimal("0.35")
    return amount if isinstance(amount, Decimal) else Decimal(str(amount))


def _is_positive_integer(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@ordering.value_object
class Product:
    """A catalogue product as the cart sees it.

    ``unit_price`` is kept as canonical decimal text so no precision is lost
    between the catalogue and the cart total; build products from numbers
    with ``Product.create``. Uniqueness of ``product_id`` is the catalogue's
    business; the cart treats two products with the same id as the same
    product.
    """

    product_id = Integer(required=True)
    name = String(max_length=255, sanitize=False)
    unit_price = String(required=True, sanitize=False)

    @classmethod
    def create(cls, product_id, name, unit_price):
        return cls(product_id=product_id, name=name, unit_price=str(_as_decimal(unit_price)))

    @invariant.post
    def unit_price_must_be_a_non_negative_amount(self):
        try:
            amount = Decimal(self.unit_price)
        except (InvalidOperation, TypeError):
            raise ValidationError({"unit_price": [f"{self.unit_price!r} is not an amount"]}) from None
        if not amount.is_finite() or amount < 0:
            raise ValidationError({"unit_price": [f"{self.unit_price!r} is not an amount"]})

    @property
    def price(self) -> Decimal:
        return Decimal(self.unit_price)


@ordering.entity(part_of="ShoppingCart")
class ShoppingCartItem:
    product = ValueObject(Product, required=True)
    quantity = Integer(required=True, min_value=1)

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity


@ordering.aggregate
class ShoppingCart:
    lines = HasMany(ShoppingCartItem)

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def create(cls):
        """Start a new, empty cart."""
        return cls()

    # -------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------
    @property
    def items(self) -> list[ShoppingCartItem]:
        """Snapshot of the line items in the order products were first added."""
        return list(self.lines)

    @property
    def total(self) -> Decimal:
        return sum((item.subtotal for item in self.lines), Decimal("0"))

    def _item_for(self, product_id):
        return next((i for i in self.lines if i.product.product_id == product_id), None)

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add(self, product, quantity):
        """Add ``quantity`` of ``product``, merging into an existing line for the same product id."""
        if product is None:
            raise MissingProduct()
        if not _is_positive_integer(quantity):
            raise InvalidQuantity(quantity)

        existing = self._item_for(product.product_id)
        if existing is not None:
            existing.quantity += quantity
        else:
            self.add_lines(ShoppingCartItem(product=product, quantity=quantity))

        logger.debug(
            "Cart item added",
            cart_id=str(self.id),
            product_id=product.product_id,
            quantity=quantity,
            merged=existing is not None,
        )

    def remove(self, product_id):
        """Drop the whole line for ``product_id``, whatever its quantity."""
        item = self._item_for(product_id)
        if item is None:
            raise ProductNotInCart(product_id)

        self.remove_lines(item)
        logger.debug("Cart item removed", cart_id=str(self.id), product_id=product_id)

    def clear(self):
        for item in list(self.lines):
            self.remove_lines(item)
        logger.debug("Cart cleared", cart_id=str(self.id))
