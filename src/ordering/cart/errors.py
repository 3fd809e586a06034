"""Shopping cart failures, each keyed by the argument at fault."""

from protean.exceptions import ValidationError


class CartError(ValidationError):
    """Base class for rejected cart operations. The cart is left unchanged."""


class MissingProduct(CartError):
    def __init__(self):
        super().__init__({"product": ["We must have a product."]})


class InvalidQuantity(CartError):
    def __init__(self, quantity):
        self.quantity = quantity
        super().__init__({"quantity": [f"{quantity} is not a valid quantity."]})


class ProductNotInCart(CartError):
    def __init__(self, product_id):
        self.product_id = product_id
        super().__init__({"product_id": [f"Product Id {product_id} is not in the cart."]})
