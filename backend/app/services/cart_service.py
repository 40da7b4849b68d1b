import asyncio
import logging
from typing import Dict, List, Optional, Any

from app.core.exceptions import NotFoundError, ValidationError
from app.models.cart import Cart, CartItem
from app.repositories.cart_repository import CartRepository
from app.repositories.product_repository import ProductRepository
from app.utils.helpers import get_current_timestamp

logger = logging.getLogger(__name__)


class CartService:
    """
    Service for cart operations.

    Every mutation loads the user's cart, changes its item list, recomputes
    the total from current product prices and saves the document once.
    """

    def __init__(self, carts: CartRepository, products: ProductRepository):
        self.carts = carts
        self.products = products

    @staticmethod
    def _find_item(cart: dict, product_id: str) -> Optional[dict]:
        for item in cart["items"]:
            if item["product_id"] == product_id:
                return item
        return None

    async def calculate_total_price(self, items: List[dict]) -> float:
        """
        Sum price * quantity using each product's current price.

        Items whose product no longer exists add nothing to the total but
        stay in the cart.
        """
        products = await asyncio.gather(
            *(self.products.find_by_id(item["product_id"]) for item in items)
        )
        total = 0.0
        for item, product in zip(items, products):
            if product is None:
                continue
            total += product["price"] * item["quantity"]
        return total

    async def _load_cart(self, user_id: str) -> dict:
        cart = await self.carts.find_by_user(user_id)
        if cart is None:
            raise NotFoundError("Cart not found")
        return cart

    async def _save(self, cart: dict) -> dict:
        cart["total_price"] = await self.calculate_total_price(cart["items"])
        cart["updated_at"] = get_current_timestamp()
        await self.carts.save(cart)
        return cart

    async def add_item(
        self,
        user_id: str,
        product_id: Optional[str],
        quantity: Optional[int] = None
    ) -> dict:
        """Add a product to the cart, creating the cart on first use."""
        product = await self.products.find_by_id(product_id)
        if product is None:
            raise NotFoundError("Product not found")

        quantity = quantity or 1
        if quantity < 1:
            raise ValidationError("Quantity must be at least 1")

        product_id = str(product["_id"])
        cart = await self.carts.find_by_user(user_id)

        if cart is None:
            new_cart = Cart(
                user_id=user_id,
                items=[CartItem(product_id=product_id, quantity=quantity)],
                total_price=product["price"] * quantity
            )
            cart = await self.carts.create(new_cart.to_document())
            logger.info("Created cart for user %s", user_id)
            return cart

        item = self._find_item(cart, product_id)
        if item is not None:
            item["quantity"] += quantity
        else:
            cart["items"].append(CartItem(product_id=product_id, quantity=quantity).model_dump())

        logger.debug("Added %s x %d to cart of user %s", product_id, quantity, user_id)
        return await self._save(cart)

    async def get_cart(self, user_id: str) -> Dict[str, Any]:
        """
        Get the user's cart with title, price and image of each product.

        An empty cart is created and persisted if the user has none.
        """
        cart = await self.carts.find_by_user(user_id)
        if cart is None:
            cart = await self.carts.create(Cart(user_id=user_id).to_document())
            logger.info("Created empty cart for user %s", user_id)

        products = await asyncio.gather(
            *(self.products.find_by_id(item["product_id"]) for item in cart["items"])
        )
        items = []
        for item, product in zip(cart["items"], products):
            embedded = None
            if product is not None:
                embedded = {
                    "id": str(product["_id"]),
                    "title": product["title"],
                    "price": product["price"],
                    "image": product.get("image")
                }
            items.append({**item, "product": embedded})

        return {**cart, "items": items}

    async def update_item_quantity(
        self,
        user_id: str,
        product_id: Optional[str],
        quantity: Optional[int]
    ) -> dict:
        """Set the quantity of a line already in the cart."""
        if not product_id or not quantity or quantity < 1:
            raise ValidationError("Product ID and quantity are required")

        cart = await self._load_cart(user_id)
        item = self._find_item(cart, product_id)
        if item is None:
            raise NotFoundError("Product not found in cart")

        item["quantity"] = quantity
        return await self._save(cart)

    async def remove_item(self, user_id: str, product_id: Optional[str]) -> dict:
        """Remove a line from the cart."""
        if not product_id:
            raise ValidationError("Product ID is required")

        cart = await self._load_cart(user_id)
        item = self._find_item(cart, product_id)
        if item is None:
            raise NotFoundError("Product not found in cart")

        cart["items"].remove(item)
        return await self._save(cart)

    async def clear_cart(self, user_id: str) -> None:
        """Empty the cart. The cart document itself is kept."""
        cart = await self._load_cart(user_id)
        cart["items"] = []
        cart["total_price"] = 0.0
        cart["updated_at"] = get_current_timestamp()
        await self.carts.save(cart)
        logger.info("Cleared cart for user %s", user_id)
