from fastapi import APIRouter, Depends

from app.api.deps import get_current_user, get_cart_service
from app.schemas.cart import (
    AddToCartRequest,
    UpdateCartItemRequest,
    RemoveFromCartRequest,
    CartResponse,
    CartDetailResponse,
    CartEnvelope,
    CartDetailEnvelope,
    MessageResponse
)
from app.services.cart_service import CartService
from app.utils.helpers import format_document

router = APIRouter()


def _cart_envelope(cart: dict) -> CartEnvelope:
    return CartEnvelope(cart=CartResponse.model_validate(format_document(dict(cart))))


@router.get("", response_model=CartDetailEnvelope)
async def get_cart(
    current_user: dict = Depends(get_current_user),
    cart_service: CartService = Depends(get_cart_service)
):
    """
    Get the current user's cart.

    Each line embeds the product's title, price and image (null if the
    product was deleted). A user without a cart gets a new empty one.
    """
    user_id = str(current_user["_id"])
    cart = await cart_service.get_cart(user_id)
    return CartDetailEnvelope(cart=CartDetailResponse.model_validate(format_document(cart)))


@router.post("/add", response_model=CartEnvelope)
async def add_to_cart(
    request: AddToCartRequest,
    current_user: dict = Depends(get_current_user),
    cart_service: CartService = Depends(get_cart_service)
):
    """
    Add a product to the cart.

    If the product is already in the cart, its quantity is increased.
    """
    user_id = str(current_user["_id"])
    cart = await cart_service.add_item(user_id, request.product_id, request.quantity)
    return _cart_envelope(cart)


@router.put("", response_model=CartEnvelope)
async def update_cart_item(
    request: UpdateCartItemRequest,
    current_user: dict = Depends(get_current_user),
    cart_service: CartService = Depends(get_cart_service)
):
    """Set the quantity of a product already in the cart."""
    user_id = str(current_user["_id"])
    cart = await cart_service.update_item_quantity(user_id, request.product_id, request.quantity)
    return _cart_envelope(cart)


@router.delete("/product", response_model=CartEnvelope)
async def remove_from_cart(
    request: RemoveFromCartRequest,
    current_user: dict = Depends(get_current_user),
    cart_service: CartService = Depends(get_cart_service)
):
    """Remove a product from the cart."""
    user_id = str(current_user["_id"])
    cart = await cart_service.remove_item(user_id, request.product_id)
    return _cart_envelope(cart)


@router.delete("", response_model=MessageResponse)
async def clear_cart(
    current_user: dict = Depends(get_current_user),
    cart_service: CartService = Depends(get_cart_service)
):
    """Clear all items from the cart."""
    user_id = str(current_user["_id"])
    await cart_service.clear_cart(user_id)
    return MessageResponse(message="Cart cleared successfully")
