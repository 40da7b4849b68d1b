from typing import List, Optional
from datetime import datetime
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class AddToCartRequest(BaseModel):
    """Schema for adding a product to cart. Quantity defaults to 1."""
    product_id: Optional[str] = None
    quantity: Optional[int] = None
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "productId": "65a1f0c2e4b0a1b2c3d4e5f6",
                "quantity": 2
            }
        }


class UpdateCartItemRequest(BaseModel):
    """Schema for setting the quantity of a cart line."""
    product_id: Optional[str] = None
    quantity: Optional[int] = None
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "productId": "65a1f0c2e4b0a1b2c3d4e5f6",
                "quantity": 3
            }
        }


class RemoveFromCartRequest(BaseModel):
    """Schema for removing a product from cart."""
    product_id: Optional[str] = None
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True


class CartProductResponse(BaseModel):
    """Product fields embedded in a cart line."""
    id: str
    title: str
    price: float
    image: Optional[str] = None


class CartItemResponse(BaseModel):
    """Schema for cart item response."""
    product_id: str
    quantity: int
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class CartItemDetailResponse(CartItemResponse):
    """Cart item with product details; product is null once deleted."""
    product: Optional[CartProductResponse] = None


class CartResponse(BaseModel):
    """Schema for cart response."""
    id: str
    user_id: str
    items: List[CartItemResponse]
    total_price: float
    created_at: datetime
    updated_at: datetime
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class CartDetailResponse(CartResponse):
    """Schema for cart response with embedded product details."""
    items: List[CartItemDetailResponse]


class CartEnvelope(BaseModel):
    success: bool = True
    cart: CartResponse


class CartDetailEnvelope(BaseModel):
    success: bool = True
    cart: CartDetailResponse


class MessageResponse(BaseModel):
    success: bool = True
    message: str
