from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field

from app.utils.helpers import get_current_timestamp


class CartItem(BaseModel):
    """Line item in a shopping cart."""
    product_id: str
    quantity: int = Field(default=1, ge=1)


class Cart(BaseModel):
    """Shopping cart model for MongoDB. One document per user."""
    id: Optional[str] = Field(None, alias="_id")
    user_id: str
    items: List[CartItem] = Field(default_factory=list)
    total_price: float = Field(default=0.0, ge=0)
    created_at: datetime = Field(default_factory=get_current_timestamp)
    updated_at: datetime = Field(default_factory=get_current_timestamp)
    
    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "user_id": "user123",
                "items": [
                    {
                        "product_id": "prod123",
                        "quantity": 2
                    }
                ],
                "total_price": 599.98,
                "created_at": "2024-01-01T00:00:00",
                "updated_at": "2024-01-01T00:00:00"
            }
        }

    def to_document(self) -> dict:
        """Dump to the dict stored in the carts collection (without _id)."""
        return self.model_dump(exclude={"id"})
