from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from app.utils.helpers import get_current_timestamp


class Product(BaseModel):
    """Product model for MongoDB."""
    id: Optional[str] = Field(None, alias="_id")
    title: str
    description: str = ""
    price: float = Field(ge=0)
    image: Optional[str] = None
    category: Optional[str] = None
    created_at: datetime = Field(default_factory=get_current_timestamp)
    updated_at: datetime = Field(default_factory=get_current_timestamp)
    
    class Config:
        populate_by_name = True
        json_schema_extra = {
            "example": {
                "title": "Smartphone XYZ",
                "description": "High-end smartphone with great features",
                "price": 299.99,
                "image": "https://example.com/image1.jpg",
                "category": "electronics"
            }
        }

    def to_document(self) -> dict:
        """Dump to the dict stored in the products collection (without _id)."""
        return self.model_dump(exclude={"id"})
