from typing import Optional
from datetime import datetime
from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


class ProductCreate(BaseModel):
    """Schema for creating a product."""
    title: str = Field(min_length=1)
    description: str = ""
    price: float = Field(ge=0)
    image: Optional[str] = None
    category: Optional[str] = None


class ProductUpdate(BaseModel):
    """Schema for updating a product."""
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    price: Optional[float] = Field(None, ge=0)
    image: Optional[str] = None
    category: Optional[str] = None


class ProductResponse(BaseModel):
    """Schema for product response."""
    id: str
    title: str
    description: str = ""
    price: float
    image: Optional[str] = None
    category: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    
    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
