from typing import Dict, List, Optional, Any

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ReturnDocument

from app.utils.helpers import parse_object_id

COLLECTION = "products"


class ProductRepository:
    """Data access for the products collection."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[COLLECTION]

    async def find_by_id(self, product_id: Optional[str]) -> Optional[Dict[str, Any]]:
        """Return the product, or None if the id is malformed or unknown."""
        object_id = parse_object_id(product_id)
        if object_id is None:
            return None
        return await self.collection.find_one({"_id": object_id})

    async def list(self, skip: int = 0, limit: int = 50) -> List[Dict[str, Any]]:
        cursor = self.collection.find({}).skip(skip).limit(limit)
        return await cursor.to_list(length=limit)

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def update(self, product_id: str, fields: Dict[str, Any]) -> Optional[Dict[str, Any]]:
        """Apply `fields` with $set and return the updated product, or None."""
        object_id = parse_object_id(product_id)
        if object_id is None:
            return None
        return await self.collection.find_one_and_update(
            {"_id": object_id},
            {"$set": fields},
            return_document=ReturnDocument.AFTER
        )

    async def delete(self, product_id: str) -> bool:
        object_id = parse_object_id(product_id)
        if object_id is None:
            return False
        result = await self.collection.delete_one({"_id": object_id})
        return result.deleted_count == 1
