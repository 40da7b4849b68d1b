from typing import Dict, Optional, Any

from motor.motor_asyncio import AsyncIOMotorDatabase

COLLECTION = "carts"


class CartRepository:
    """Data access for the carts collection (one document per user)."""

    def __init__(self, db: AsyncIOMotorDatabase):
        self.collection = db[COLLECTION]

    async def find_by_user(self, user_id: str) -> Optional[Dict[str, Any]]:
        return await self.collection.find_one({"user_id": user_id})

    async def create(self, document: Dict[str, Any]) -> Dict[str, Any]:
        result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def save(self, cart: Dict[str, Any]) -> None:
        """Persist the mutable fields of an existing cart."""
        await self.collection.update_one(
            {"_id": cart["_id"]},
            {"$set": {
                "items": cart["items"],
                "total_price": cart["total_price"],
                "updated_at": cart["updated_at"]
            }}
        )
