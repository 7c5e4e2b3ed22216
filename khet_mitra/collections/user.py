from typing import Optional

from motor.motor_asyncio import AsyncIOMotorCollection

from khet_mitra.core.mongodb import get_user_collection
from khet_mitra.models.user import User


async def get_user_from_id(user_id: str) -> Optional[User]:
    user_collection: AsyncIOMotorCollection = get_user_collection()
    response = await user_collection.find_one({"_id": user_id})
    return User.model_validate(response) if response else None


async def get_user_from_aadhaar(aadhaar: str) -> Optional[User]:
    user_collection: AsyncIOMotorCollection = get_user_collection()
    item = await user_collection.find_one({"aadhaar": aadhaar})
    return User.model_validate(item) if item else None


async def save_user(user: User) -> User:
    user_collection: AsyncIOMotorCollection = get_user_collection()
    payload = user.model_dump(mode="json", exclude_none=True, by_alias=True)
    await user_collection.replace_one({"_id": user.id}, payload, upsert=True)
    response = await user_collection.find_one({"_id": user.id})
    return User.model_validate(response)


async def update_user_fields(user_id: str, **fields) -> Optional[User]:
    user_collection: AsyncIOMotorCollection = get_user_collection()
    await user_collection.update_one({"_id": user_id}, {"$set": fields})
    return await get_user_from_id(user_id)


async def delete_user(user_id: str) -> bool:
    user_collection: AsyncIOMotorCollection = get_user_collection()
    result = await user_collection.delete_one({"_id": user_id})
    return result.deleted_count > 0
