from typing import List, Optional

from fastapi import HTTPException
from motor.motor_asyncio import AsyncIOMotorCollection

from khet_mitra.core.mongodb import get_advisory_history_collection
from khet_mitra.models.history import AdvisoryKind, AdvisoryRecord


async def save_advisory_record(record: AdvisoryRecord) -> AdvisoryRecord:
    collection: AsyncIOMotorCollection = get_advisory_history_collection()
    try:
        payload = record.model_dump(mode="json", exclude_none=True, by_alias=True)
        await collection.replace_one({"_id": record.id}, payload, upsert=True)
        return record
    except Exception:
        raise HTTPException(status_code=500, detail="Error saving advisory history")


async def get_advisory_records(
    user_id: str, kind: Optional[AdvisoryKind] = None, limit: int = 50
) -> List[AdvisoryRecord]:
    collection: AsyncIOMotorCollection = get_advisory_history_collection()
    query = {"user_id": user_id}
    if kind is not None:
        query["kind"] = kind.value
    try:
        items = collection.find(query).sort("ts", -1).limit(limit)
        return [AdvisoryRecord.model_validate(item) async for item in items]
    except Exception as e:
        raise HTTPException(
            status_code=500, detail=f"Error getting advisory history: {e}"
        )


async def delete_advisory_records_by_user_id(user_id: str) -> bool:
    collection: AsyncIOMotorCollection = get_advisory_history_collection()
    try:
        await collection.delete_many({"user_id": user_id})
        return True
    except Exception:
        raise HTTPException(
            status_code=500,
            detail=f"Error deleting advisory history for user {user_id}",
        )
