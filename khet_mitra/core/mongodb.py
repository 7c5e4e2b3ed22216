from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

from khet_mitra.core.config import settings

_client: AsyncIOMotorClient = None
_database: AsyncIOMotorDatabase = None


def _connect() -> None:
    global _client, _database
    if _client is None:
        mongo_uri = settings.MONGO_DIRECT_URI or settings.MONGO_URI
        _client = AsyncIOMotorClient(mongo_uri, uuidRepresentation="standard")
    if _database is None:
        _database = _client[settings.MONGO_DB_NAME]


async def init_mongo_client() -> None:
    _connect()


async def close_mongo_client() -> None:
    global _client, _database
    if _client is not None:
        _client.close()
    _client = None
    _database = None


def _get_collection(collection_name: str) -> AsyncIOMotorCollection:
    _connect()
    return _database[collection_name]


def get_user_collection() -> AsyncIOMotorCollection:
    return _get_collection("user")


def get_chat_session_collection() -> AsyncIOMotorCollection:
    return _get_collection("chat_session")


def get_message_collection() -> AsyncIOMotorCollection:
    return _get_collection("messages")


def get_advisory_history_collection() -> AsyncIOMotorCollection:
    return _get_collection("advisory_history")


def get_chatroom_message_collection() -> AsyncIOMotorCollection:
    return _get_collection("chatroom_messages")
