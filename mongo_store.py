import datetime
import logging
from typing import Any, Dict, Optional, Union

import motor.motor_asyncio as motor
from bson.objectid import ObjectId

from settings import USERS_COLLECTION
from user_models import UserRecord

logger = logging.getLogger("seed")


# --------------------------
# Helpers
# --------------------------
def _encode_value(v: Any) -> Any:
    if isinstance(v, datetime.datetime):
        return v.isoformat()
    if isinstance(v, ObjectId):
        return str(v)
    if isinstance(v, dict):
        return {k: _encode_value(val) for k, val in v.items()}
    if isinstance(v, list):
        return [_encode_value(i) for i in v]
    return v


def _encode_doc(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    return _encode_value(doc) if doc else None


def _safe_objectid(value: Any) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None


# --------------------------
# Store
# --------------------------
class PortfolioStore:
    def __init__(self, uri: Optional[str], db_name: str, client: Any = None):
        self.client = client if client is not None else motor.AsyncIOMotorClient(uri)
        self.db = self.client[db_name]
        self.col_users = self.db[USERS_COLLECTION]

        logger.info("MongoDB store opened - database=%s", db_name)

    async def close(self):
        if getattr(self, "client", None):
            self.client.close()
            logger.info("MongoDB connection closed")

    # ---------------- Users ----------------
    async def find_any_user(self) -> Optional[Dict[str, Any]]:
        return await self.col_users.find_one({})

    async def insert_user(self, record: UserRecord) -> ObjectId:
        res = await self.col_users.insert_one(record.to_document())
        return res.inserted_id

    async def count_users(self) -> int:
        return await self.col_users.count_documents({})

    async def get_user(self, user_id: Union[str, ObjectId]) -> Optional[Dict[str, Any]]:
        oid = _safe_objectid(user_id)
        if not oid:
            return None
        return await self.col_users.find_one({"_id": oid})
