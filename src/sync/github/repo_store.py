from pymongo.errors import PyMongoError

from core.logging.logger import get_logger
from sync.github.models import RepositoryRecord


class PersistenceError(Exception):
    """MongoDB 호출 실패 (connection, write error 등)"""


class RepositoryStore:
    """
    repositories 컬렉션 wrapper.
    모든 mutation은 단일 document 연산 하나로 끝남 (transaction 없음)
    """

    def __init__(self, mongo, db_name: str, collection_name: str = "repositories"):
        self.db = mongo[db_name]
        self.repos_col = self.db[collection_name]
        self.logger = get_logger(__name__)

    async def insert(self, record: RepositoryRecord) -> None:
        try:
            await self.repos_col.insert_one(record.to_document())
        except PyMongoError as e:
            raise PersistenceError(f"insert failed for {record.name}: {e}") from e

    async def upsert(self, record: RepositoryRecord) -> None:
        try:
            await self.repos_col.replace_one(
                {"name": record.name},
                record.to_document(),
                upsert=True,
            )
        except PyMongoError as e:
            raise PersistenceError(f"upsert failed for {record.name}: {e}") from e

    async def update_by_name(self, name: str, fields: dict) -> int:
        try:
            result = await self.repos_col.update_one({"name": name}, {"$set": fields})
        except PyMongoError as e:
            raise PersistenceError(f"update failed for {name}: {e}") from e
        self.logger.debug(f"update {name}: matched={result.matched_count}")
        return result.matched_count

    async def delete_by_name(self, name: str) -> int:
        try:
            result = await self.repos_col.delete_one({"name": name})
        except PyMongoError as e:
            raise PersistenceError(f"delete failed for {name}: {e}") from e
        self.logger.debug(f"delete {name}: deleted={result.deleted_count}")
        return result.deleted_count
