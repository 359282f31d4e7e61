from motor.motor_asyncio import AsyncIOMotorDatabase


async def ensure_repo_indexes(db: AsyncIOMotorDatabase, collection_name: str = "repositories"):
    col = db[collection_name]

    # update/delete lookup용. created 중복 insert를 허용하므로 unique 아님
    await col.create_index(
        [("name", 1)],
        name="name_lookup",
    )
