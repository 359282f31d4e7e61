from dependency_injector import containers, providers
from motor.motor_asyncio import AsyncIOMotorClient

from core.config.settings import settings
from sync.github.event_dispatcher import EventDispatcher
from sync.github.repo_store import RepositoryStore


class AppContainer(containers.DeclarativeContainer):

    config = providers.Object(settings)

    # 프로세스 전체에서 하나의 client를 공유
    mongo_client = providers.Singleton(
        AsyncIOMotorClient,
        config.provided.DATABASE_URL,
    )

    repository_store = providers.Singleton(
        RepositoryStore,
        mongo_client,
        db_name=config.provided.DATABASE_NAME,
        collection_name=config.provided.REPOS_COLLECTION,
    )

    event_dispatcher = providers.Singleton(
        EventDispatcher,
        repository_store,
        upsert_on_create=config.provided.UPSERT_ON_CREATE,
    )
