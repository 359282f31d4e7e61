import json

from pydantic import ValidationError

from core.logging.logger import get_logger
from sync.github.outcomes import DispatchOutcome
from sync.github.repo_store import PersistenceError, RepositoryStore
from sync.mappers.github_repo_mapper import map_repository


class EventDispatcher:
    """
    서명 검증을 통과한 repository 이벤트를 DB mutation 하나로 변환.
    요청 간 상태 없음
    """

    def __init__(self, store: RepositoryStore, upsert_on_create: bool = False):
        self.store = store
        self.upsert_on_create = upsert_on_create
        self.logger = get_logger(__name__)
        self._handlers = {
            "created": self._on_created,
            "edited": self._on_edited,
            "deleted": self._on_deleted,
        }

    async def dispatch(self, raw_body: bytes) -> DispatchOutcome:
        try:
            payload = json.loads(raw_body.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            self.logger.warning(f"Malformed webhook payload: {e}")
            return DispatchOutcome.MALFORMED

        if not isinstance(payload, dict):
            return DispatchOutcome.IGNORED

        repo = payload.get("repository")
        if not isinstance(repo, dict) or not isinstance(repo.get("name"), str):
            self.logger.info("No repository in payload, ignored")
            return DispatchOutcome.IGNORED

        action = payload.get("action")
        handler = self._handlers.get(action)
        if handler is None:
            self.logger.info(f"Unhandled action={action!r} for {repo['name']}, ignored")
            return DispatchOutcome.IGNORED

        try:
            outcome = await handler(repo)
        except ValidationError as e:
            # description, html_url 등의 타입이 맞지 않는 payload
            self.logger.warning(f"action={action} repo={repo['name']} invalid repository fields: {e}")
            return DispatchOutcome.MALFORMED
        except PersistenceError as e:
            self.logger.error(f"action={action} repo={repo['name']} failed: {e}", exc_info=True)
            return DispatchOutcome.PERSISTENCE_FAILURE

        self.logger.info(f"action={action} repo={repo['name']} -> {outcome.name}")
        return outcome

    async def _on_created(self, repo: dict) -> DispatchOutcome:
        record = map_repository(repo)
        if self.upsert_on_create:
            await self.store.upsert(record)
        else:
            await self.store.insert(record)
        return DispatchOutcome.SAVED

    async def _on_edited(self, repo: dict) -> DispatchOutcome:
        record = map_repository(repo)
        await self.store.update_by_name(record.name, record.editable_fields())
        return DispatchOutcome.UPDATED

    async def _on_deleted(self, repo: dict) -> DispatchOutcome:
        await self.store.delete_by_name(repo["name"])
        return DispatchOutcome.DELETED
