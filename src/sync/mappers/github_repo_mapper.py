from datetime import datetime, timezone
from typing import Any, List, Optional

from sync.github.models import RepositoryRecord


def parse_year(created_at: Any) -> Optional[int]:
    """
    created_at -> 연도

    repository 이벤트는 ISO-8601 문자열, push 이벤트는 unix timestamp(int)를 보냄
    """
    if isinstance(created_at, bool):
        return None
    if isinstance(created_at, (int, float)):
        try:
            return datetime.fromtimestamp(created_at, tz=timezone.utc).year
        except (OverflowError, OSError, ValueError):
            return None
    if isinstance(created_at, str):
        try:
            return datetime.fromisoformat(created_at.replace("Z", "+00:00")).year
        except ValueError:
            return None
    return None


def normalize_topics(topics: Any) -> List[str]:
    if not isinstance(topics, list):
        return []
    # list를 그대로 저장하지 않고 문자열 항목만 남김 (topics는 항상 List[str])
    return [topic for topic in topics if isinstance(topic, str)]


def map_repository(repo: dict) -> RepositoryRecord:
    owner = repo.get("owner") or {}

    return RepositoryRecord(
        name=repo["name"],
        description=repo.get("description") or "",
        year_created=parse_year(repo.get("created_at")),
        image_url=owner.get("avatar_url") if isinstance(owner, dict) else None,
        html_url=repo.get("html_url"),
        topics=normalize_topics(repo.get("topics")),
    )
